from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional

from load_packer.config import configure_logging
from load_packer.io.schemas import PackRequestSchema
from load_packer.plan import run_pack


def load_input(path: Path) -> PackRequestSchema:
    """
    Read a packing request from JSON.

    Expected shape:
        {
            "bins": [{"name": "Small", "width": 10, "height": 10, "depth": 10, "max_weight": 100}],
            "bin_presets": ["40HC"],
            "items": [{"name": "A", "width": 2, "height": 3, "depth": 4, "weight": 1, "quantity": 5}]
        }
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    return PackRequestSchema.model_validate(data)


def write_plan(plan: dict, path: str = "plan.json") -> None:
    """
    Write a plan dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, sort_keys=True)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Load Packer CLI")
    parser.add_argument("--input", required=True, help="Input packing request JSON file")
    parser.add_argument("--output", required=True, help="Output plan JSON file")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to LOAD_PACKER_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Also print every packed bin and item",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    request = load_input(Path(args.input))
    result = run_pack(request)

    write_plan(result.model_dump(mode="json"), args.output)

    s = result.summary
    print(
        f"Packed {s.packed_items}/{s.requested_items}, Unfit {s.unfit_items}, "
        f"BinsUsed={s.bins_used}"
    )
    if args.text and result.text:
        print(result.text)
    print(f"Plan written to {args.output}")


if __name__ == "__main__":
    main()
