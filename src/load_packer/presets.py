"""Standard shipping containers as ready-made bins."""

from __future__ import annotations

from typing import Optional

from load_packer.geometry import Dimension
from load_packer.models import Bin

# Interior (width, height, depth) in metres. Depth runs from the doors to the front wall.
BIN_PRESETS: dict[str, Dimension] = {
    "20":   (2.352, 2.395, 5.900),
    "20HC": (2.330, 2.700, 5.891),
    "40":   (2.352, 2.395, 12.032),
    "40HC": (2.350, 2.700, 12.032),
    "48HC": (2.352, 2.698, 14.470),
    "53HC": (2.489, 2.769, 15.951),
}
# 52HC is sold under both names
BIN_PRESETS["52HC"] = BIN_PRESETS["53HC"]


def get_bin_dims(preset: str) -> dict[str, float]:
    """Width/height/depth keyword arguments for `Bin`, looked up case-insensitively."""
    dims = BIN_PRESETS.get(preset.strip().upper())
    if dims is None:
        raise ValueError(f"No bin preset named '{preset}' (known: {', '.join(sorted(BIN_PRESETS))})")
    width, height, depth = dims
    return {"width": width, "height": height, "depth": depth}


def make_bin(preset: str, max_weight: float = 0.0, name: Optional[str] = None) -> Bin:
    return Bin(name=name or preset.strip().upper(), max_weight=max_weight, **get_bin_dims(preset))
