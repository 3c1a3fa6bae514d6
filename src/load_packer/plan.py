"""Build a Packer from a request, run it, and report the result."""

from __future__ import annotations

from typing import Any

from load_packer.config import get_settings
from load_packer.io.schemas import (
    BinPlanSchema,
    PackRequestSchema,
    PackResultSchema,
    PackSummarySchema,
    PlacementSchema,
)
from load_packer.metrics import compute_metrics
from load_packer.models import Bin, Item
from load_packer.packer import Packer
from load_packer.presets import make_bin


def _expand_name(name: str, index: int, quantity: int) -> str:
    return name if quantity == 1 else f"{name}_{index:04d}"


def build_packer(request: PackRequestSchema) -> Packer:
    """
    Expand quantities and presets into a ready-to-pack Packer.

    Falls back to LOAD_PACKER_DEFAULT_PRESETS when the request names no bins.

    Raises:
        ValueError: on an unknown preset key.
    """
    packer = Packer()

    presets = request.bin_presets
    if not request.bins and not presets:
        presets = get_settings().default_presets

    for b in request.bins:
        for i in range(b.quantity):
            packer.add_bin(Bin(
                name=_expand_name(b.name, i, b.quantity),
                width=b.width,
                height=b.height,
                depth=b.depth,
                max_weight=b.max_weight,
            ))
    for preset in presets:
        packer.add_bin(make_bin(preset))

    for it in request.items:
        for i in range(it.quantity):
            packer.add_item(Item(
                name=_expand_name(it.name, i, it.quantity),
                width=it.width,
                height=it.height,
                depth=it.depth,
                weight=it.weight,
            ))
    return packer


def bin_plan(b: Bin) -> BinPlanSchema:
    m = compute_metrics(b)
    return BinPlanSchema(
        name=b.name,
        width=b.width,
        height=b.height,
        depth=b.depth,
        max_weight=b.max_weight,
        placements=[
            PlacementSchema(
                name=i.name,
                position=list(i.position),
                dimension=list(i.get_dimension()),
                rotation_type=int(i.rotation_type),
                rotation=i.rotation_type.label,
            )
            for i in b.items
        ],
        **m.model_dump(),
    )


def render_text(packer: Packer) -> str:
    lines: list[str] = []
    for b in packer.bins:
        if not b.items:
            continue
        lines.append(str(b))
        lines.extend(f"  {i}" for i in b.items)
    if packer.unfit_items:
        lines.append("unfit:")
        lines.extend(f"  {i}" for i in packer.unfit_items)
    return "\n".join(lines)


def run_pack(request: PackRequestSchema | dict[str, Any]) -> PackResultSchema:
    """Pack the request and report every bin, the unfit items and the totals."""
    if not isinstance(request, PackRequestSchema):
        request = PackRequestSchema.model_validate(request)

    packer = build_packer(request)
    requested = len(packer.items)
    packer.pack()

    bins = [bin_plan(b) for b in packer.bins]
    packed = sum(len(b.placements) for b in bins)
    return PackResultSchema(
        bins=bins,
        unfit=[i.name for i in packer.unfit_items],
        summary=PackSummarySchema(
            requested_items=requested,
            packed_items=packed,
            unfit_items=len(packer.unfit_items),
            bins_used=sum(1 for b in bins if b.placements),
        ),
        text=render_text(packer),
    )
