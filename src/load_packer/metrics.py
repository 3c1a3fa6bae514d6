from __future__ import annotations

from pydantic import BaseModel

from load_packer.models import Bin


class BinMetrics(BaseModel):
    """Utilisation of a single bin. Weight figures are informational only."""

    used_volume: float = 0.0
    bin_volume: float = 0.0
    fill_rate: float = 0.0
    used_weight: float = 0.0
    weight_fill_rate: float = 0.0


def compute_metrics(b: Bin) -> BinMetrics:
    used_volume = sum(i.volume for i in b.items)
    bin_volume = b.volume
    fill_rate = 0.0 if bin_volume == 0 else used_volume / bin_volume
    used_weight = sum(i.weight for i in b.items)
    weight_fill_rate = used_weight / b.max_weight if b.max_weight > 0 else 0.0
    return BinMetrics(
        used_volume=used_volume,
        bin_volume=bin_volume,
        fill_rate=fill_rate,
        used_weight=used_weight,
        weight_fill_rate=weight_fill_rate,
    )
