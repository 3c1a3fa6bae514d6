from __future__ import annotations

import pytest

from load_packer.io.schemas import PackRequestSchema
from load_packer.metrics import compute_metrics
from load_packer.models import Bin, Item
from load_packer.plan import build_packer, run_pack
from load_packer.presets import get_bin_dims, make_bin


def test_get_bin_dims_is_case_insensitive() -> None:
    assert get_bin_dims(" 40hc ") == {"width": 2.350, "height": 2.700, "depth": 12.032}


def test_52hc_is_an_alias_of_53hc() -> None:
    assert get_bin_dims("52HC") == get_bin_dims("53HC")


def test_get_bin_dims_unknown_preset() -> None:
    with pytest.raises(ValueError, match="No bin preset named .99XL."):
        get_bin_dims("99XL")


def test_make_bin() -> None:
    b = make_bin("20", max_weight=28000)

    assert b.name == "20"
    assert b.depth == 5.9
    assert b.max_weight == 28000


def test_compute_metrics() -> None:
    b = Bin(name="Bin", width=10, height=10, depth=10, max_weight=100)
    b.put_item(Item(name="A", width=5, height=10, depth=10, weight=25), (0, 0, 0))

    m = compute_metrics(b)

    assert m.used_volume == 500
    assert m.bin_volume == 1000
    assert m.fill_rate == 0.5
    assert m.used_weight == 25
    assert m.weight_fill_rate == 0.25


def test_compute_metrics_without_max_weight() -> None:
    m = compute_metrics(Bin(name="Bin", width=1, height=1, depth=1))

    assert m.fill_rate == 0.0
    assert m.weight_fill_rate == 0.0


def test_build_packer_expands_quantities_and_presets() -> None:
    request = PackRequestSchema(
        bins=[{"name": "Crate", "width": 1, "height": 1, "depth": 1, "quantity": 2}],
        bin_presets=["20"],
        items=[
            {"name": "A", "width": 0.5, "height": 0.5, "depth": 0.5, "quantity": 3},
            {"name": "B", "width": 0.2, "height": 0.2, "depth": 0.2},
        ],
    )

    packer = build_packer(request)

    assert [b.name for b in packer.bins] == ["Crate_0000", "Crate_0001", "20"]
    assert [i.name for i in packer.items] == ["A_0000", "A_0001", "A_0002", "B"]


def test_build_packer_uses_default_presets(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOAD_PACKER_DEFAULT_PRESETS", "20, 40HC")
    request = PackRequestSchema(items=[{"name": "A", "width": 1, "height": 1, "depth": 1}])

    packer = build_packer(request)

    assert [b.name for b in packer.bins] == ["20", "40HC"]


def test_run_pack_summary() -> None:
    result = run_pack({
        "bins": [{"name": "Bin", "width": 4, "height": 4, "depth": 4}],
        "items": [{"name": "C", "width": 2, "height": 2, "depth": 2, "quantity": 9}],
    })

    assert result.summary.requested_items == 9
    assert result.summary.packed_items == 8
    assert result.summary.unfit_items == 1
    assert result.summary.bins_used == 1
    assert result.bins[0].fill_rate == 1.0
    assert result.unfit == ["C_0008"]
    assert result.text.startswith("Bin(4x4x4, max_weight:0)")
