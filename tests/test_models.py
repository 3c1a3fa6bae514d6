from __future__ import annotations

import pytest
from pydantic import ValidationError

from load_packer.geometry import RotationType
from load_packer.models import Bin, Item


def test_bin_attributes() -> None:
    b = Bin(name="TestBin", width=10, height=20, depth=30, max_weight=100)

    assert b.name == "TestBin"
    assert (b.width, b.height, b.depth) == (10, 20, 30)
    assert b.max_weight == 100
    assert b.items == []
    assert Bin(name="TestBin", width=2, height=3, depth=4, max_weight=100).volume == 24


def test_item_attributes() -> None:
    item = Item(name="TestItem", width=5, height=6, depth=7, weight=2)

    assert item.name == "TestItem"
    assert (item.width, item.height, item.depth) == (5, 6, 7)
    assert item.weight == 2
    assert item.rotation_type == RotationType.WHD
    assert item.position == (0, 0, 0)


def test_item_volume_is_rotation_invariant() -> None:
    item = Item(name="TestItem", width=2, height=3, depth=4, weight=1)

    for rotation_type in RotationType:
        item.rotation_type = rotation_type
        w, h, d = item.get_dimension()
        assert w * h * d == 24
        assert item.volume == 24


def test_item_dimension_follows_rotation() -> None:
    item = Item(name="TestItem", width=2, height=3, depth=4, weight=1)
    item.rotation_type = RotationType.HWD

    assert item.get_dimension() == (3, 2, 4)


def test_item_intersect() -> None:
    item1 = Item(name="Item1", width=2, height=2, depth=2, weight=1)
    item2 = Item(name="Item2", width=2, height=2, depth=2, weight=1)
    item2.position = (1, 1, 1)

    assert item1.intersect(item2) is True

    item2.position = (2, 0, 0)
    assert item1.intersect(item2) is False
    assert item1.position == (0, 0, 0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 1, "depth": 1},
        {"width": 1, "height": -1, "depth": 1},
        {"width": 1, "height": 1, "depth": 1, "weight": -5},
    ],
)
def test_item_invalid_construction_fails_fast(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        Item(name="Bad", **kwargs)


def test_bin_invalid_construction_fails_fast() -> None:
    with pytest.raises(ValidationError):
        Bin(name="Bad", width=10, height=0, depth=10)
    with pytest.raises(ValidationError):
        Bin(name="Bad", width=10, height=10, depth=10, max_weight=-1)


def test_put_item_fits() -> None:
    b = Bin(name="TestBin", width=10, height=10, depth=10, max_weight=100)
    item = Item(name="TestItem", width=2, height=2, depth=2, weight=1)

    assert b.put_item(item, (0, 0, 0)) is True
    assert len(b.items) == 1
    assert b.items[0] is item


def test_put_item_does_not_fit() -> None:
    b = Bin(name="TestBin", width=1, height=1, depth=1, max_weight=100)
    item = Item(name="TestItem", width=2, height=2, depth=2, weight=1)

    assert b.put_item(item, (0, 0, 0)) is False
    assert len(b.items) == 0


def test_put_item_picks_only_fitting_rotation() -> None:
    """(5, 2, 9) only fits a 9 x 5 x 2 bin as (d, w, h)."""
    b = Bin(name="Flat", width=9, height=5, depth=2)
    item = Item(name="Plank", width=5, height=2, depth=9)

    assert b.put_item(item, (0, 0, 0)) is True
    assert item.rotation_type == RotationType.DWH
    assert item.get_dimension() == (9, 5, 2)


def test_put_item_rejects_when_no_rotation_fits() -> None:
    b = Bin(name="Flat", width=8, height=5, depth=2)
    item = Item(name="Plank", width=5, height=2, depth=9)

    assert b.put_item(item, (0, 0, 0)) is False
    assert b.items == []
    # failed attempts leave the item untouched
    assert item.rotation_type == RotationType.WHD
    assert item.position == (0, 0, 0)


def test_put_item_tries_next_rotation_after_overlap() -> None:
    """An overlap rejects only that rotation; a later one may still fit."""
    b = Bin(name="B", width=4, height=4, depth=1)
    first = Item(name="First", width=2, height=4, depth=1)
    assert b.put_item(first, (0, 0, 0)) is True

    # WHD (4, 1, 1) at (0, 3, 0) overlaps First; HWD (1, 4, 1) is out of bounds;
    # HDW (1, 1, 4) is too deep; DHW (1, 1, 4) too deep; DWH (1, 4, 1) out of bounds;
    # WDH (4, 1, 1) overlaps again -> rejected everywhere at this pivot.
    bar = Item(name="Bar", width=4, height=1, depth=1)
    assert b.put_item(bar, (0, 3, 0)) is False

    # At (2, 0, 0): WHD (4, 1, 1) is too wide, HWD (1, 4, 1) fits.
    assert b.put_item(bar, (2, 0, 0)) is True
    assert bar.rotation_type == RotationType.HWD
    assert first.intersect(bar) is False


def test_find_placement_does_not_mutate() -> None:
    b = Bin(name="Flat", width=9, height=5, depth=2)
    item = Item(name="Plank", width=5, height=2, depth=9)

    placement = b.find_placement(item, (0, 0, 0))

    assert placement is not None
    assert placement.rotation_type == RotationType.DWH
    assert placement.position == (0, 0, 0)
    assert placement.dimension == (9, 5, 2)
    assert b.items == []
    assert item.rotation_type == RotationType.WHD


def test_string_rendering() -> None:
    b = Bin(name="Bin", width=10, height=20, depth=30, max_weight=100)
    item = Item(name="Item", width=2, height=3, depth=4, weight=1.5)
    item.position = (2, 0, 0)
    item.rotation_type = RotationType.HWD

    assert str(b) == "Bin(10x20x30, max_weight:100)"
    assert str(item) == "Item(2x3x4, weight: 1.5) pos(2,0,0) rt(RotationType_HWD (h,w,d))"
