"""Geometry utilities for 3D bin packing."""

from __future__ import annotations

from enum import IntEnum

Pivot = tuple[float, float, float]
Dimension = tuple[float, float, float]

ORIGIN: Pivot = (0.0, 0.0, 0.0)


class Axis(IntEnum):
    WIDTH = 0
    HEIGHT = 1
    DEPTH = 2


class RotationType(IntEnum):
    """
    The six axis-aligned orientations of an item.

    Enumeration order is also the order in which placement tries them.
    """

    WHD = 0
    HWD = 1
    HDW = 2
    DHW = 3
    DWH = 4
    WDH = 5

    @property
    def label(self) -> str:
        return ROTATION_LABELS[self]


ROTATION_LABELS: dict[RotationType, str] = {
    RotationType.WHD: "RotationType_WHD (w,h,d)",
    RotationType.HWD: "RotationType_HWD (h,w,d)",
    RotationType.HDW: "RotationType_HDW (h,d,w)",
    RotationType.DHW: "RotationType_DHW (d,h,w)",
    RotationType.DWH: "RotationType_DWH (d,w,h)",
    RotationType.WDH: "RotationType_WDH (w,d,h)",
}

# index of the intrinsic (w, h, d) component placed on each axis
_PERMUTATIONS: dict[RotationType, tuple[int, int, int]] = {
    RotationType.WHD: (0, 1, 2),
    RotationType.HWD: (1, 0, 2),
    RotationType.HDW: (1, 2, 0),
    RotationType.DHW: (2, 1, 0),
    RotationType.DWH: (2, 0, 1),
    RotationType.WDH: (0, 2, 1),
}


def rotate(dimension: Dimension, rotation_type: RotationType) -> Dimension:
    """Return `dimension` (w, h, d) oriented according to `rotation_type`."""
    a, b, c = _PERMUTATIONS[RotationType(rotation_type)]
    return (float(dimension[a]), float(dimension[b]), float(dimension[c]))


def rect_intersect(
    p1: Pivot,
    d1: Dimension,
    p2: Pivot,
    d2: Dimension,
    x: Axis,
    y: Axis,
) -> bool:
    """
    Overlap test of two boxes projected on the (x, y) plane.

    Compares the distance between the box centers with the sum of their
    half-extents on each axis. Touching boxes (zero gap) are NOT overlapping.
    """
    cx1 = p1[x] + d1[x] / 2
    cy1 = p1[y] + d1[y] / 2
    cx2 = p2[x] + d2[x] / 2
    cy2 = p2[y] + d2[y] / 2

    ix = max(cx1, cx2) - min(cx1, cx2)
    iy = max(cy1, cy2) - min(cy1, cy2)

    return ix < (d1[x] + d2[x]) / 2 and iy < (d1[y] + d2[y]) / 2


def cuboids_intersect(p1: Pivot, d1: Dimension, p2: Pivot, d2: Dimension) -> bool:
    """Two cuboids intersect only if they overlap on all three axis-pair projections."""
    return (
        rect_intersect(p1, d1, p2, d2, Axis.WIDTH, Axis.HEIGHT)
        and rect_intersect(p1, d1, p2, d2, Axis.HEIGHT, Axis.DEPTH)
        and rect_intersect(p1, d1, p2, d2, Axis.WIDTH, Axis.DEPTH)
    )


def fits_within(pivot: Pivot, dimension: Dimension, bounds: Dimension) -> bool:
    return all(pivot[a] + dimension[a] <= bounds[a] for a in Axis)


def candidate_pivot(position: Pivot, dimension: Dimension, axis: Axis) -> Pivot:
    """Corner next to a placed box: its position pushed out by its extent along `axis`."""
    x, y, z = (float(v) for v in position)
    if axis == Axis.WIDTH:
        return (x + dimension[0], y, z)
    if axis == Axis.HEIGHT:
        return (x, y + dimension[1], z)
    return (x, y, z + dimension[2])
