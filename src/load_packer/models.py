from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from load_packer.geometry import (
    Dimension,
    Pivot,
    RotationType,
    cuboids_intersect,
    fits_within,
    rotate,
)


class Item(BaseModel):
    """Item model: a placeable cuboid with intrinsic dimensions and a mutable orientation."""

    name: str = Field(description="Identifier of the item, for diagnostics")
    width: float = Field(gt=0, description="Intrinsic width of the item")
    height: float = Field(gt=0, description="Intrinsic height of the item")
    depth: float = Field(gt=0, description="Intrinsic depth of the item")
    weight: float = Field(default=0.0, ge=0, description="Weight of the item")

    # Mutated only by Bin.put_item
    rotation_type: RotationType = Field(
        default=RotationType.WHD,
        description="Current orientation of the item",
    )
    position: tuple[float, float, float] = Field(
        default=(0.0, 0.0, 0.0),
        description="Current pivot (minimum corner) of the item",
    )

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    @property
    def dimensions(self) -> Dimension:
        return (self.width, self.height, self.depth)

    def get_dimension(self) -> Dimension:
        """Effective (rotated) dimension for the current rotation type."""
        return rotate(self.dimensions, self.rotation_type)

    def intersect(self, other: "Item") -> bool:
        return cuboids_intersect(
            self.position, self.get_dimension(), other.position, other.get_dimension()
        )

    def __str__(self) -> str:
        x, y, z = self.position
        return (
            f"{self.name}({self.width:g}x{self.height:g}x{self.depth:g}, weight: {self.weight:g}) "
            f"pos({x:g},{y:g},{z:g}) rt({RotationType(self.rotation_type).label})"
        )


class Placement(BaseModel):
    """Accepted placement: where an item goes and how it is oriented."""

    item_name: str = Field(description="Name of the placed item")
    x: float = Field(ge=0, description="X coordinate of the item pivot")
    y: float = Field(ge=0, description="Y coordinate of the item pivot")
    z: float = Field(ge=0, description="Z coordinate of the item pivot")
    rotation_type: RotationType = Field(description="Accepted orientation")

    # Oriented dimensions after rotation: (W, H, D)
    dimension: tuple[float, float, float] = Field(
        description="Oriented dimensions (W, H, D) of the placed item"
    )

    @property
    def position(self) -> Pivot:
        return (self.x, self.y, self.z)


class Bin(BaseModel):
    """Bin model: a container with fixed interior dimensions and the items placed in it."""

    name: str = Field(description="Identifier of the bin")
    width: float = Field(gt=0, description="Interior width of the bin")
    height: float = Field(gt=0, description="Interior height of the bin")
    depth: float = Field(gt=0, description="Interior depth of the bin")
    max_weight: float = Field(
        default=0.0,
        ge=0,
        description="Maximum weight; advisory only, never enforced by packing",
    )
    items: list[Item] = Field(
        default_factory=list,
        description="Placed items, in placement order",
    )

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    @property
    def dimensions(self) -> Dimension:
        return (self.width, self.height, self.depth)

    def find_placement(self, item: Item, pivot: Pivot) -> Optional[Placement]:
        """
        Probe whether `item` can go at `pivot` without changing anything.

        Rotations are tried in RotationType order. A rotation is rejected if the
        item would stick out of the bin, or if it would intersect an item that is
        already placed. The first rotation that passes both checks wins.

        Returns:
            The accepted Placement, or None if no rotation fits.
        """
        pivot = (float(pivot[0]), float(pivot[1]), float(pivot[2]))
        for rotation_type in RotationType:
            dimension = rotate(item.dimensions, rotation_type)
            if not fits_within(pivot, dimension, self.dimensions):
                continue
            if any(
                cuboids_intersect(placed.position, placed.get_dimension(), pivot, dimension)
                for placed in self.items
            ):
                continue
            return Placement(
                item_name=item.name,
                x=pivot[0],
                y=pivot[1],
                z=pivot[2],
                rotation_type=rotation_type,
                dimension=dimension,
            )
        return None

    def put_item(self, item: Item, pivot: Pivot) -> bool:
        """
        Place `item` at `pivot` and append it to the bin if any rotation fits.

        On failure neither the bin nor the item is modified.
        """
        placement = self.find_placement(item, pivot)
        if placement is None:
            return False
        item.rotation_type = placement.rotation_type
        item.position = placement.position
        self.items.append(item)
        return True

    def __str__(self) -> str:
        return (
            f"{self.name}({self.width:g}x{self.height:g}x{self.depth:g}, "
            f"max_weight:{self.max_weight:g})"
        )
