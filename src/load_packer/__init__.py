"""Greedy 3D bin packing."""

from load_packer.geometry import Axis, RotationType
from load_packer.models import Bin, Item, Placement
from load_packer.packer import Packer

__all__ = ["Axis", "Bin", "Item", "Packer", "Placement", "RotationType"]
