"""Data schemas for input/output operations."""

from typing import List, Optional
from pydantic import BaseModel, Field

class ItemSchema(BaseModel):
    """Schema for an item (or `quantity` identical items)."""
    name: str = Field(description="Name of the item")
    width: float = Field(gt=0, description="Width of the item")
    height: float = Field(gt=0, description="Height of the item")
    depth: float = Field(gt=0, description="Depth of the item")
    weight: float = Field(ge=0, default=0.0, description="Weight of the item")
    quantity: int = Field(ge=1, default=1, description="Number of identical items")

class BinSchema(BaseModel):
    """Schema for a bin (or `quantity` identical bins)."""
    name: str = Field(description="Name of the bin")
    width: float = Field(gt=0, description="Width of the bin")
    height: float = Field(gt=0, description="Height of the bin")
    depth: float = Field(gt=0, description="Depth of the bin")
    max_weight: float = Field(ge=0, default=0.0, description="Maximum weight capacity (advisory)")
    quantity: int = Field(ge=1, default=1, description="Number of identical bins")

class PackRequestSchema(BaseModel):
    """Schema for a packing request."""
    bins: List[BinSchema] = Field(default_factory=list, description="Explicit bins")
    bin_presets: List[str] = Field(default_factory=list, description="Preset bin keys, e.g. 40HC")
    items: List[ItemSchema] = Field(min_length=1, description="List of items to pack")

class PlacementSchema(BaseModel):
    """Schema for a placed item."""
    name: str
    position: List[float] = Field(description="Pivot (x, y, z)")
    dimension: List[float] = Field(description="Oriented dimensions (w, h, d)")
    rotation_type: int = Field(ge=0, le=5)
    rotation: str = Field(description="Human-readable rotation label")

class BinPlanSchema(BaseModel):
    """Schema for one bin of a packing result."""
    name: str
    width: float
    height: float
    depth: float
    max_weight: float
    placements: List[PlacementSchema] = Field(default_factory=list)
    used_volume: float = 0.0
    bin_volume: float = 0.0
    fill_rate: float = 0.0
    used_weight: float = 0.0
    weight_fill_rate: float = 0.0

class PackSummarySchema(BaseModel):
    """Schema for packing totals."""
    requested_items: int
    packed_items: int
    unfit_items: int
    bins_used: int

class PackResultSchema(BaseModel):
    """Schema for a packing result."""
    bins: List[BinPlanSchema] = Field(description="Every bin, smallest first")
    unfit: List[str] = Field(default_factory=list, description="Names of items that fit nowhere")
    summary: PackSummarySchema
    text: Optional[str] = Field(default=None, description="Human-readable rendering")
