"""
Room and Furniture Data Models

These Pydantic models define the core data structures for representing
rooms, catalog furniture, placements and the resulting layout. They serve
as the "contract" between the placement engine and every presentation
layer (JSON API, AI advisor, tests).

Coordinates are in meters with the origin at the room's bottom-left
corner: X runs along the room length, Y along the room width.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Category(str, Enum):
    """Furniture categories understood by the placement engine."""
    SOFA = "sofa"
    COFFEE = "coffee"
    TVSTAND = "tvstand"
    BOOKSHELF = "bookshelf"
    SIDETABLE = "sidetable"
    ARMCHAIR = "armchair"


class RoomSpec(WireModel):
    """
    Room dimensions and budget as handed to the engine.

    The engine does not re-validate ranges; request schemas do that.
    """
    length: float = Field(..., description="Horizontal extent in meters (X axis)")
    width: float = Field(..., description="Vertical extent in meters (Y axis)")
    budget: int = Field(..., description="Budget in whole currency units")


class FurnitureItem(WireModel):
    """
    A catalog furniture piece.

    Attributes:
        id: Catalog identifier (ordering key of the catalog)
        name: Unique display name (e.g., "Oslo 3-Seat Sofa")
        category: Free-form category string, matched case-insensitively
        width: Extent along the X axis in meters
        depth: Extent along the Y axis in meters
        price: Price in whole currency units
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = Field(default=None, description="Catalog ID")
    name: str = Field(..., description="Unique display name")
    category: str = Field(..., description="Furniture category")
    width: float = Field(..., ge=0, description="Size along X in meters")
    depth: float = Field(..., ge=0, description="Size along Y in meters")
    price: int = Field(..., ge=0, description="Price in currency units")

    def is_category(self, category: str) -> bool:
        """Case-insensitive category match."""
        return self.category.lower() == str(category).lower()


class PlacedItem(WireModel):
    """
    A furniture item bound to its bottom-left corner position.

    Never mutated after creation; re-placing means building a new one.
    """
    model_config = ConfigDict(frozen=True)

    furniture: FurnitureItem
    x: float
    y: float

    @computed_field
    @property
    def name(self) -> str:
        return self.furniture.name

    @computed_field
    @property
    def width(self) -> float:
        return self.furniture.width

    @computed_field
    @property
    def depth(self) -> float:
        return self.furniture.depth

    @property
    def price(self) -> int:
        return self.furniture.price


class LayoutResult(WireModel):
    """
    Output of one engine run.

    `placed` keeps placement order; later rules refer to the first placed
    item, and renderers draw in this order.
    """
    room: RoomSpec
    placed: List[PlacedItem] = Field(default_factory=list)
    total_cost: int = 0
    remaining_budget: int = 0
    warnings: List[str] = Field(default_factory=list)


class RejectionReason(str, Enum):
    """Why a category slot produced no placement."""
    CATEGORY_MISSING = "category_missing"
    NO_ANCHOR = "no_anchor"  # nothing placed yet to position against
    GEOMETRIC = "geometric"
    BUDGET = "budget"


class Rejection(BaseModel):
    """A failed placement attempt; `warning` is None for silent skips."""
    model_config = ConfigDict(frozen=True)

    category: Category
    reason: RejectionReason
    warning: Optional[str] = None
