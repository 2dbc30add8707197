"""
Placement Sequencer

Deterministic, rule-based furniture placement for a single rectangular room.

The sequencer walks a fixed category order:

    sofa -> coffee table -> TV stand -> bookshelf -> side table -> armchair

For each slot it looks up the first catalog item of that category, asks the
category's rule for a candidate position, validates it with the geometry
engine and, when accepted, commits its price to the budget accountant.
Every failure becomes either a warning string or a silent skip; nothing is
raised to the caller.

Mandatory categories (sofa, coffee table, TV stand) are never budget-gated
and warn on every failure. Optional categories (bookshelf, side table,
armchair) are budget-gated and mostly fail silently; only a bookshelf that
fits but is too expensive produces a warning.
"""

import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

from layout_planner.core.budget import BudgetAccountant
from layout_planner.core.geometry import fits, overlaps_any
from layout_planner.models.room import (
    Category,
    FurnitureItem,
    LayoutResult,
    PlacedItem,
    Rejection,
    RejectionReason,
    RoomSpec,
)


logger = logging.getLogger(__name__)


# ============ Placement Constants (meters) ============

WALL_CLEARANCE = 0.5      # sofa and TV stand distance from their wall
COFFEE_DISTANCE = 0.8     # gap between sofa and coffee table
MIN_EDGE_OFFSET = 0.1     # lower bound for centered positions
CORNER_OFFSET = 0.1       # bookshelf corner position
SIDE_TABLE_GAP = 0.1      # gap between anchor and side table
ARMCHAIR_GAP = 0.3        # gap between coffee table and armchair
ARMCHAIR_CORNER_OFFSET = 0.2

PLACEMENT_ORDER: Tuple[Category, ...] = (
    Category.SOFA,
    Category.COFFEE,
    Category.TVSTAND,
    Category.BOOKSHELF,
    Category.SIDETABLE,
    Category.ARMCHAIR,
)

MISSING_WARNINGS: Dict[Category, str] = {
    Category.SOFA: "No sofa found in furniture database.",
    Category.COFFEE: "No coffee table found in furniture database.",
    Category.TVSTAND: "No TV stand found in furniture database.",
}


class PlacementContext(NamedTuple):
    """Read-only view of a run handed to each category rule."""
    room: RoomSpec
    placed: Tuple[PlacedItem, ...]
    longest_is_horizontal: bool
    budget: BudgetAccountant

    @property
    def room_w(self) -> float:
        return self.room.length

    @property
    def room_h(self) -> float:
        return self.room.width

    @property
    def anchor(self) -> Optional[PlacedItem]:
        """The first placed item (the sofa whenever it was accepted)."""
        return self.placed[0] if self.placed else None

    def is_free(self, candidate: PlacedItem) -> bool:
        """Inside the room and clear of every placed item."""
        return (
            fits(candidate, self.room_w, self.room_h)
            and not overlaps_any(candidate, self.placed)
        )


Outcome = Union[PlacedItem, Rejection]
Rule = Callable[[PlacementContext, FurnitureItem], Outcome]


def _reject(
    category: Category,
    reason: RejectionReason,
    warning: Optional[str] = None
) -> Rejection:
    return Rejection(category=category, reason=reason, warning=warning)


# ============ Candidate Positions ============

def sofa_position(
    room: RoomSpec,
    sofa: FurnitureItem,
    longest_is_horizontal: bool
) -> Tuple[float, float]:
    """
    Sofa against the longest wall, centered along it.

    Horizontal rooms put the sofa on the top wall, vertical rooms on the
    left wall.
    """
    if longest_is_horizontal:
        return (max(MIN_EDGE_OFFSET, (room.length - sofa.width) / 2), WALL_CLEARANCE)
    return (WALL_CLEARANCE, max(MIN_EDGE_OFFSET, (room.width - sofa.depth) / 2))


def coffee_position(
    anchor: PlacedItem,
    coffee: FurnitureItem,
    longest_is_horizontal: bool
) -> Tuple[float, float]:
    """Coffee table COFFEE_DISTANCE in front of the sofa, centered on it."""
    if longest_is_horizontal:
        x = anchor.x + (anchor.width - coffee.width) / 2
        y = anchor.y + anchor.depth + COFFEE_DISTANCE
    else:
        x = anchor.x + anchor.width + COFFEE_DISTANCE
        y = anchor.y + (anchor.depth - coffee.depth) / 2
    return (x, y)


def tv_stand_position(
    room: RoomSpec,
    tv: FurnitureItem,
    longest_is_horizontal: bool
) -> Tuple[float, float]:
    """TV stand on the wall opposite the sofa, centered along it."""
    if longest_is_horizontal:
        x = max(MIN_EDGE_OFFSET, (room.length - tv.width) / 2)
        y = room.width - tv.depth - WALL_CLEARANCE
    else:
        x = room.length - tv.width - WALL_CLEARANCE
        y = max(MIN_EDGE_OFFSET, (room.width - tv.depth) / 2)
    return (x, y)


def side_table_position(anchor: PlacedItem) -> Tuple[float, float]:
    return (anchor.x + anchor.width + SIDE_TABLE_GAP, anchor.y)


def armchair_positions(
    placed: Sequence[PlacedItem],
    room: RoomSpec,
    armchair: FurnitureItem
) -> List[Tuple[float, float]]:
    """
    Armchair candidates in preference order.

    One slot beside every placed coffee table (insertion order), then the
    corner fallback.
    """
    candidates = [
        (item.x + item.width + ARMCHAIR_GAP, item.y)
        for item in placed
        if item.furniture.is_category(Category.COFFEE.value)
    ]
    candidates.append(
        (ARMCHAIR_CORNER_OFFSET, room.width - armchair.depth - ARMCHAIR_CORNER_OFFSET)
    )
    return candidates


# ============ Category Rules ============

def place_sofa(ctx: PlacementContext, sofa: FurnitureItem) -> Outcome:
    x, y = sofa_position(ctx.room, sofa, ctx.longest_is_horizontal)
    candidate = PlacedItem(furniture=sofa, x=x, y=y)
    # First item: nothing to overlap with
    if fits(candidate, ctx.room_w, ctx.room_h):
        return candidate
    return _reject(
        Category.SOFA, RejectionReason.GEOMETRIC,
        "Sofa does not fit the room with the chosen orientation."
    )


def place_coffee_table(ctx: PlacementContext, coffee: FurnitureItem) -> Outcome:
    if ctx.anchor is None:
        return _reject(
            Category.COFFEE, RejectionReason.NO_ANCHOR,
            "Coffee table skipped because no sofa was placed."
        )
    x, y = coffee_position(ctx.anchor, coffee, ctx.longest_is_horizontal)
    candidate = PlacedItem(furniture=coffee, x=x, y=y)
    if ctx.is_free(candidate):
        return candidate
    return _reject(
        Category.COFFEE, RejectionReason.GEOMETRIC,
        "Coffee table could not be placed without overlap."
    )


def place_tv_stand(ctx: PlacementContext, tv: FurnitureItem) -> Outcome:
    if ctx.anchor is None:
        return _reject(
            Category.TVSTAND, RejectionReason.NO_ANCHOR,
            "TV stand skipped because no sofa was placed."
        )
    x, y = tv_stand_position(ctx.room, tv, ctx.longest_is_horizontal)
    candidate = PlacedItem(furniture=tv, x=x, y=y)
    if ctx.is_free(candidate):
        return candidate
    return _reject(
        Category.TVSTAND, RejectionReason.GEOMETRIC,
        "TV stand could not be placed without overlap."
    )


def place_bookshelf(ctx: PlacementContext, bookshelf: FurnitureItem) -> Outcome:
    candidate = PlacedItem(furniture=bookshelf, x=CORNER_OFFSET, y=CORNER_OFFSET)
    if not ctx.is_free(candidate):
        return _reject(Category.BOOKSHELF, RejectionReason.GEOMETRIC)
    if not ctx.budget.can_afford(bookshelf.price):
        return _reject(
            Category.BOOKSHELF, RejectionReason.BUDGET,
            "Bookshelf available but exceeds budget."
        )
    return candidate


def place_side_table(ctx: PlacementContext, side_table: FurnitureItem) -> Outcome:
    if ctx.anchor is None:
        return _reject(Category.SIDETABLE, RejectionReason.NO_ANCHOR)
    x, y = side_table_position(ctx.anchor)
    candidate = PlacedItem(furniture=side_table, x=x, y=y)
    if not ctx.is_free(candidate):
        return _reject(Category.SIDETABLE, RejectionReason.GEOMETRIC)
    if not ctx.budget.can_afford(side_table.price):
        return _reject(Category.SIDETABLE, RejectionReason.BUDGET)
    return candidate


def place_armchair(ctx: PlacementContext, armchair: FurnitureItem) -> Outcome:
    if not ctx.budget.can_afford(armchair.price):
        return _reject(Category.ARMCHAIR, RejectionReason.BUDGET)
    for x, y in armchair_positions(ctx.placed, ctx.room, armchair):
        candidate = PlacedItem(furniture=armchair, x=x, y=y)
        if ctx.is_free(candidate):
            return candidate
    return _reject(Category.ARMCHAIR, RejectionReason.GEOMETRIC)


RULES: Dict[Category, Rule] = {
    Category.SOFA: place_sofa,
    Category.COFFEE: place_coffee_table,
    Category.TVSTAND: place_tv_stand,
    Category.BOOKSHELF: place_bookshelf,
    Category.SIDETABLE: place_side_table,
    Category.ARMCHAIR: place_armchair,
}


# ============ Engine Entry Point ============

def find_by_category(
    furniture: Sequence[FurnitureItem],
    category: str
) -> Optional[FurnitureItem]:
    """First item whose category matches, case-insensitive."""
    for item in furniture:
        if item.is_category(category):
            return item
    return None


def generate_layout(room: RoomSpec, furniture: Sequence[FurnitureItem]) -> LayoutResult:
    """
    Place at most one item per known category into the room.

    Args:
        room: Room dimensions and budget
        furniture: Catalog items; only the first item of each category is used

    Returns:
        LayoutResult with placements in placement order, cost totals and
        warnings for every reported failure
    """
    budget = BudgetAccountant(room.budget)
    longest_is_horizontal = room.length >= room.width
    placed: List[PlacedItem] = []
    warnings: List[str] = []

    for category in PLACEMENT_ORDER:
        item = find_by_category(furniture, category.value)
        if item is None:
            outcome: Outcome = _reject(
                category, RejectionReason.CATEGORY_MISSING, MISSING_WARNINGS.get(category)
            )
        else:
            ctx = PlacementContext(room, tuple(placed), longest_is_horizontal, budget)
            outcome = RULES[category](ctx, item)

        if isinstance(outcome, Rejection):
            logger.debug("Skipped %s (%s)", category.value, outcome.reason.value)
            if outcome.warning:
                warnings.append(outcome.warning)
            continue

        placed.append(outcome)
        budget.commit(outcome.price)

    logger.info(
        "Layout for %.1fm x %.1fm room: %d placed, cost %d of %d, %d warning(s)",
        room.length, room.width, len(placed), budget.spent, room.budget, len(warnings)
    )
    return LayoutResult(
        room=room,
        placed=placed,
        total_cost=budget.spent,
        remaining_budget=budget.remaining,
        warnings=warnings,
    )
