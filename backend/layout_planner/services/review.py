"""
Suggestion Review

Checks an AI layout suggestion against the catalog, the room walls and
the budget using the same geometry engine as the rule-based layout.
"""

from typing import List, NamedTuple

from layout_planner.core.geometry import (
    calculate_furniture_density,
    find_collisions,
    fits,
)
from layout_planner.models.ai import AILayoutSuggestion
from layout_planner.models.room import PlacedItem, RoomSpec
from layout_planner.services.catalog import FurnitureCatalog


class SuggestionReview(NamedTuple):
    placed: List[PlacedItem]
    issues: List[str]
    total_cost: int
    floor_coverage: float


def review_suggestion(
    suggestion: AILayoutSuggestion,
    room: RoomSpec,
    catalog: FurnitureCatalog
) -> SuggestionReview:
    """
    Resolve suggested names to catalog items and report every problem.

    AI coordinates are centers; they are converted to bottom-left corners
    before the geometry checks.

    Returns:
        SuggestionReview with the resolved placements (in suggestion order),
        human-readable issues, the real catalog cost and floor coverage (%)
    """
    placed: List[PlacedItem] = []
    issues: List[str] = []

    for suggested in suggestion.suggested_furniture:
        item = catalog.find_by_name(suggested.name)
        if item is None:
            issues.append(f"Unknown furniture '{suggested.name}' suggested by AI.")
            continue
        placement = PlacedItem(
            furniture=item,
            x=suggested.x - item.width / 2,
            y=suggested.y - item.depth / 2,
        )
        if not fits(placement, room.length, room.width):
            issues.append(f"{item.name} extends beyond the room walls.")
        placed.append(placement)

    for name_a, name_b, area in find_collisions(placed):
        issues.append(f"{name_a} overlaps {name_b} ({area:.2f} m²).")

    total_cost = sum(p.price for p in placed)
    if total_cost > room.budget:
        issues.append(
            f"Suggested furniture costs {total_cost}, over the budget of {room.budget}."
        )

    return SuggestionReview(
        placed=placed,
        issues=issues,
        total_cost=total_cost,
        floor_coverage=round(calculate_furniture_density(room.length, room.width, placed), 1),
    )
