"""
Geometry Utilities

Spatial operations on placed furniture:
- Room containment and overlap predicates, compared edge by edge
- Converting placements to Shapely box polygons
- Overlap areas and collision reports (Shapely)
- Occupancy (floor coverage) calculations

All functions are pure validation predicates or reports. They never
choose positions or mutate anything.
"""

from typing import Iterable, List, Tuple

from shapely.geometry import Polygon, box

from layout_planner.models.room import PlacedItem


# Absorbs floating-point rounding at the far walls
EPSILON = 1e-6


def bbox_to_polygon(x: float, y: float, width: float, depth: float) -> Polygon:
    """
    Convert a bottom-left corner and extents to a Shapely box.

    Example:
        >>> bbox_to_polygon(1.0, 2.0, 2.0, 0.5).bounds
        (1.0, 2.0, 3.0, 2.5)
    """
    return box(x, y, x + width, y + depth)


def item_to_polygon(item: PlacedItem) -> Polygon:
    """Convert a PlacedItem to a Shapely Polygon."""
    return bbox_to_polygon(item.x, item.y, item.width, item.depth)


def fits(item: PlacedItem, room_width: float, room_height: float) -> bool:
    """
    Check if a placement lies fully inside the room.

    The near walls are strict (x >= 0, y >= 0); the far walls accept
    an overshoot of EPSILON. Compared edge by edge so zero-size items
    lying on a wall still fit.

    Args:
        item: Candidate placement
        room_width: Room extent along X (the room length)
        room_height: Room extent along Y (the room width)

    Returns:
        True if the item is within room bounds
    """
    return (
        item.x >= 0
        and item.y >= 0
        and item.x + item.width <= room_width + EPSILON
        and item.y + item.depth <= room_height + EPSILON
    )


def overlaps(a: PlacedItem, b: PlacedItem) -> bool:
    """
    Check if two placements overlap.

    Only interior intersection counts: rectangles sharing an edge or a
    corner do not overlap: a 2 m sofa at x=0 and a table at x=2 are
    neighbors, not a collision.
    """
    return not (
        a.x + a.width <= b.x
        or b.x + b.width <= a.x
        or a.y + a.depth <= b.y
        or b.y + b.depth <= a.y
    )


def overlaps_any(candidate: PlacedItem, placed: Iterable[PlacedItem]) -> bool:
    """True if the candidate overlaps any already placed item."""
    return any(overlaps(candidate, other) for other in placed)


def calculate_overlap_area(a: PlacedItem, b: PlacedItem) -> float:
    """
    Calculate the overlapping area between two placements.

    Returns:
        Overlap area in square meters. Returns 0 if no overlap.
    """
    return item_to_polygon(a).intersection(item_to_polygon(b)).area


def find_collisions(items: List[PlacedItem]) -> List[Tuple[str, str, float]]:
    """
    Find all pairs of overlapping placements.

    Args:
        items: Placements to check, in any order

    Returns:
        List of tuples: (name_a, name_b, overlap_area)
    """
    collisions = []
    for i, item_a in enumerate(items):
        for item_b in items[i + 1:]:
            if overlaps(item_a, item_b):
                collisions.append(
                    (item_a.name, item_b.name, calculate_overlap_area(item_a, item_b))
                )
    return collisions


def calculate_furniture_density(
    room_width: float,
    room_height: float,
    items: List[PlacedItem]
) -> float:
    """
    Calculate what percentage of the room floor is occupied by furniture.

    Returns:
        Percentage (0-100) of room area occupied
    """
    room_area = room_width * room_height
    if room_area <= 0:
        return 0.0

    furniture_area = sum(item.width * item.depth for item in items)
    return (furniture_area / room_area) * 100
