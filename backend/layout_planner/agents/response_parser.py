"""
Advisor Response Parsing

Turns raw Gemini text into an AILayoutSuggestion. Malformed items are
dropped, out-of-range coordinates are pulled back inside the wall
clearance band.
"""

import json
import logging
from typing import Any, Dict, Optional

from layout_planner.core.placement import WALL_CLEARANCE
from layout_planner.models.ai import AILayoutSuggestion, SuggestedFurniture
from layout_planner.models.room import RoomSpec


logger = logging.getLogger(__name__)


def extract_json_text(response_text: str) -> str:
    """
    Strip markdown fences and any prose around the outermost JSON object.
    """
    cleaned = response_text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    if cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    cleaned = cleaned.strip()

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        return cleaned[start:end + 1]
    return cleaned


def is_valid_coordinate(x: float, y: float, room: RoomSpec) -> bool:
    """Center lies within the clearance band of the room."""
    return (
        WALL_CLEARANCE <= x <= room.length - WALL_CLEARANCE
        and WALL_CLEARANCE <= y <= room.width - WALL_CLEARANCE
    )


def _parse_item(data: Any, room: RoomSpec) -> Optional[SuggestedFurniture]:
    try:
        name = str(data["name"])
        x = float(data["x"])
        y = float(data["y"])
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Dropping malformed furniture suggestion %r: %s", data, e)
        return None

    if not is_valid_coordinate(x, y, room):
        logger.warning(
            "Invalid coordinates for %s: (%s, %s). Adjusting to fit room bounds.", name, x, y
        )
        x = max(WALL_CLEARANCE, min(x, room.length - WALL_CLEARANCE))
        y = max(WALL_CLEARANCE, min(y, room.width - WALL_CLEARANCE))

    reasoning = data.get("reasoning") or ""
    return SuggestedFurniture(name=name, x=x, y=y, reasoning=str(reasoning))


def _parse_cost(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def parse_ai_response(response_text: str, room: RoomSpec) -> AILayoutSuggestion:
    """
    Parse the advisor's JSON answer.

    Args:
        response_text: Raw model output, possibly fenced or wrapped in prose
        room: Room used to validate and clamp coordinates

    Returns:
        AILayoutSuggestion with every well-formed item

    Raises:
        ValueError: If no JSON object can be read from the response
    """
    cleaned = extract_json_text(response_text)
    try:
        data: Dict[str, Any] = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse AI response as JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("AI response is not a JSON object")

    items = data.get("suggestedFurniture") or []
    if not isinstance(items, list):
        raise ValueError("suggestedFurniture is not a list")

    suggested = [
        parsed for parsed in (_parse_item(item, room) for item in items)
        if parsed is not None
    ]

    logger.info("Parsed %d furniture suggestions", len(suggested))
    return AILayoutSuggestion(
        suggested_furniture=suggested,
        total_estimated_cost=_parse_cost(data.get("totalEstimatedCost", 0)),
        reasoning=str(data.get("reasoning") or ""),
    )
