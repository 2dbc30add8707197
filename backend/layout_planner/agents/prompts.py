"""
Advisor Prompts

Prompt builders for the Gemini layout advisor.
"""

from typing import Sequence

from layout_planner.core.placement import WALL_CLEARANCE
from layout_planner.models.room import FurnitureItem, RoomSpec


LAYOUT_PROMPT_TEMPLATE = """You are an expert interior designer. Your task is to create an optimal furniture layout for a room.

ROOM SPECIFICATIONS:
- Dimensions: {length:.1f} meters (length) x {width:.1f} meters (width)
- Budget: ${budget}
- Wall clearance required: {clearance:.1f} meters from all walls
- Usable space: {usable_length:.1f} meters x {usable_width:.1f} meters (accounting for wall clearance)

AVAILABLE FURNITURE OPTIONS:
{furniture_text}

INTERIOR DESIGN PRINCIPLES TO FOLLOW:
1. Create conversation areas and focal points
2. Ensure proper traffic flow (minimum 1 meter pathways)
3. Place larger furniture (sofas, beds) against walls when possible
4. Consider natural light and room function
5. Balance the room visually
6. Stay within budget constraint
7. Maintain minimum {clearance} meters clearance from walls

COORDINATE SYSTEM:
- Origin (0, 0) is at the bottom-left corner of the room
- X-axis runs along the length (0 to {length} meters)
- Y-axis runs along the width (0 to {width} meters)
- Coordinates (x, y) represent the CENTER of each furniture piece
- All furniture must fit within the room boundaries with proper clearance

REQUIRED OUTPUT FORMAT (JSON only, no additional text):
{{
  "suggestedFurniture": [
    {{
      "name": "Exact furniture name from the available list",
      "x": <x-coordinate in meters>,
      "y": <y-coordinate in meters>,
      "reasoning": "Brief explanation for this placement"
    }}
  ],
  "totalEstimatedCost": <total cost of selected furniture>,
  "reasoning": "Overall design strategy and layout explanation"
}}

IMPORTANT:
- Only use furniture names EXACTLY as listed above
- Do NOT exceed the budget of ${budget}
- Ensure all coordinates are within room bounds with clearance
- Provide ONLY the JSON response, no additional commentary
- Select 3-7 pieces of furniture for a balanced room
"""


def describe_furniture(item: FurnitureItem) -> str:
    return (
        f"- {item.name} (Category: {item.category})\n"
        f"  Dimensions: {item.width:.2f} m (width) x {item.depth:.2f} m (depth)\n"
        f"  Price: ${item.price}"
    )


def build_layout_prompt(room: RoomSpec, furniture: Sequence[FurnitureItem]) -> str:
    """
    Build the full layout prompt.

    Args:
        room: Room dimensions and budget
        furniture: Every catalog item the AI may choose from

    Returns:
        Prompt asking for a JSON layout with center coordinates
    """
    return LAYOUT_PROMPT_TEMPLATE.format(
        length=room.length,
        width=room.width,
        budget=room.budget,
        clearance=WALL_CLEARANCE,
        usable_length=room.length - 2 * WALL_CLEARANCE,
        usable_width=room.width - 2 * WALL_CLEARANCE,
        furniture_text="\n".join(describe_furniture(item) for item in furniture),
    )


def build_simplified_prompt(room: RoomSpec, furniture: Sequence[FurnitureItem]) -> str:
    """Short retry prompt used when the full prompt yields unparsable output."""
    names = ", ".join(item.name for item in furniture) or "none"
    return (
        f"Create a furniture layout for a {room.length:.1f}m x {room.width:.1f}m room "
        f"with a ${room.budget} budget. Available furniture: {names}. "
        "Return JSON with suggestedFurniture array containing name, x, y coordinates, "
        "and reasoning."
    )
