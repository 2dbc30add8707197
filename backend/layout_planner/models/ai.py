"""
AI Layout Suggestion Models

Schema of the alternative layout proposed by the Gemini advisor. AI
coordinates are item CENTERS, unlike engine placements which store the
bottom-left corner.
"""

from typing import List

from pydantic import Field

from layout_planner.models.room import WireModel


class SuggestedFurniture(WireModel):
    """A single AI-proposed placement."""
    name: str = Field(..., description="Catalog furniture name")
    x: float = Field(..., description="Center X in meters")
    y: float = Field(..., description="Center Y in meters")
    reasoning: str = Field(default="", description="Why the AI put it here")


class AILayoutSuggestion(WireModel):
    """
    Output of the AI advisor.

    An empty `suggested_furniture` list means the advisor was unavailable
    or produced nothing usable.
    """
    suggested_furniture: List[SuggestedFurniture] = Field(default_factory=list)
    total_estimated_cost: int = 0
    reasoning: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.suggested_furniture
