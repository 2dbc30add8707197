"""
API Request/Response Schemas

Pydantic models for API endpoints.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from layout_planner.models.ai import AILayoutSuggestion
from layout_planner.models.room import LayoutResult, PlacedItem, RoomSpec, WireModel


# ============ Layout Endpoint ============

class LayoutRequest(WireModel):
    """Room form input; ranges mirror what the planner UI accepts."""
    length: float = Field(..., ge=3, le=15, description="Room length in meters")
    width: float = Field(..., ge=3, le=15, description="Room width in meters")
    budget: int = Field(..., ge=500, le=10000, description="Budget in currency units")

    def to_room_spec(self) -> RoomSpec:
        return RoomSpec(length=self.length, width=self.width, budget=self.budget)


# ============ Suggest Endpoint ============

class SuggestionResponse(WireModel):
    """
    Response from /suggest endpoint.

    `source` is "ai" when the advisor returned furniture, otherwise "rules"
    and `fallback_layout` carries the deterministic layout.
    """
    source: Literal["ai", "rules"]
    suggestion: AILayoutSuggestion = Field(default_factory=AILayoutSuggestion)
    placed: List[PlacedItem] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)
    total_cost: int = 0
    floor_coverage: float = Field(default=0.0, description="Percent of floor covered")
    fallback_layout: Optional[LayoutResult] = None


class AdvisorStatusResponse(BaseModel):
    """Response from /suggest/status endpoint."""
    configured: bool
    reachable: bool


# ============ Health Check ============

class HealthResponse(BaseModel):
    """Response from /health endpoint."""
    status: str = "ok"
    version: str
    message: str = "Room Layout Planner API is running"


# ============ Error Response ============

class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
    error_code: Optional[str] = None
    context: Optional[dict] = None
