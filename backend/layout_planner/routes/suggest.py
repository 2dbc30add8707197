"""
Suggest Route

POST /suggest - Ask the Gemini advisor for an alternative layout.
Falls back to the rule-based layout when the advisor is unavailable.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from layout_planner.agents.layout_advisor import LayoutAdvisor, get_optional_advisor
from layout_planner.core.placement import generate_layout
from layout_planner.models.ai import AILayoutSuggestion
from layout_planner.models.api import (
    AdvisorStatusResponse,
    ErrorResponse,
    LayoutRequest,
    SuggestionResponse,
)
from layout_planner.services.catalog import FurnitureCatalog, get_catalog
from layout_planner.services.review import review_suggestion


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggest", tags=["AI Suggestions"])


@router.post(
    "",
    response_model=SuggestionResponse,
    responses={503: {"model": ErrorResponse}},
)
async def suggest_layout(
    request: LayoutRequest,
    catalog: FurnitureCatalog = Depends(get_catalog),
    advisor: Optional[LayoutAdvisor] = Depends(get_optional_advisor)
) -> SuggestionResponse:
    """
    Generate an AI layout suggestion for the room.

    This endpoint:
    1. Sends the room and catalog to Gemini (when configured)
    2. Reviews the answer against walls, overlaps and budget
    3. Falls back to the rule-based layout when the AI gives nothing usable
       or names no furniture from the catalog

    The advisor never causes an error response; its failures are logged
    and answered with the fallback layout.
    """
    room = request.to_room_spec()
    furniture = catalog.find_all()

    suggestion = AILayoutSuggestion()
    if advisor is not None:
        suggestion = await advisor.suggest_layout(room, furniture)

    if suggestion.is_empty:
        return SuggestionResponse(
            source="rules",
            suggestion=suggestion,
            fallback_layout=generate_layout(room, furniture),
        )

    review = review_suggestion(suggestion, room, catalog)
    if not review.placed:
        logger.warning("AI suggestion named no catalog furniture, using rule-based layout")
        return SuggestionResponse(
            source="rules",
            suggestion=suggestion,
            issues=review.issues,
            fallback_layout=generate_layout(room, furniture),
        )

    return SuggestionResponse(
        source="ai",
        suggestion=suggestion,
        placed=review.placed,
        issues=review.issues,
        total_cost=review.total_cost,
        floor_coverage=review.floor_coverage,
    )


@router.get("/status", response_model=AdvisorStatusResponse)
async def advisor_status(
    advisor: Optional[LayoutAdvisor] = Depends(get_optional_advisor)
) -> AdvisorStatusResponse:
    """Report whether the AI advisor is configured and answering."""
    if advisor is None:
        return AdvisorStatusResponse(configured=False, reachable=False)
    return AdvisorStatusResponse(configured=True, reachable=await advisor.test_connection())
