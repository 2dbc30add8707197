"""
Layout Route

POST /layout - Generate the rule-based furniture layout for a room.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from layout_planner.core.placement import generate_layout
from layout_planner.models.api import ErrorResponse, LayoutRequest
from layout_planner.models.room import LayoutResult
from layout_planner.services.catalog import FurnitureCatalog, get_catalog


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/layout", tags=["Layout"])


@router.post(
    "",
    response_model=LayoutResult,
    responses={503: {"model": ErrorResponse}},
)
async def create_layout(
    request: LayoutRequest,
    catalog: FurnitureCatalog = Depends(get_catalog)
) -> LayoutResult:
    """
    Generate a furniture layout for the room.

    This endpoint:
    1. Validates the room form (length/width 3-15 m, budget 500-10000)
    2. Runs the placement engine over the catalog
    3. Returns placements, cost totals and warnings

    Placement failures are reported as warnings in a 200 response, never
    as errors.
    """
    try:
        return generate_layout(request.to_room_spec(), catalog.find_all())
    except Exception as e:
        logger.exception("Layout generation failed")
        raise HTTPException(
            status_code=500,
            detail=f"Layout generation failed: {str(e)}"
        )
