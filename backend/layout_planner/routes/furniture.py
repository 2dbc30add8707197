"""
Furniture Route

GET /furniture - List the furniture catalog.
GET /furniture/category/{category} - First catalog item of a category.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from layout_planner.models.api import ErrorResponse
from layout_planner.models.room import FurnitureItem
from layout_planner.services.catalog import FurnitureCatalog, get_catalog


router = APIRouter(prefix="/furniture", tags=["Furniture"])


@router.get("", response_model=List[FurnitureItem])
async def list_furniture(
    catalog: FurnitureCatalog = Depends(get_catalog)
) -> List[FurnitureItem]:
    """Return every catalog item in catalog order."""
    return catalog.find_all()


@router.get(
    "/category/{category}",
    response_model=FurnitureItem,
    responses={404: {"model": ErrorResponse}},
)
async def furniture_by_category(
    category: str,
    catalog: FurnitureCatalog = Depends(get_catalog)
) -> FurnitureItem:
    """
    Return the item the layout engine would pick for a category.

    Matching is case-insensitive; the first item in catalog order wins.
    """
    item = catalog.find_by_category(category)
    if item is None:
        raise HTTPException(status_code=404, detail=f"No {category} found in furniture database.")
    return item
