"""
Furniture Catalog

Read-only furniture catalog loaded from a JSON seed file. The placement
engine and the AI advisor only ever receive the immutable item list.
"""

import functools
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from layout_planner.config import get_settings
from layout_planner.models.room import FurnitureItem


logger = logging.getLogger(__name__)

_ITEMS_ADAPTER = TypeAdapter(List[FurnitureItem])


class CatalogError(Exception):
    """The furniture catalog could not be loaded."""


class FurnitureCatalog:
    """
    In-memory furniture catalog ordered by catalog ID.

    Items without an ID keep their file order after the numbered ones.
    """

    def __init__(self, items: Sequence[FurnitureItem]):
        self._items = tuple(
            sorted(items, key=lambda item: (item.id is None, item.id or 0))
        )

    @classmethod
    def from_json_file(cls, path: Path) -> "FurnitureCatalog":
        """
        Load a catalog from a JSON array of furniture records.

        Raises:
            CatalogError: If the file is missing, not JSON, or a record is invalid
        """
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            raise CatalogError(f"Cannot read furniture catalog {path}: {e}") from e

        try:
            items = _ITEMS_ADAPTER.validate_json(raw)
        except ValidationError as e:
            raise CatalogError(f"Invalid furniture catalog {path}: {e}") from e

        logger.info("Loaded %d furniture items from %s", len(items), path)
        return cls(items)

    def find_all(self) -> List[FurnitureItem]:
        return list(self._items)

    def find_by_category(self, category: str) -> Optional[FurnitureItem]:
        """First item of the category in catalog order, case-insensitive."""
        for item in self._items:
            if item.is_category(category):
                return item
        return None

    def find_by_name(self, name: str) -> Optional[FurnitureItem]:
        """Exact name lookup, used to resolve AI suggestions."""
        for item in self._items:
            if item.name == name:
                return item
        return None


@functools.lru_cache()
def get_catalog() -> FurnitureCatalog:
    """
    Get the shared catalog instance.
    Cached so the seed file is parsed once per process.
    """
    return FurnitureCatalog.from_json_file(get_settings().resolved_catalog_path)
