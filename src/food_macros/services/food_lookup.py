"""Food lookup against the catalog store."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_macros.domain.errors import (
    RecordNotFoundError,
    StoreUnavailableError,
    UnrecognizedFoodError,
)
from food_macros.domain.foods import FoodRecord

FOOD_DESCRIPTIONS: dict[str, str] = {
    "egg": "Egg, whole, boiled or poached",
    "rice": "Rice, cooked, NFS",
    "banana": "Banana, raw",
}

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Read interface for the food catalog store."""

    def find_by_description(self, description: str) -> FoodRecord | None:
        """Return the first record whose description matches, ignoring case."""


def canonical_description(object_name: str) -> str | None:
    """Return the catalog description for a recognized object name."""
    return FOOD_DESCRIPTIONS.get(object_name)


@dataclass
class FoodLookupService:
    """Resolves recognized object names to catalog records."""

    repository: FoodRepository

    def lookup(self, object_name: str) -> FoodRecord:
        """Fetch the catalog record for an object name."""
        description = canonical_description(object_name)
        if description is None:
            raise UnrecognizedFoodError(object_name)

        _logger.info(
            "Looking up food: object=%s description=%s", object_name, description
        )
        try:
            record = self.repository.find_by_description(description)
        except Exception as exc:
            raise StoreUnavailableError(object_name, description) from exc
        if record is None:
            raise RecordNotFoundError(object_name, description)

        _logger.info(
            "Found food: %s with %s portions", record.description, len(record.portions)
        )
        return record
