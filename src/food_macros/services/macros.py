"""Volume to weight to macro conversion."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from food_macros.domain.errors import (
    FoodLookupError,
    NoConversionAvailableError,
    NonFiniteResultError,
    StoreUnavailableError,
)
from food_macros.domain.foods import FoodRecord, Nutrient, Portion
from food_macros.domain.macros import MacroProfile, MacroResult, VolumeItem
from food_macros.services.food_lookup import FoodLookupService

CUP_MARKER = "1 cup"
EGG_PORTION = "1 egg"
EGGS_PER_CUP = 4.5

# FDC nutrient numbers, amounts per 100 g.
_NUTRIENT_CODES = {
    "208": "calories",
    "203": "protein",
    "204": "fat",
    "205": "carbs",
}

_logger = logging.getLogger(__name__)


def resolve_cup_grams(portions: Iterable[Portion], object_name: str) -> float | None:
    """Return grams per cup from the portion list, or None if unavailable.

    The first portion whose description contains "1 cup" wins. Eggs without
    a cup measurement fall back to 4.5 times the "1 egg" portion.
    """
    portions = tuple(portions)
    for portion in portions:
        _logger.debug(
            "Portion for %s: %s = %sg",
            object_name,
            portion.description,
            portion.gram_weight,
        )
    for portion in portions:
        if CUP_MARKER in portion.description:
            _logger.info(
                "Found cup measurement: %s = %sg",
                portion.description,
                portion.gram_weight,
            )
            return portion.gram_weight

    _logger.info("No cup measurement found for %s", object_name)
    if object_name == "egg":
        for portion in portions:
            if portion.description == EGG_PORTION:
                return portion.gram_weight * EGGS_PER_CUP
    return None


def scale_macros(nutrients: Iterable[Nutrient], grams: float) -> MacroProfile:
    """Scale per-100g tracked nutrients to the given weight."""
    ratio = grams / 100.0
    values = {"calories": 0.0, "protein": 0.0, "fat": 0.0, "carbs": 0.0}
    for nutrient in nutrients:
        field_name = _NUTRIENT_CODES.get(nutrient.code)
        if field_name is not None:
            values[field_name] = nutrient.amount * ratio
    return MacroProfile(**values)


def compute(record: FoodRecord, object_name: str, volume_cups: float) -> MacroResult:
    """Convert a volume of a food record into weight and macros.

    Raises NoConversionAvailableError when no cup or fallback portion exists,
    and NonFiniteResultError when scaling overflows.
    """
    cup_grams = resolve_cup_grams(record.portions, object_name)
    if cup_grams is None:
        raise NoConversionAvailableError(object_name)

    calculated_grams = volume_cups * cup_grams
    macros = scale_macros(record.nutrients, calculated_grams)
    totals = (
        calculated_grams,
        macros.calories,
        macros.protein,
        macros.fat,
        macros.carbs,
    )
    if not all(math.isfinite(value) for value in totals):
        raise NonFiniteResultError(object_name, volume_cups)

    return MacroResult(
        found=True,
        requested_food=object_name,
        requested_volume=volume_cups,
        calculated_weight=calculated_grams,
        macros=macros,
    )


@dataclass
class MacroService:
    """Processes batches of volume items into macro results."""

    lookup_service: FoodLookupService

    def calculate(self, items: Iterable[VolumeItem]) -> list[MacroResult]:
        """Return one result per item, in input order."""
        return [self.calculate_item(item) for item in items]

    def calculate_item(self, item: VolumeItem) -> MacroResult:
        """Look up and convert a single item; failures become found=False."""
        try:
            record = self.lookup_service.lookup(item.object_name)
            return compute(record, item.object_name, item.volume_cups)
        except StoreUnavailableError as exc:
            _logger.exception(
                "Error getting food data (%s): %s",
                exc.kind,
                exc,
                extra={"object_name": item.object_name},
            )
        except FoodLookupError as exc:
            _logger.warning(
                "Error getting food data (%s): %s",
                exc.kind,
                exc,
                extra={"object_name": item.object_name},
            )
        return MacroResult.not_found(item.object_name, item.volume_cups)
