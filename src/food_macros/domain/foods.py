"""Food catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Nutrient:
    """Nutrient amount per 100 g, keyed by FDC nutrient number."""

    code: str
    amount: float
    name: str | None = None


@dataclass(frozen=True)
class Portion:
    """Named serving size and its weight in grams."""

    description: str
    gram_weight: float


@dataclass(frozen=True)
class FoodRecord:
    """Catalog entry with nutrients and known portions."""

    description: str
    nutrients: tuple[Nutrient, ...]
    portions: tuple[Portion, ...]
    fdc_id: int | None = None
