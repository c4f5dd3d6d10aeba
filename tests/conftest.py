"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_macros.config import Settings
from food_macros.containers import AppContainer
from food_macros.domain.foods import FoodRecord, Nutrient, Portion
from food_macros.services.food_lookup import FoodLookupService, FoodRepository
from food_macros.services.macros import MacroService


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    records: list[FoodRecord] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)

    def find_by_description(self, description: str) -> FoodRecord | None:
        self.queries.append(description)
        for record in self.records:
            if record.description.lower() == description.lower():
                return record
        return None


@dataclass
class FailingFoodRepository(FoodRepository):
    """Food repository whose store is unreachable."""

    queries: list[str] = field(default_factory=list)

    def find_by_description(self, description: str) -> FoodRecord | None:
        self.queries.append(description)
        raise ConnectionError("store unreachable")


def make_egg_record() -> FoodRecord:
    return FoodRecord(
        description="Egg, whole, boiled or poached",
        nutrients=(
            Nutrient(code="208", amount=155, name="Energy"),
            Nutrient(code="203", amount=13, name="Protein"),
            Nutrient(code="204", amount=11, name="Total lipid (fat)"),
            Nutrient(code="205", amount=1.1, name="Carbohydrate, by difference"),
        ),
        portions=(Portion(description="1 egg", gram_weight=50),),
        fdc_id=2706338,
    )


def make_banana_record() -> FoodRecord:
    return FoodRecord(
        description="Banana, raw",
        nutrients=(Nutrient(code="208", amount=89, name="Energy"),),
        portions=(Portion(description="1 cup, sliced", gram_weight=150),),
    )


def make_rice_record() -> FoodRecord:
    return FoodRecord(
        description="Rice, cooked, NFS",
        nutrients=(
            Nutrient(code="208", amount=130),
            Nutrient(code="203", amount=2.7),
            Nutrient(code="204", amount=0.3),
            Nutrient(code="205", amount=28),
            Nutrient(code="291", amount=0.4),
        ),
        portions=(
            Portion(description="1 tablespoon", gram_weight=12),
            Portion(description="1 cup", gram_weight=160),
            Portion(description="1 cup, packed", gram_weight=200),
        ),
    )


@pytest.fixture
def egg_record() -> FoodRecord:
    return make_egg_record()


@pytest.fixture
def banana_record() -> FoodRecord:
    return make_banana_record()


@pytest.fixture
def rice_record() -> FoodRecord:
    return make_rice_record()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        verify_store_on_startup=False,
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(
        records=[make_egg_record(), make_banana_record(), make_rice_record()]
    )


@pytest.fixture
def container(
    settings: Settings, food_repository: InMemoryFoodRepository
) -> AppContainer:
    food_lookup_service = FoodLookupService(food_repository)
    return AppContainer(
        settings=settings,
        food_lookup_service=food_lookup_service,
        macro_service=MacroService(lookup_service=food_lookup_service),
    )


@pytest.fixture
def failing_repository() -> FailingFoodRepository:
    return FailingFoodRepository()
