"""Supabase-backed food catalog repository."""

from dataclasses import dataclass

from supabase import Client

from food_macros.domain.foods import FoodRecord, Nutrient, Portion
from food_macros.services.food_lookup import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation of the food catalog lookup."""

    client: Client
    table: str = "fndds"

    def find_by_description(self, description: str) -> FoodRecord | None:
        """Return the first row whose description equals the input, ignoring case."""
        response = (
            self.client.table(self.table)
            .select("fdc_id, description, food_nutrients, food_portions")
            .ilike("description", _escape_like(description))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def check_connection(self) -> None:
        """Run a one-row query so an unreachable store fails at startup."""
        try:
            self.client.table(self.table).select("fdc_id").limit(1).execute()
        except Exception as exc:
            raise RuntimeError(
                f"Failed to query food table '{self.table}' in Supabase"
            ) from exc


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so ilike compares the whole value."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _parse_food(row: dict[str, object]) -> FoodRecord:
    """Parse a catalog row holding FDC-shaped nutrient and portion lists."""
    fdc_id = row.get("fdc_id")
    return FoodRecord(
        description=str(row.get("description", "")),
        nutrients=tuple(
            _parse_nutrient(item) for item in row.get("food_nutrients") or []
        ),
        portions=tuple(_parse_portion(item) for item in row.get("food_portions") or []),
        fdc_id=int(fdc_id) if fdc_id is not None else None,
    )


def _parse_nutrient(item: dict[str, object]) -> Nutrient:
    nutrient_info = item.get("nutrient") or {}
    code = nutrient_info.get("number") or item.get("nutrientNumber") or ""
    return Nutrient(
        code=str(code),
        amount=float(item.get("amount") or 0.0),
        name=nutrient_info.get("name") or item.get("nutrientName"),
    )


def _parse_portion(item: dict[str, object]) -> Portion:
    return Portion(
        description=str(item.get("portionDescription") or ""),
        gram_weight=float(item.get("gramWeight") or 0.0),
    )
