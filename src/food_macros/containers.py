"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from food_macros.adapters.supabase_food_repository import SupabaseFoodRepository
from food_macros.config import Settings
from food_macros.services.food_lookup import FoodLookupService
from food_macros.services.macros import MacroService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_lookup_service: FoodLookupService
    macro_service: MacroService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    _logger.info(
        "Connecting to food store: url=%s table=%s",
        resolved_settings.supabase_url,
        resolved_settings.food_table,
    )
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(
        supabase_client, table=resolved_settings.food_table
    )
    if resolved_settings.verify_store_on_startup:
        food_repository.check_connection()
        _logger.info("Connected to food store table '%s'", resolved_settings.food_table)
    food_lookup_service = FoodLookupService(food_repository)
    macro_service = MacroService(lookup_service=food_lookup_service)

    return AppContainer(
        settings=resolved_settings,
        food_lookup_service=food_lookup_service,
        macro_service=macro_service,
    )
