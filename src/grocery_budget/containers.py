"""Dependency container wiring for the application."""

import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from grocery_budget.adapters.edamam_client import HttpxEdamamClient
from grocery_budget.adapters.memory_storage import InMemoryGroceryListRepository
from grocery_budget.adapters.supabase_api_call_counter import SupabaseApiCallCounter
from grocery_budget.adapters.supabase_grocery_list_repository import (
    SupabaseGroceryListRepository,
)
from grocery_budget.config import Settings
from grocery_budget.services.budget import BudgetService
from grocery_budget.services.catalog import load_catalog
from grocery_budget.services.external_source import ExternalGrocerySource
from grocery_budget.services.grocery_lists import (
    GroceryListRepository,
    GroceryListService,
)
from grocery_budget.services.quota import ApiCallCounter, InMemoryApiCallCounter

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    budget_service: BudgetService
    grocery_list_service: GroceryListService
    close_resources: Callable[[], Awaitable[None]]


def build_storage(settings: Settings) -> tuple[GroceryListRepository, ApiCallCounter]:
    """Select Supabase storage when configured, otherwise in-memory storage."""
    if settings.supabase_configured:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        _logger.info("Using Supabase storage")
        return SupabaseGroceryListRepository(client), SupabaseApiCallCounter(client)
    _logger.warning("Supabase is not configured, using in-memory storage")
    return InMemoryGroceryListRepository(), InMemoryApiCallCounter()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repository, counter = build_storage(resolved_settings)
    rng = random.Random()

    edamam_client: HttpxEdamamClient | None = None
    external_source: ExternalGrocerySource | None = None
    if resolved_settings.edamam_configured:
        edamam_client = HttpxEdamamClient.create(
            app_id=resolved_settings.edamam_app_id,
            app_key=resolved_settings.edamam_app_key,
            base_url=resolved_settings.edamam_base_url,
            timeout_seconds=resolved_settings.edamam_timeout_seconds,
        )
        external_source = ExternalGrocerySource(
            client=edamam_client, counter=counter, rng=rng
        )
    else:
        _logger.warning("Edamam is not configured, using catalog data only")

    budget_service = BudgetService(
        catalog=load_catalog(resolved_settings.catalog_path),
        counter=counter,
        rng=rng,
        external_source=external_source,
        daily_api_limit=resolved_settings.daily_api_limit,
    )
    grocery_list_service = GroceryListService(repository)

    async def close_resources() -> None:
        if edamam_client is not None:
            await edamam_client.close()

    return AppContainer(
        settings=resolved_settings,
        budget_service=budget_service,
        grocery_list_service=grocery_list_service,
        close_resources=close_resources,
    )
