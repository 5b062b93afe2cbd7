"""Budget request orchestration."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from grocery_budget.domain.groceries import BudgetResponse, CatalogItem, GroceryItem
from grocery_budget.services.advisory import savings_tip, suggest_swap
from grocery_budget.services.allocator import RandomSource, allocate
from grocery_budget.services.catalog import filter_catalog
from grocery_budget.services.external_source import ExternalGrocerySource
from grocery_budget.services.quota import ApiCallCounter

DAILY_API_LIMIT = 150

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class BudgetService:
    """Turns a budget request into a grocery list with advice."""

    catalog: list[CatalogItem]
    counter: ApiCallCounter
    rng: RandomSource
    external_source: ExternalGrocerySource | None = None
    daily_api_limit: int = DAILY_API_LIMIT
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def generate(
        self, budget: float, dietary_prefs: str, household_size: int
    ) -> BudgetResponse:
        """Generate a grocery list for the budget, diet and household size."""
        _logger.info(
            "Budget request: budget=%s diet=%s household=%s",
            budget,
            dietary_prefs,
            household_size,
        )
        date_key = self.clock().date().isoformat()
        items = await self._fetch_external(
            budget, dietary_prefs, household_size, date_key
        )
        source = "external"
        if items is None:
            items = self.generate_fallback(budget, dietary_prefs, household_size)
            source = "fallback"

        response = build_response(items, budget)
        _logger.info(
            "Generated list: source=%s items=%s total=%.2f under_budget=%s",
            source,
            len(response.items),
            response.total_cost,
            response.under_budget,
        )
        return response

    def generate_fallback(
        self, budget: float, dietary_prefs: str, household_size: int
    ) -> list[GroceryItem]:
        """Build a list from the local catalog."""
        eligible = filter_catalog(self.catalog, dietary_prefs)
        return allocate(eligible, budget, household_size, self.rng)

    async def _fetch_external(
        self,
        budget: float,
        dietary_prefs: str,
        household_size: int,
        date_key: str,
    ) -> list[GroceryItem] | None:
        if self.external_source is None:
            return None
        call_count = self.counter.get_count(date_key)
        if call_count >= self.daily_api_limit:
            _logger.warning(
                "External API limit reached (%s/%s), using fallback",
                call_count,
                self.daily_api_limit,
            )
            return None
        return await self.external_source.fetch_items(
            budget, dietary_prefs, household_size, date_key
        )


def build_response(items: list[GroceryItem], budget: float) -> BudgetResponse:
    """Total the items and attach swap and savings advice."""
    total_cost = round(sum(item.price for item in items), 2)
    return BudgetResponse(
        items=items,
        total_cost=total_cost,
        under_budget=total_cost <= budget,
        swap_suggestion=suggest_swap(items, total_cost, budget),
        savings_tip=savings_tip(items, budget, total_cost),
    )
