"""Grocery items sourced from the Edamam food database."""

import logging
from dataclasses import dataclass

from grocery_budget.adapters.edamam_client import EdamamClient
from grocery_budget.domain.groceries import GroceryItem
from grocery_budget.services.allocator import (
    RandomSource,
    base_multiplier,
    random_quantity,
)
from grocery_budget.services.quota import ApiCallCounter

SEARCH_TERMS = ("chicken", "rice", "eggs", "beans", "broccoli", "milk")
MAX_EXTERNAL_ITEMS = 8

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodHint:
    """Label and category of the best match for a search term."""

    label: str | None
    category: str | None


@dataclass
class ExternalGrocerySource:
    """Builds grocery items from external food lookups."""

    client: EdamamClient
    counter: ApiCallCounter
    rng: RandomSource
    search_terms: tuple[str, ...] = SEARCH_TERMS
    max_items: int = MAX_EXTERNAL_ITEMS

    async def fetch_items(
        self,
        budget: float,
        dietary_prefs: str,
        household_size: int,
        date_key: str,
    ) -> list[GroceryItem] | None:
        """Return items from the external source, or None when nothing came back.

        One call is charged against the day's quota per invocation, before
        any lookup is made. Failed lookups are skipped, and a failure to record
        the call returns None so the caller falls back to the catalog.
        """
        _logger.info(
            "Fetching external items: budget=%s diet=%s household=%s",
            budget,
            dietary_prefs,
            household_size,
        )
        try:
            self.counter.increment(date_key)
        except Exception:
            _logger.exception("Failed to record external API call for %s", date_key)
            return None

        multiplier = base_multiplier(household_size)
        items: list[GroceryItem] = []
        for term in self.search_terms:
            if len(items) >= self.max_items:
                break
            try:
                payload = await self.client.parse_food(term)
                hint = _first_hint(payload)
            except Exception as exc:
                _logger.warning("External lookup failed for %s: %s", term, exc)
                continue
            if hint is None:
                continue
            items.append(self._build_item(term, hint, multiplier))

        if not items:
            _logger.info("External source returned no items")
            return None
        _logger.info("External source returned %s items", len(items))
        return items

    def _build_item(self, term: str, hint: FoodHint, multiplier: float) -> GroceryItem:
        estimated_price = 2 + 8 * self.rng.random()
        quantity = random_quantity(multiplier, self.rng)
        return GroceryItem(
            name=hint.label or term,
            quantity=f"{quantity} lb",
            price=round(estimated_price * quantity, 2),
            category=hint.category.lower() if hint.category else "general",
        )


def _first_hint(payload: object) -> FoodHint | None:
    """Extract the first food hint from a parser response."""
    if not isinstance(payload, dict):
        return None
    hints = payload.get("hints")
    if not isinstance(hints, list) or not hints:
        return None
    first = hints[0]
    food = first.get("food") if isinstance(first, dict) else None
    if not isinstance(food, dict):
        return None
    label = food.get("label")
    category = food.get("category")
    return FoodHint(
        label=label if isinstance(label, str) and label else None,
        category=category if isinstance(category, str) and category else None,
    )
