"""Budget-constrained selection of catalog items."""

import math
from typing import Protocol

from grocery_budget.domain.groceries import CatalogItem, GroceryItem

MAX_ITEMS = 10
ITEM_BUDGET_FRACTION = 0.2


class RandomSource(Protocol):
    """Source of uniform floats in [0.0, 1.0)."""

    def random(self) -> float:
        """Return the next uniform float."""


def base_multiplier(household_size: int) -> float:
    """Return the quantity multiplier for a household."""
    return max(1.0, household_size / 2)


def random_quantity(multiplier: float, rng: RandomSource) -> int:
    """Scale a multiplier by a random factor in [0.5, 2.0) and round up."""
    scale = 0.5 + 1.5 * rng.random()
    return max(1, math.ceil(multiplier * scale))


def allocate(
    items: list[CatalogItem],
    budget: float,
    household_size: int,
    rng: RandomSource,
) -> list[GroceryItem]:
    """Greedily pick the cheapest items that fit the remaining budget.

    Items are considered in ascending unit price. An item is accepted only if
    its total cost is at most a fifth of the budget still remaining, so the
    list spreads spend across several items. Rejected items are not retried.
    """
    multiplier = base_multiplier(household_size)
    remaining = budget
    selected: list[GroceryItem] = []

    for item in sorted(items, key=lambda candidate: candidate.unit_price):
        if len(selected) >= MAX_ITEMS:
            break
        quantity = random_quantity(multiplier, rng)
        total_price = item.unit_price * quantity
        if total_price > remaining * ITEM_BUDGET_FRACTION:
            continue
        selected.append(
            GroceryItem(
                name=item.name,
                quantity=f"{quantity} {item.unit}",
                price=round(total_price, 2),
                category=item.category,
            )
        )
        remaining -= total_price

    return selected
