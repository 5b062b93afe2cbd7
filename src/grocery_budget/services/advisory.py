"""Rule-based swap suggestions and savings tips."""

from collections.abc import Callable
from dataclasses import dataclass

from grocery_budget.domain.groceries import GroceryItem

SWAP_PRICE_THRESHOLD = 5.0
SWAP_SAVINGS_RATE = 0.4
GENERIC_SUBSTITUTE = "a cheaper alternative"
STORE_BRAND_SUGGESTION = "Consider buying store brands to reduce costs"

_SUBSTITUTES = {
    "Salmon Fillet": "canned tuna",
    "Ground Beef": "black beans",
    "Chicken Breast": "eggs",
    "Cheddar Cheese": "Greek yogurt",
}

_BULK_KEYWORDS = ("rice", "beans", "pasta")


def suggest_swap(
    items: list[GroceryItem], total_cost: float, budget: float
) -> str | None:
    """Suggest a substitution for the priciest item when over budget."""
    if total_cost <= budget:
        return None

    overage = total_cost - budget
    expensive = sorted(
        (item for item in items if item.price > SWAP_PRICE_THRESHOLD),
        key=lambda item: item.price,
        reverse=True,
    )
    if not expensive:
        return STORE_BRAND_SUGGESTION

    target = expensive[0]
    savings = min(target.price * SWAP_SAVINGS_RATE, overage)
    substitute = _SUBSTITUTES.get(target.name, GENERIC_SUBSTITUTE)
    return f"Swap {target.name} for {substitute} to save ${savings:.2f}"


@dataclass(frozen=True)
class TipContext:
    """Inputs shared by savings tip rules."""

    items: list[GroceryItem]
    budget: float
    total_cost: float

    def category_spend(self, *categories: str) -> float:
        """Return combined spend for the given categories."""
        return sum(
            item.price for item in self.items if (item.category or "other") in categories
        )

    def first_bulk_item(self) -> GroceryItem | None:
        """Return the first item that is cheaper when bought in bulk."""
        for item in self.items:
            name = item.name.lower()
            if any(keyword in name for keyword in _BULK_KEYWORDS):
                return item
        return None


@dataclass(frozen=True)
class SavingsRule:
    """A savings tip guarded by a predicate."""

    name: str
    applies: Callable[[TipContext], bool]
    tip: Callable[[TipContext], str]


def _bulk_tip(context: TipContext) -> str:
    item = context.first_bulk_item()
    if item is None:
        raise ValueError("Bulk tip requires a bulk item")
    return f"Buy {item.name} in bulk to save $3-5 per pound"


SAVINGS_RULES: tuple[SavingsRule, ...] = (
    SavingsRule(
        name="snacks",
        applies=lambda ctx: ctx.category_spend("snacks", "pantry")
        > ctx.total_cost * 0.2,
        tip=lambda _ctx: "Reduce snack purchases to save up to $10 on your grocery bill",
    ),
    SavingsRule(
        name="bulk",
        applies=lambda ctx: ctx.first_bulk_item() is not None,
        tip=_bulk_tip,
    ),
    SavingsRule(
        name="meal_prep",
        applies=lambda ctx: any(
            item.category == "protein" and item.price > 10 for item in ctx.items
        ),
        tip=lambda _ctx: (
            "Consider meal prepping to reduce food waste and save 20-30% on groceries"
        ),
    ),
    SavingsRule(
        name="shopping_list",
        applies=lambda ctx: ctx.total_cost / ctx.budget > 0.9,
        tip=lambda _ctx: (
            "Shop with a list and avoid impulse purchases to stay within budget"
        ),
    ),
)

DEFAULT_TIP = "Plan meals around sales and seasonal produce for maximum savings"


def savings_tip(
    items: list[GroceryItem],
    budget: float,
    total_cost: float,
    rules: tuple[SavingsRule, ...] = SAVINGS_RULES,
) -> str:
    """Return the tip of the first matching rule, or a seasonal default."""
    context = TipContext(items=items, budget=budget, total_cost=total_cost)
    for rule in rules:
        if rule.applies(context):
            return rule.tip(context)
    return DEFAULT_TIP
