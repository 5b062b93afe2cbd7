"""Domain models for grocery catalogs and generated lists."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CatalogItem:
    """A priced item from the static grocery catalog."""

    name: str
    category: str
    unit_price: float
    unit: str


@dataclass(frozen=True)
class GroceryItem:
    """A selected grocery line with quantity and total price."""

    name: str
    quantity: str
    price: float
    category: str | None = None


@dataclass(frozen=True)
class BudgetResponse:
    """Generated grocery list with budget evaluation and advice."""

    items: list[GroceryItem]
    total_cost: float
    under_budget: bool
    savings_tip: str
    swap_suggestion: str | None = None


@dataclass(frozen=True)
class GroceryListDraft:
    """Grocery list data submitted for saving."""

    user_id: str
    budget: float
    dietary_prefs: str
    household_size: int
    items: list[GroceryItem]
    total_cost: float
    under_budget: bool
    swap_suggestion: str | None = None
    savings_tip: str | None = None


@dataclass(frozen=True)
class GroceryList:
    """A persisted grocery list."""

    id: str
    user_id: str
    budget: float
    dietary_prefs: str
    household_size: int
    items: list[GroceryItem]
    total_cost: float
    under_budget: bool
    swap_suggestion: str | None
    savings_tip: str | None
    created_at: datetime
