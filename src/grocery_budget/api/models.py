"""Pydantic models for the grocery budget HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from grocery_budget.domain.groceries import (
    BudgetResponse,
    GroceryItem,
    GroceryList,
    GroceryListDraft,
)


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GroceryItemModel(CamelModel):
    """Grocery item payload."""

    name: str
    quantity: str
    price: float
    category: str | None = None

    @classmethod
    def from_domain(cls, item: GroceryItem) -> "GroceryItemModel":
        return cls(
            name=item.name,
            quantity=item.quantity,
            price=item.price,
            category=item.category,
        )

    def to_domain(self) -> GroceryItem:
        return GroceryItem(
            name=self.name,
            quantity=self.quantity,
            price=self.price,
            category=self.category,
        )


class BudgetRequestModel(CamelModel):
    """Budget request payload."""

    model_config = ConfigDict(strict=True)

    budget: float = Field(ge=1)
    dietary_prefs: str
    household_size: int = Field(ge=1, le=10)


class BudgetResponseModel(CamelModel):
    """Generated grocery list payload."""

    items: list[GroceryItemModel]
    total_cost: float
    under_budget: bool
    swap_suggestion: str | None = None
    savings_tip: str

    @classmethod
    def from_domain(cls, response: BudgetResponse) -> "BudgetResponseModel":
        return cls(
            items=[GroceryItemModel.from_domain(item) for item in response.items],
            total_cost=response.total_cost,
            under_budget=response.under_budget,
            swap_suggestion=response.swap_suggestion,
            savings_tip=response.savings_tip,
        )


class SaveListRequestModel(CamelModel):
    """Save list payload."""

    user_id: str = Field(min_length=1)
    budget: float
    dietary_prefs: str
    household_size: int
    items: list[GroceryItemModel] = Field(min_length=1)
    total_cost: float
    under_budget: bool
    swap_suggestion: str | None = None
    savings_tip: str | None = None

    def to_domain(self) -> GroceryListDraft:
        return GroceryListDraft(
            user_id=self.user_id,
            budget=self.budget,
            dietary_prefs=self.dietary_prefs,
            household_size=self.household_size,
            items=[item.to_domain() for item in self.items],
            total_cost=self.total_cost,
            under_budget=self.under_budget,
            swap_suggestion=self.swap_suggestion or None,
            savings_tip=self.savings_tip or None,
        )


class SaveListResponseModel(CamelModel):
    """Save list result payload."""

    success: bool
    list_id: str


class GroceryListModel(CamelModel):
    """Saved grocery list payload."""

    id: str
    user_id: str
    budget: float
    dietary_prefs: str
    household_size: int
    items: list[GroceryItemModel]
    total_cost: float
    under_budget: bool
    swap_suggestion: str | None = None
    savings_tip: str | None = None
    created_at: datetime

    @classmethod
    def from_domain(cls, saved: GroceryList) -> "GroceryListModel":
        return cls(
            id=saved.id,
            user_id=saved.user_id,
            budget=saved.budget,
            dietary_prefs=saved.dietary_prefs,
            household_size=saved.household_size,
            items=[GroceryItemModel.from_domain(item) for item in saved.items],
            total_cost=saved.total_cost,
            under_budget=saved.under_budget,
            swap_suggestion=saved.swap_suggestion,
            savings_tip=saved.savings_tip,
            created_at=saved.created_at,
        )
