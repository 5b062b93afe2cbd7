"""In-memory storage used when no database is configured."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from grocery_budget.domain.groceries import GroceryList, GroceryListDraft
from grocery_budget.services.grocery_lists import GroceryListRepository


@dataclass
class InMemoryGroceryListRepository(GroceryListRepository):
    """Process-local grocery list store."""

    lists: list[GroceryList] = field(default_factory=list)

    def save(self, draft: GroceryListDraft) -> GroceryList:
        """Store a list with a generated id and timestamp."""
        saved = GroceryList(
            id=str(uuid4()),
            user_id=draft.user_id,
            budget=draft.budget,
            dietary_prefs=draft.dietary_prefs,
            household_size=draft.household_size,
            items=list(draft.items),
            total_cost=draft.total_cost,
            under_budget=draft.under_budget,
            swap_suggestion=draft.swap_suggestion,
            savings_tip=draft.savings_tip,
            created_at=datetime.now(tz=UTC),
        )
        self.lists.append(saved)
        return saved

    def list_by_user(self, user_id: str) -> list[GroceryList]:
        """Return lists saved by the user in insertion order."""
        return [saved for saved in self.lists if saved.user_id == user_id]
