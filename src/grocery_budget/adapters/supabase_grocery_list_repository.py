"""Supabase-backed grocery list repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from grocery_budget.domain.groceries import GroceryItem, GroceryList, GroceryListDraft
from grocery_budget.services.grocery_lists import GroceryListRepository

_COLUMNS = (
    "id, user_id, budget, dietary_prefs, household_size, items, total_cost, "
    "under_budget, swap_suggestion, savings_tip, created_at"
)


@dataclass
class SupabaseGroceryListRepository(GroceryListRepository):
    """Supabase implementation for grocery list persistence."""

    client: Client

    def save(self, draft: GroceryListDraft) -> GroceryList:
        """Insert a grocery list row and return it."""
        response = (
            self.client.table("grocery_lists")
            .insert(
                {
                    "user_id": draft.user_id,
                    "budget": draft.budget,
                    "dietary_prefs": draft.dietary_prefs,
                    "household_size": draft.household_size,
                    "items": [_item_to_json(item) for item in draft.items],
                    "total_cost": draft.total_cost,
                    "under_budget": 1 if draft.under_budget else 0,
                    "swap_suggestion": draft.swap_suggestion,
                    "savings_tip": draft.savings_tip,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save grocery list in Supabase")
        return _parse_row(response.data[0])

    def list_by_user(self, user_id: str) -> list[GroceryList]:
        """Return grocery lists for a user ordered by creation time."""
        response = (
            self.client.table("grocery_lists")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _item_to_json(item: GroceryItem) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": item.name,
        "quantity": item.quantity,
        "price": item.price,
    }
    if item.category is not None:
        payload["category"] = item.category
    return payload


def _parse_item(raw: dict[str, object]) -> GroceryItem:
    category = raw.get("category")
    return GroceryItem(
        name=str(raw.get("name", "")),
        quantity=str(raw.get("quantity", "")),
        price=float(raw.get("price", 0.0)),
        category=str(category) if category is not None else None,
    )


def _parse_row(row: dict[str, object]) -> GroceryList:
    """Parse a grocery list row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.now(tz=UTC)
    )
    raw_items = row.get("items") or []
    return GroceryList(
        id=str(row["id"]),
        user_id=str(row.get("user_id", "")),
        budget=float(row.get("budget", 0.0)),
        dietary_prefs=str(row.get("dietary_prefs", "")),
        household_size=int(row.get("household_size", 0)),
        items=[_parse_item(item) for item in raw_items if isinstance(item, dict)],
        total_cost=float(row.get("total_cost", 0.0)),
        under_budget=bool(row.get("under_budget")),
        swap_suggestion=row.get("swap_suggestion"),
        savings_tip=row.get("savings_tip"),
        created_at=created_at,
    )
