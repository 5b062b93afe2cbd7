"""Saved grocery list business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from grocery_budget.domain.groceries import GroceryList, GroceryListDraft

_logger = logging.getLogger(__name__)


class GroceryListRepository(Protocol):
    """Persistence interface for saved grocery lists."""

    def save(self, draft: GroceryListDraft) -> GroceryList:
        """Persist a grocery list and return the stored record."""

    def list_by_user(self, user_id: str) -> list[GroceryList]:
        """Return a user's lists, oldest first."""


@dataclass
class GroceryListService:
    """Application service for saving and retrieving grocery lists."""

    repository: GroceryListRepository

    def save_list(self, draft: GroceryListDraft) -> GroceryList:
        """Save a generated grocery list for a user."""
        saved = self.repository.save(draft)
        _logger.info("Saved grocery list %s for user %s", saved.id, draft.user_id)
        return saved

    def list_user_lists(self, user_id: str) -> list[GroceryList]:
        """Return all saved lists for a user."""
        lists = self.repository.list_by_user(user_id)
        _logger.info("Retrieved %s lists for user %s", len(lists), user_id)
        return lists
