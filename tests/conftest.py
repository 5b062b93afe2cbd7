"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from grocery_budget.adapters.edamam_client import EdamamClient
from grocery_budget.adapters.memory_storage import InMemoryGroceryListRepository
from grocery_budget.config import Settings
from grocery_budget.containers import AppContainer
from grocery_budget.domain.groceries import CatalogItem, GroceryItem
from grocery_budget.services.budget import BudgetService
from grocery_budget.services.external_source import ExternalGrocerySource
from grocery_budget.services.grocery_lists import GroceryListService
from grocery_budget.services.quota import InMemoryApiCallCounter

# random() == 0.0 gives the minimum scale of 0.5, so quantities round up to 1
# for households of up to four.
MIN_SCALE = 0.0


@dataclass
class FixedRandom:
    """Random source that always returns the same value."""

    value: float = MIN_SCALE

    def random(self) -> float:
        return self.value


@dataclass
class SequenceRandom:
    """Random source that cycles through preset values."""

    values: list[float]
    _index: int = 0

    def random(self) -> float:
        value = self.values[self._index % len(self.values)]
        self._index += 1
        return value


@dataclass
class FakeEdamamClient(EdamamClient):
    """Fake Edamam client with per-term payloads and failures."""

    payloads: dict[str, dict[str, object]] = field(default_factory=dict)
    failing_terms: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    async def parse_food(self, term: str) -> dict[str, object]:
        self.calls.append(term)
        if term in self.failing_terms:
            raise httpx.ConnectTimeout(f"timed out looking up {term}")
        return self.payloads.get(
            term,
            {"hints": [{"food": {"label": term.title(), "category": "Generic foods"}}]},
        )


@dataclass
class FailingGroceryListRepository:
    """Grocery list repository whose storage is unavailable."""

    save_calls: int = 0

    def save(self, draft):  # type: ignore[no-untyped-def]
        self.save_calls += 1
        raise RuntimeError("database unavailable")

    def list_by_user(self, user_id: str):  # type: ignore[no-untyped-def]
        raise RuntimeError("database unavailable")


SAMPLE_CATALOG = [
    CatalogItem("Chicken Breast", "protein", 11.98, "lb"),
    CatalogItem("White Rice", "grains", 7.47, "lb"),
    CatalogItem("Broccoli", "vegetables", 5.98, "lb"),
    CatalogItem("Eggs", "protein", 4.29, "dozen"),
    CatalogItem("Bananas", "fruits", 2.07, "lb"),
    CatalogItem("Milk", "dairy", 4.49, "gallon"),
]

SAMPLE_ITEMS = [
    GroceryItem("Chicken Breast", "1 lb", 11.98, "protein"),
    GroceryItem("White Rice", "1 lb", 7.47, "grains"),
    GroceryItem("Broccoli", "1 lb", 5.98, "vegetables"),
    GroceryItem("Eggs", "1 dozen", 4.29, "protein"),
    GroceryItem("Bananas", "1 lb", 2.07, "fruits"),
    GroceryItem("Milk", "1 gallon", 4.49, "dairy"),
]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        edamam_app_id=None,
        edamam_app_key=None,
        supabase_url=None,
        supabase_service_key=None,
    )


@pytest.fixture
def counter() -> InMemoryApiCallCounter:
    return InMemoryApiCallCounter()


@pytest.fixture
def edamam_client() -> FakeEdamamClient:
    return FakeEdamamClient()


@pytest.fixture
def list_repository() -> InMemoryGroceryListRepository:
    return InMemoryGroceryListRepository()


@pytest.fixture
def budget_service(
    counter: InMemoryApiCallCounter, edamam_client: FakeEdamamClient
) -> BudgetService:
    rng = FixedRandom()
    return BudgetService(
        catalog=list(SAMPLE_CATALOG),
        counter=counter,
        rng=rng,
        external_source=ExternalGrocerySource(
            client=edamam_client, counter=counter, rng=rng
        ),
    )


@pytest.fixture
def container(
    settings: Settings,
    budget_service: BudgetService,
    list_repository: InMemoryGroceryListRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        budget_service=budget_service,
        grocery_list_service=GroceryListService(list_repository),
        close_resources=close_resources,
    )
