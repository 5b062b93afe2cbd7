"""Tests for the external grocery source."""

import asyncio
from dataclasses import dataclass

from grocery_budget.services.external_source import SEARCH_TERMS, ExternalGrocerySource
from grocery_budget.services.quota import InMemoryApiCallCounter
from tests.conftest import FakeEdamamClient, FixedRandom, SequenceRandom

TODAY = "2026-10-19"


def test_fetch_items_builds_item_per_term() -> None:
    client = FakeEdamamClient(
        payloads={
            "chicken": {
                "hints": [{"food": {"label": "Chicken", "category": "Generic foods"}}]
            }
        }
    )
    counter = InMemoryApiCallCounter()
    source = ExternalGrocerySource(client=client, counter=counter, rng=FixedRandom())

    items = asyncio.run(source.fetch_items(50, "none", 2, TODAY))

    assert items is not None
    assert len(items) == len(SEARCH_TERMS)
    assert client.calls == list(SEARCH_TERMS)
    assert items[0].name == "Chicken"
    assert items[0].category == "generic foods"
    assert items[0].quantity == "1 lb"
    assert items[0].price == 2.0
    assert counter.get_count(TODAY) == 1


def test_fetch_items_falls_back_to_term_and_general_category() -> None:
    client = FakeEdamamClient(
        payloads={term: {"hints": [{"food": {}}]} for term in SEARCH_TERMS}
    )
    source = ExternalGrocerySource(
        client=client, counter=InMemoryApiCallCounter(), rng=FixedRandom()
    )

    items = asyncio.run(source.fetch_items(50, "none", 1, TODAY))

    assert items is not None
    assert [item.name for item in items] == list(SEARCH_TERMS)
    assert {item.category for item in items} == {"general"}


def test_fetch_items_skips_failed_terms() -> None:
    client = FakeEdamamClient(failing_terms={"chicken", "milk"})
    source = ExternalGrocerySource(
        client=client, counter=InMemoryApiCallCounter(), rng=FixedRandom()
    )

    items = asyncio.run(source.fetch_items(50, "none", 2, TODAY))

    assert items is not None
    assert [item.name for item in items] == ["Rice", "Eggs", "Beans", "Broccoli"]


def test_fetch_items_returns_none_when_everything_fails() -> None:
    client = FakeEdamamClient(failing_terms=set(SEARCH_TERMS))
    counter = InMemoryApiCallCounter()
    source = ExternalGrocerySource(client=client, counter=counter, rng=FixedRandom())

    items = asyncio.run(source.fetch_items(50, "none", 2, TODAY))

    assert items is None
    assert counter.get_count(TODAY) == 1


def test_fetch_items_returns_none_without_hints() -> None:
    client = FakeEdamamClient(payloads={term: {"hints": []} for term in SEARCH_TERMS})
    source = ExternalGrocerySource(
        client=client, counter=InMemoryApiCallCounter(), rng=FixedRandom()
    )

    assert asyncio.run(source.fetch_items(50, "vegan", 3, TODAY)) is None


def test_fetch_items_stops_at_item_limit() -> None:
    terms = tuple(f"term-{index}" for index in range(12))
    client = FakeEdamamClient()
    source = ExternalGrocerySource(
        client=client,
        counter=InMemoryApiCallCounter(),
        rng=FixedRandom(),
        search_terms=terms,
    )

    items = asyncio.run(source.fetch_items(50, "none", 2, TODAY))

    assert items is not None
    assert len(items) == 8
    assert len(client.calls) == 8


def test_fetch_items_prices_scale_with_quantity() -> None:
    client = FakeEdamamClient()
    # price draw 0.5 -> $6/lb, quantity draw 0.999 -> ceil(3 * 1.9985) = 6
    rng = SequenceRandom([0.5, 0.999])
    source = ExternalGrocerySource(
        client=client, counter=InMemoryApiCallCounter(), rng=rng
    )

    items = asyncio.run(source.fetch_items(50, "none", 6, TODAY))

    assert items is not None
    assert items[0].quantity == "6 lb"
    assert items[0].price == 36.0


def test_fetch_items_skips_malformed_payload() -> None:
    client = FakeEdamamClient(payloads={"rice": ["unexpected", "list"]})  # type: ignore[dict-item]
    source = ExternalGrocerySource(
        client=client, counter=InMemoryApiCallCounter(), rng=FixedRandom()
    )

    items = asyncio.run(source.fetch_items(50, "none", 2, TODAY))

    assert items is not None
    assert [item.name for item in items] == ["Chicken", "Eggs", "Beans", "Broccoli", "Milk"]


@dataclass
class BrokenEdamamClient(FakeEdamamClient):
    """Client whose lookups fail with an unexpected error for one term."""

    async def parse_food(self, term: str) -> dict[str, object]:
        if term == "eggs":
            raise KeyError("food")
        return await super().parse_food(term)


def test_fetch_items_skips_unexpected_lookup_errors() -> None:
    source = ExternalGrocerySource(
        client=BrokenEdamamClient(), counter=InMemoryApiCallCounter(), rng=FixedRandom()
    )

    items = asyncio.run(source.fetch_items(50, "none", 2, TODAY))

    assert items is not None
    assert len(items) == 5
    assert "Eggs" not in [item.name for item in items]


@dataclass
class UnavailableCounter:
    """Call counter whose storage is down."""

    def get_count(self, date_key: str) -> int:
        return 0

    def increment(self, date_key: str) -> None:
        raise RuntimeError("db down")


def test_fetch_items_returns_none_when_counter_fails() -> None:
    client = FakeEdamamClient()
    source = ExternalGrocerySource(
        client=client, counter=UnavailableCounter(), rng=FixedRandom()
    )

    items = asyncio.run(source.fetch_items(50, "none", 2, TODAY))

    assert items is None
    assert client.calls == []
