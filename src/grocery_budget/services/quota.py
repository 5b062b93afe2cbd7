"""Daily external API call accounting."""

from dataclasses import dataclass
from typing import Protocol


class ApiCallCounter(Protocol):
    """Date-keyed registry of external API calls."""

    def get_count(self, date_key: str) -> int:
        """Return the number of calls recorded for a day."""

    def increment(self, date_key: str) -> None:
        """Record one call for a day."""


@dataclass
class InMemoryApiCallCounter(ApiCallCounter):
    """Process-local call counter used when no database is configured."""

    _counts: dict[str, int]

    def __init__(self) -> None:
        self._counts = {}

    def get_count(self, date_key: str) -> int:
        """Return the call count for a day, zero if unseen."""
        return self._counts.get(date_key, 0)

    def increment(self, date_key: str) -> None:
        """Increment the call count for a day."""
        self._counts[date_key] = self._counts.get(date_key, 0) + 1
