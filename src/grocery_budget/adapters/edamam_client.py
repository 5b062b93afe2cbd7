"""Edamam food database API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class EdamamClient(Protocol):
    """Interface for Edamam food database lookups."""

    async def parse_food(self, term: str) -> dict[str, object]:
        """Look up a food by ingredient text and return raw API data."""


@dataclass
class HttpxEdamamClient(EdamamClient):
    """HTTPX-backed Edamam client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 3.0

    @classmethod
    def create(
        cls, app_id: str, app_key: str, base_url: str, timeout_seconds: float = 3.0
    ) -> "HttpxEdamamClient":
        """Create an Edamam client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def parse_food(self, term: str) -> dict[str, object]:
        """Query the food parser for an ingredient."""
        url = f"{self.base_url}/api/food-database/v2/parser"
        response = await self.http_client.get(
            url,
            params={
                "app_id": self.app_id,
                "app_key": self.app_key,
                "ingr": term,
                "nutrition-type": "logging",
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
