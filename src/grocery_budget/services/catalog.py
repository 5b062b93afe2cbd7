"""Static grocery catalog loading and dietary filtering."""

import json
import logging
from pathlib import Path

from grocery_budget.domain.groceries import CatalogItem

_VEGAN_EXCLUDED = {"protein", "dairy"}
_KETO_EXCLUDED = {"grains", "fruits"}
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "groceries.json"

_logger = logging.getLogger(__name__)


def load_catalog(path: str | Path | None = None) -> list[CatalogItem]:
    """Load the grocery catalog, defaulting to the packaged data file.

    A missing or malformed file yields an empty catalog so list generation
    degrades to an empty result instead of failing requests.
    """
    source = Path(path or DEFAULT_CATALOG_PATH)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
        items = [_parse_item(entry) for entry in payload.get("groceries", [])]
    except (OSError, ValueError, KeyError):
        _logger.exception("Failed to load grocery catalog from %s", source)
        return []

    _logger.info("Loaded grocery catalog: %s items", len(items))
    return items


def filter_catalog(items: list[CatalogItem], dietary_prefs: str) -> list[CatalogItem]:
    """Return catalog items eligible for a dietary preference, in order."""
    if dietary_prefs == "vegan":
        return [
            item
            for item in items
            if item.category not in _VEGAN_EXCLUDED or "bean" in item.name.lower()
        ]
    if dietary_prefs == "keto":
        return [item for item in items if item.category not in _KETO_EXCLUDED]
    return list(items)


def _parse_item(entry: dict[str, object]) -> CatalogItem:
    return CatalogItem(
        name=str(entry["name"]),
        category=str(entry.get("category") or "other"),
        unit_price=float(entry["price"]),
        unit=str(entry.get("unit", "each")),
    )
