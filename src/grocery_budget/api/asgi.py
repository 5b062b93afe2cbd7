"""ASGI entrypoint for the grocery budget API."""

from grocery_budget.api.app import create_app
from grocery_budget.containers import build_container

app = create_app(build_container())
