"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from grocery_budget.api.models import (
    BudgetRequestModel,
    BudgetResponseModel,
    GroceryListModel,
    SaveListRequestModel,
    SaveListResponseModel,
)
from grocery_budget.app_logging import configure_logging
from grocery_budget.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_error(exc)
        logger.info("Rejected %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/api/budget",
        response_model=BudgetResponseModel,
        response_model_exclude_none=True,
    )
    async def generate_budget_list(
        payload: BudgetRequestModel, request: Request
    ) -> BudgetResponseModel | JSONResponse:
        """Generate a grocery list for a budget."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.budget_service.generate(
                budget=payload.budget,
                dietary_prefs=payload.dietary_prefs,
                household_size=payload.household_size,
            )
        except Exception:
            logger.exception("Failed to generate grocery list")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to generate grocery list",
            )
        return BudgetResponseModel.from_domain(result)

    @app.post("/api/save-list", response_model=SaveListResponseModel)
    async def save_list(
        payload: SaveListRequestModel, request: Request
    ) -> SaveListResponseModel | JSONResponse:
        """Persist a generated grocery list for a user."""
        state_container: AppContainer = request.app.state.container
        try:
            saved = state_container.grocery_list_service.save_list(payload.to_domain())
        except Exception:
            logger.exception("Failed to save grocery list")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to save grocery list"
            )
        return SaveListResponseModel(success=True, list_id=saved.id)

    @app.get("/api/user/{user_id}", response_model=list[GroceryListModel])
    async def user_lists(
        user_id: str, request: Request
    ) -> list[GroceryListModel] | JSONResponse:
        """Return saved grocery lists for a user."""
        state_container: AppContainer = request.app.state.container
        try:
            lists = state_container.grocery_list_service.list_user_lists(user_id)
        except Exception:
            logger.exception("Failed to retrieve grocery lists for %s", user_id)
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to retrieve grocery lists",
            )
        return [GroceryListModel.from_domain(saved) for saved in lists]

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _format_validation_error(exc: RequestValidationError) -> str:
    """Summarize the first validation error as a client-facing message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location)
    detail = first.get("msg", "Invalid value")
    return f"{field}: {detail}" if field else str(detail)
