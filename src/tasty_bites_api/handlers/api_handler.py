"""FastAPI application for the menu API endpoints."""

import logging
import re
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasty_bites_api.exceptions import MenuItemNotFoundError, MenuValidationError
from tasty_bites_api.middleware.request_logger import RequestLoggerMiddleware
from tasty_bites_api.models.menu_models import MenuItem, MenuItemPayload
from tasty_bites_api.observability.metrics import MenuMetrics
from tasty_bites_api.repositories.menu_repository import MenuRepository
from tasty_bites_api.validation.dependencies import get_validated_menu_payload

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Menu item not found"

API_ENDPOINTS = {
    "GET /api/menu": "Retrieve all menu items",
    "GET /api/menu/:id": "Retrieve a specific menu item",
    "POST /api/menu": "Add a new menu item",
    "PUT /api/menu/:id": "Update an existing menu item",
    "DELETE /api/menu/:id": "Remove a menu item",
}

_LEADING_INTEGER = re.compile(r"^\s*([+-]?[0-9]+)")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class ApiDescriptionResponse(BaseModel):
    """Response model for the API description at the root path."""

    message: str
    endpoints: dict[str, str]


class MenuItemDeletedResponse(BaseModel):
    """Response model for a deleted menu item."""

    message: str
    item: MenuItem


def parse_item_id(raw_id: str) -> int | None:
    """Parse the leading base-10 integer of a path segment.

    Trailing garbage is ignored ("12abc" is 12); a segment without leading
    digits parses to None, which matches no stored item.
    """
    match = _LEADING_INTEGER.match(raw_id)
    return int(match.group(1)) if match else None


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain and unhandled errors into JSON error bodies."""

    @app.exception_handler(MenuItemNotFoundError)
    async def handle_not_found(_request: Request, exc: MenuItemNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})

    @app.exception_handler(MenuValidationError)
    async def handle_validation_failed(_request: Request, exc: MenuValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": "Validation failed", "messages": exc.messages},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(
    menu_repository: MenuRepository,
    menu_metrics: MenuMetrics | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        menu_repository: Store holding the menu items
        menu_metrics: Metric instruments (defaults to the global meter)

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Tasty Bites Restaurant API",
        description="CRUD API for the Tasty Bites restaurant menu",
        version="1.0.0",
    )

    app.state.menu_repository = menu_repository
    app.state.menu_metrics = menu_metrics or MenuMetrics()
    app.state.menu_metrics.observe_menu_size(menu_repository)

    app.add_middleware(RequestLoggerMiddleware)
    register_exception_handlers(app)

    @app.get("/", response_model=ApiDescriptionResponse, tags=["Info"])
    async def api_description() -> ApiDescriptionResponse:
        """Describe the available endpoints."""
        return ApiDescriptionResponse(
            message="Welcome to the Tasty Bites Restaurant API",
            endpoints=API_ENDPOINTS,
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns:
            Health status indicating service is running
        """
        return HealthResponse(status="healthy")

    @app.get("/api/menu", response_model=list[MenuItem], tags=["Menu"])
    async def list_menu_items() -> list[MenuItem]:
        """Retrieve all menu items in insertion order."""
        items: list[MenuItem] = app.state.menu_repository.list_items()
        return items

    @app.get("/api/menu/{item_id}", response_model=MenuItem, tags=["Menu"])
    async def get_menu_item(item_id: str) -> MenuItem:
        """Retrieve a specific menu item.

        Args:
            item_id: Raw id path segment

        Raises:
            MenuItemNotFoundError: If no item has the parsed id
        """
        parsed_id = parse_item_id(item_id)
        item: MenuItem | None = app.state.menu_repository.get_item(parsed_id)
        if item is None:
            raise MenuItemNotFoundError(parsed_id)
        return item

    @app.post("/api/menu", response_model=MenuItem, status_code=201, tags=["Menu"])
    async def create_menu_item(
        payload: MenuItemPayload = Depends(get_validated_menu_payload),
    ) -> MenuItem:
        """Add a new menu item.

        Args:
            payload: Validated and normalized request body

        Returns:
            The created item with its assigned id
        """
        item: MenuItem = app.state.menu_repository.create_item(payload)
        app.state.menu_metrics.record_menu_mutation("create")
        return item

    @app.put("/api/menu/{item_id}", response_model=MenuItem, tags=["Menu"])
    async def update_menu_item(
        item_id: str,
        payload: MenuItemPayload = Depends(get_validated_menu_payload),
    ) -> MenuItem:
        """Replace every field of an existing menu item.

        Fields absent from the body are not carried over from the stored item;
        ``available`` falls back to its default.

        Raises:
            MenuItemNotFoundError: If no item has the parsed id
        """
        parsed_id = parse_item_id(item_id)
        item: MenuItem | None = app.state.menu_repository.replace_item(parsed_id, payload)
        if item is None:
            raise MenuItemNotFoundError(parsed_id)
        app.state.menu_metrics.record_menu_mutation("update")
        return item

    @app.delete("/api/menu/{item_id}", response_model=MenuItemDeletedResponse, tags=["Menu"])
    async def delete_menu_item(item_id: str) -> dict[str, Any]:
        """Remove a menu item.

        Raises:
            MenuItemNotFoundError: If no item has the parsed id
        """
        parsed_id = parse_item_id(item_id)
        item: MenuItem | None = app.state.menu_repository.delete_item(parsed_id)
        if item is None:
            raise MenuItemNotFoundError(parsed_id)
        app.state.menu_metrics.record_menu_mutation("delete")
        return {"message": "Menu item deleted", "item": item}

    return app
