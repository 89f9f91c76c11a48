"""Shared pytest fixtures and configuration for all tests."""

import os

# Must be set before src.main is imported so no app is built at import time
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tasty_bites_api.handlers.api_handler import create_app  # noqa: E402
from tasty_bites_api.repositories.menu_repository import MenuRepository  # noqa: E402


@pytest.fixture
def menu_repository() -> MenuRepository:
    """Fixture providing a freshly seeded menu repository."""
    return MenuRepository()


@pytest.fixture
def client(menu_repository: MenuRepository) -> TestClient:
    """Fixture providing a test client backed by a seeded repository."""
    return TestClient(create_app(menu_repository=menu_repository))


@pytest.fixture
def valid_payload() -> dict:
    """Fixture providing a fully valid create/update body."""
    return {
        "name": "Bruschetta",
        "description": "Toasted bread topped with tomato, garlic, and basil.",
        "price": 6.5,
        "category": "appetizer",
        "ingredients": ["bread", "tomato", "garlic", "basil"],
        "available": False,
    }


@pytest.fixture
def invalid_payload() -> dict:
    """Fixture providing a body that violates one rule per field."""
    return {
        "name": "Hi",
        "description": "short",
        "price": -1,
        "category": "snack",
        "ingredients": [],
        "available": "yes",
    }
