"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.core.books.store import BookStore
from src.main import create_app


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, log_level="WARNING")


@pytest.fixture
def store():
    """A book store holding the two seed books."""
    return BookStore.seeded()


@pytest.fixture
def app(settings, store):
    """An application instance that owns the ``store`` fixture."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_book():
    """Payload for a book not in the seed data."""
    return {"title": "The Hitchhiker's Guide to the Galaxy", "author": "Douglas Adams"}
