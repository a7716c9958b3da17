"""Shared fixtures: the app with its store and origin swapped for mocks."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from dependencies import get_origin, get_settings, get_store


@pytest.fixture
def mock_store():
    """Store mock that behaves like an empty, reachable Redis."""
    store = MagicMock()
    store.connected = True
    store.get_field = AsyncMock(return_value=None)
    store.get_all_fields = AsyncMock(return_value={})
    store.set_field = AsyncMock()
    store.expire = AsyncMock()
    store.ping = AsyncMock(return_value=True)
    return store


@pytest.fixture
def mock_origin():
    origin = MagicMock()
    origin.fetch_species = AsyncMock()
    return origin


@pytest.fixture
def test_settings():
    return Settings()


@pytest.fixture
def app(mock_store, mock_origin, test_settings):
    app = create_app(test_settings)
    app.dependency_overrides[get_store] = lambda: mock_store
    app.dependency_overrides[get_origin] = lambda: mock_origin
    app.dependency_overrides[get_settings] = lambda: test_settings
    return app


@pytest.fixture
def client(app):
    # Not used as a context manager, so startup never tries to reach redis
    return TestClient(app, raise_server_exceptions=False)
