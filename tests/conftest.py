"""Shared fixtures: every test gets its own application and in-memory store."""
import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.main import create_app
from storefront.services.checkout import CheckoutService


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        api_prefix="/api",
        debug=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def checkout_service(store):
    return CheckoutService(store)
