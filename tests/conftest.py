"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from starwars.api.app import create_app
from starwars.auth.claims import Claim, ClaimsIdentity, ClaimsPrincipal, ClaimTypes
from starwars.config import Settings
from starwars.graphql.schema import build_context
from starwars.graphql.stitching import StitchedSchema
from starwars.services import ServiceCollection, configure_services


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def services() -> ServiceCollection:
    """A fresh service collection so reviews and events don't leak across tests."""
    return configure_services()


@pytest.fixture
def stitched(services: ServiceCollection) -> StitchedSchema:
    return services.get(StitchedSchema)


@pytest.fixture
def anonymous_user() -> ClaimsPrincipal:
    return ClaimsPrincipal.anonymous()


@pytest.fixture
def country_user() -> ClaimsPrincipal:
    identity = ClaimsIdentity(
        authentication_type="test",
        claims=[Claim(ClaimTypes.NAME, "Leia"), Claim(ClaimTypes.COUNTRY, "us")],
    )
    return ClaimsPrincipal.from_identity(identity)


@pytest.fixture
def make_context(services: ServiceCollection, stitched: StitchedSchema):
    """Build an execution context as the GraphQL router would."""

    def _make(user: ClaimsPrincipal | None = None) -> dict[str, Any]:
        return build_context(
            MagicMock(),
            user or ClaimsPrincipal.anonymous(),
            services,
            stitched,
        )

    return _make


@pytest.fixture
def client(settings: Settings, services: ServiceCollection) -> Generator[TestClient, None, None]:
    with TestClient(create_app(settings, services)) as test_client:
        yield test_client


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
