"""API test fixtures: isolated app per test + async HTTP client.

Invariants:
    - Every test gets its own repositories (seeded with the demo records)
    - No state leaks between tests: nothing is reset, everything is rebuilt

Design Decisions:
    - Repositories exposed as fixtures so tests can assert collection size
      directly, not only through the HTTP surface
"""

import pytest
from httpx import ASGITransport, AsyncClient

from lofty_api.config import Settings
from lofty_api.infrastructure.memory_store import (
    create_user_repository, create_view_repository,
)
from lofty_api.main import create_app


@pytest.fixture
def settings():
    return Settings(seed_demo_data=True, log_format="text")


@pytest.fixture
def view_repository():
    return create_view_repository(seed=True)


@pytest.fixture
def user_repository():
    return create_user_repository(seed=True)


@pytest.fixture
def test_app(settings, view_repository, user_repository):
    return create_app(settings, view_repository, user_repository)


@pytest.fixture
async def client(test_app):
    """FastAPI test client bound to the isolated app."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c
