"""API test fixtures: isolated app per test + in-process async HTTP client.

Invariants:
    - Every test gets a fresh UserStore (no state leaks between tests)
    - Requests go through the full middleware pipeline via ASGITransport
    - `auth` holds the one valid Authorization header

Design Decisions:
    - create_app() over the module-level app: tests can inject store, settings
      and verifier without dependency_overrides
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roster.config import Settings
from roster.core.user_store import UserStore
from roster.main import create_app

VALID_TOKEN = "valid-token-example"


@pytest.fixture
def settings():
    return Settings(_env_file=None, api_token=VALID_TOKEN)


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def auth():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
