"""API test fixtures: FastAPI test client over the in-memory database.

Invariants:
    - Both adapter dependencies overridden with adapters on the test engine
    - Lifespan is not run (ASGITransport), so no real pool is ever built
    - Overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from hanami.api.deps import get_elevated_adapter, get_standard_adapter
from hanami.core.domain_types import TrustTier
from hanami.core.errors import AdapterError
from hanami.infrastructure.data_adapter import DataAdapter
from hanami.infrastructure.database import DatabaseSessionManager
from hanami.main import app


@pytest.fixture
async def client(standard_adapter, elevated_adapter):
    """FastAPI test client with both trust-tier adapters overridden."""
    app.dependency_overrides[get_standard_adapter] = lambda: standard_adapter
    app.dependency_overrides[get_elevated_adapter] = lambda: elevated_adapter

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def bare_adapter():
    """Adapter on a database where no collection has been created yet."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    yield DataAdapter(DatabaseSessionManager.from_engine(engine, TrustTier.ELEVATED))
    await engine.dispose()


class _FailingAdapter:
    """Adapter stand-in whose every call fails the way an unreachable database does."""

    async def _fail(self, *args, **kwargs):
        raise AdapterError(
            "資料庫查詢失敗", "select", code="08006",
            details="connection to postgresql://hanami:pa55word@db:5432 refused",
        )

    select = select_one = count = insert = update = delete = _fail


@pytest.fixture
def failing_adapter():
    return _FailingAdapter()
