"""Root conftest: shared test configuration and in-memory database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all collections created
    - Both trust-tier managers share that engine, so a write through one tier
      is visible through the other
    - Settings are rebuilt from the environment whenever a test changes it
"""

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from hanami.config import get_settings  # noqa: E402
from hanami.core.domain_types import TrustTier  # noqa: E402
from hanami.db.base import Base  # noqa: E402
from hanami.infrastructure.data_adapter import DataAdapter  # noqa: E402
from hanami.infrastructure.database import DatabaseSessionManager  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def standard_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine, TrustTier.STANDARD)


@pytest.fixture
def elevated_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine, TrustTier.ELEVATED)


@pytest.fixture
def standard_adapter(standard_manager):
    return DataAdapter(standard_manager)


@pytest.fixture
def elevated_adapter(elevated_manager):
    return DataAdapter(elevated_manager)


@pytest.fixture
def configure(monkeypatch):
    """Set environment variables and rebuild the cached Settings.

    Usage: configure(SUPABASE_ANON_KEY="...", EXPOSE_ERROR_DETAILS="true")
    """
    def _configure(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
        return get_settings()

    yield _configure
    get_settings.cache_clear()
