"""Database Session Manager: async connection pools per trust tier with rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions surface as AdapterError carrying the SQLSTATE when known
    - Error details are redacted before they leave this module

Design Decisions:
    - One DatabaseSessionManager per trust tier, both built on startup by the
      FastAPI lifespan and disposed on shutdown; never rebuilt per request
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from hanami.core.domain_types import TrustTier
from hanami.core.errors import AdapterError, ConfigurationError, ErrorContext
from hanami.core.redaction import redact

logger = logging.getLogger(__name__)

_MISSING_TABLE = re.compile(r"no such table|relation .* does not exist", re.IGNORECASE)
_MISSING_COLUMN = re.compile(r"no such column|column .* does not exist", re.IGNORECASE)

_OPERATION_MESSAGES = {
    "select": "資料庫查詢失敗",
    "insert": "資料庫新增失敗",
    "update": "資料庫更新失敗",
    "delete": "資料庫刪除失敗",
}


def extract_sqlstate(exc: SQLAlchemyError) -> str | None:
    """SQLSTATE from the driver error, or inferred from its message."""
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return str(code)
    message = str(orig if orig is not None else exc)
    if _MISSING_TABLE.search(message):
        return AdapterError.UNDEFINED_TABLE
    if _MISSING_COLUMN.search(message):
        return AdapterError.UNDEFINED_COLUMN
    return None


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        tier: TrustTier,
        pool_size: int = 10,
        max_overflow: int = 10,
        secrets: list[str] | None = None,
    ):
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._bind(engine, tier, secrets)

    @classmethod
    def from_engine(
        cls, engine: AsyncEngine, tier: TrustTier, secrets: list[str] | None = None,
    ) -> "DatabaseSessionManager":
        """Wrap an existing engine (scripts, test fixtures)."""
        manager = cls.__new__(cls)
        manager._bind(engine, tier, secrets)
        return manager

    def _bind(self, engine: AsyncEngine, tier: TrustTier, secrets: list[str] | None):
        self.engine = engine
        self.tier = tier
        self.secrets = secrets or []
        self._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "select", collection: str | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback; driver failures become AdapterError."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise self._translate(e, operation, collection) from e
        finally:
            await session.close()

    def _translate(
        self, exc: SQLAlchemyError, operation: str, collection: str | None,
    ) -> AdapterError:
        if isinstance(exc, IntegrityError):
            kind = "integrity"
        elif isinstance(exc, OperationalError):
            kind = "operational"
        elif isinstance(exc, DBAPIError):
            kind = "driver"
        else:
            kind = "sqlalchemy"
        details = redact(str(getattr(exc, "orig", None) or exc), self.secrets)
        code = extract_sqlstate(exc)
        logger.error(
            f"DB {kind} error during {operation}: {details}",
            extra={
                "error_code": code, "operation": operation,
                "collection": collection, "tier": self.tier.value,
            },
        )
        return AdapterError(
            _OPERATION_MESSAGES.get(operation, "資料庫操作失敗"),
            operation, code=code, details=details,
            context=ErrorContext(
                collection=collection, operation=operation, tier=self.tier.value,
            ),
        )

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(
                f"DB health check failed: {redact(str(e), self.secrets)}",
                extra={"tier": self.tier.value},
            )
            return False

    async def dispose(self):
        await self.engine.dispose()


# Process-wide managers (initialized on startup)
managers: dict[TrustTier, DatabaseSessionManager] = {}


def init_db(
    standard_url: str,
    elevated_url: str,
    secrets: list[str] | None = None,
    **kwargs,
):
    """Build one pool per trust tier."""
    managers[TrustTier.STANDARD] = DatabaseSessionManager(
        standard_url, TrustTier.STANDARD, secrets=secrets, **kwargs,
    )
    managers[TrustTier.ELEVATED] = DatabaseSessionManager(
        elevated_url, TrustTier.ELEVATED, secrets=secrets, **kwargs,
    )


async def close_db():
    for manager in managers.values():
        await manager.dispose()
    managers.clear()


def get_manager(tier: TrustTier) -> DatabaseSessionManager:
    manager = managers.get(tier)
    if manager is None:
        raise ConfigurationError(
            "DATABASE_SERVICE_URL" if tier is TrustTier.ELEVATED else "DATABASE_URL",
        )
    return manager
