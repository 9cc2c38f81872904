"""Data Access Adapter: typed select/insert/update/delete against named collections.

Invariants:
    - Each public call is one round trip in its own transaction; no retry, no caching
    - Rows cross the boundary as plain dicts keyed by column name
    - Unknown collection -> AdapterError 42P01; unknown column -> AdapterError 42703
    - update()/delete() address exactly one record by primary key; None/False when nothing matched
    - The trust tier is fixed at construction and visible as .tier

Design Decisions:
    - SQLAlchemy Core statements over Base.metadata tables: handlers stay schema-agnostic
      beyond the column names they read or write
    - insert() runs one statement per row inside a single transaction so per-row
      Python-side defaults (ids, timestamps) apply
"""

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import Column, MetaData, Table, delete, func, insert, select, update

from hanami.core.domain_types import Collection, Record, TrustTier
from hanami.core.errors import AdapterError, ErrorContext
from hanami.core.query import Filter, Order
from hanami.db.base import Base
from hanami.infrastructure.database import DatabaseSessionManager, get_manager

import hanami.models  # noqa: F401  (registers collections on Base.metadata)

logger = logging.getLogger(__name__)


def _name(collection: str | Collection) -> str:
    return collection.value if isinstance(collection, Collection) else collection


class DataAdapter:
    """Mediates every call to the relational data service for one trust tier."""

    def __init__(
        self, manager: DatabaseSessionManager, metadata: MetaData = Base.metadata,
    ):
        self._manager = manager
        self._metadata = metadata

    @classmethod
    def for_tier(cls, tier: TrustTier) -> "DataAdapter":
        return cls(get_manager(tier))

    @property
    def tier(self) -> TrustTier:
        return self._manager.tier

    # ─── Schema resolution (no IO) ──────────────────────────────

    def _table(self, collection: str | Collection) -> Table:
        name = _name(collection)
        table = self._metadata.tables.get(name)
        if table is None:
            raise AdapterError(
                "資料表不存在", "resolve", code=AdapterError.UNDEFINED_TABLE,
                details=f'relation "{name}" does not exist',
                context=ErrorContext(collection=name, tier=self.tier.value),
            )
        return table

    def _column(self, table: Table, name: str) -> Column:
        column = table.c.get(name)
        if column is None:
            raise AdapterError(
                "欄位不存在", "resolve", code=AdapterError.UNDEFINED_COLUMN,
                details=f'column "{name}" of relation "{table.name}" does not exist',
                context=ErrorContext(collection=table.name, tier=self.tier.value),
            )
        return column

    def _primary_key(self, table: Table) -> Column:
        return next(iter(table.primary_key.columns))

    def _condition(self, table: Table, f: Filter):
        column = self._column(table, f.column)
        if f.op == "eq":
            return column == f.value
        if f.op == "neq":
            return column != f.value
        if f.op == "gt":
            return column > f.value
        if f.op == "gte":
            return column >= f.value
        if f.op == "lt":
            return column < f.value
        if f.op == "lte":
            return column <= f.value
        if f.op == "in":
            return column.in_(list(f.value))
        if f.op == "is":
            return column.is_(f.value)
        return column.ilike(f.value)

    def _values(self, table: Table, values: Record) -> Record:
        return {self._column(table, key).name: value for key, value in values.items()}

    def columns(self, collection: str | Collection) -> list[str]:
        """Column names of a collection."""
        return [c.name for c in self._table(collection).c]

    # ─── Reads ──────────────────────────────────────────────────

    async def select(
        self,
        collection: str | Collection,
        columns: Sequence[str] | None = None,
        filters: Iterable[Filter] = (),
        order: Iterable[Order] = (),
        limit: int | None = None,
    ) -> list[Record]:
        """Filtered, ordered projection of a collection. Empty list when no rows match."""
        table = self._table(collection)
        projection = (
            [self._column(table, c) for c in columns] if columns else list(table.c)
        )
        stmt = select(*projection)
        conditions = [self._condition(table, f) for f in filters]
        if conditions:
            stmt = stmt.where(*conditions)
        for o in order:
            column = self._column(table, o.column)
            stmt = stmt.order_by(column.asc() if o.ascending else column.desc())
        if limit is not None:
            stmt = stmt.limit(limit)

        async with self._manager.session("select", table.name) as db:
            result = await db.execute(stmt)
            rows = [dict(row) for row in result.mappings().all()]
        logger.debug(
            f"select {table.name}",
            extra={
                "collection": table.name, "operation": "select",
                "tier": self.tier.value, "rows": len(rows),
            },
        )
        return rows

    async def select_one(
        self,
        collection: str | Collection,
        filters: Iterable[Filter] = (),
        columns: Sequence[str] | None = None,
    ) -> Record | None:
        rows = await self.select(collection, columns=columns, filters=filters, limit=1)
        return rows[0] if rows else None

    async def count(
        self, collection: str | Collection, filters: Iterable[Filter] = (),
    ) -> int:
        table = self._table(collection)
        stmt = select(func.count()).select_from(table)
        conditions = [self._condition(table, f) for f in filters]
        if conditions:
            stmt = stmt.where(*conditions)
        async with self._manager.session("select", table.name) as db:
            return (await db.execute(stmt)).scalar_one()

    # ─── Writes ─────────────────────────────────────────────────

    async def insert(
        self, collection: str | Collection, rows: Record | Sequence[Record],
    ) -> list[Record]:
        """Insert one or more records; returns them as stored (defaults applied)."""
        table = self._table(collection)
        batch = [rows] if isinstance(rows, dict) else list(rows)
        prepared = [self._values(table, row) for row in batch]
        if not prepared:
            return []

        inserted: list[Record] = []
        async with self._manager.session("insert", table.name) as db:
            for values in prepared:
                result = await db.execute(
                    insert(table).values(**values).returning(*table.c),
                )
                inserted.append(dict(result.mappings().one()))
            await db.commit()
        logger.info(
            f"insert {table.name}",
            extra={
                "collection": table.name, "operation": "insert",
                "tier": self.tier.value, "rows": len(inserted),
            },
        )
        return inserted

    async def update(
        self,
        collection: str | Collection,
        identifier: str,
        values: Record,
        filters: Iterable[Filter] = (),
    ) -> Record | None:
        """Partial update of one record by id. None when no record matched.

        Extra filters narrow the match (e.g. tenant scope); a record outside
        them is treated as not found.
        """
        table = self._table(collection)
        if not values:
            raise ValueError("update requires at least one column")
        prepared = self._values(table, values)
        conditions = [self._primary_key(table) == identifier]
        conditions.extend(self._condition(table, f) for f in filters)
        stmt = (
            update(table).where(*conditions).values(**prepared).returning(*table.c)
        )

        async with self._manager.session("update", table.name) as db:
            result = await db.execute(stmt)
            row = result.mappings().first()
            await db.commit()
        logger.info(
            f"update {table.name}",
            extra={
                "collection": table.name, "operation": "update",
                "tier": self.tier.value, "rows": 1 if row else 0,
            },
        )
        return dict(row) if row else None

    async def delete(self, collection: str | Collection, identifier: str) -> bool:
        """Delete one record by id. False when no record matched."""
        table = self._table(collection)
        pk = self._primary_key(table)
        stmt = delete(table).where(pk == identifier).returning(pk)

        async with self._manager.session("delete", table.name) as db:
            result = await db.execute(stmt)
            deleted = result.first() is not None
            await db.commit()
        logger.info(
            f"delete {table.name}",
            extra={
                "collection": table.name, "operation": "delete",
                "tier": self.tier.value, "rows": int(deleted),
            },
        )
        return deleted
