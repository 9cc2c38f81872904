"""Data Adapter: select/insert/update/delete against the in-memory database.

Invariants:
    - Rows come back as plain dicts keyed by column name
    - Unknown collection -> AdapterError 42P01; unknown column -> 42703
    - update()/delete() report a miss as None/False, never raise
"""

import pytest
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import create_async_engine

from hanami.core.domain_types import Collection, TrustTier
from hanami.core.errors import AdapterError
from hanami.core.query import Order, desc, eq, ilike, in_, neq
from hanami.db.base import Base
from hanami.infrastructure.data_adapter import DataAdapter
from hanami.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def seeded(standard_adapter):
    await standard_adapter.insert(Collection.COURSE_TYPES, [
        {"name": "鋼琴", "status": True},
        {"name": "音樂專注力", "status": True},
        {"name": "小提琴", "status": False},
    ])
    return standard_adapter


async def test_tier_is_visible(standard_adapter, elevated_adapter):
    assert standard_adapter.tier is TrustTier.STANDARD
    assert elevated_adapter.tier is TrustTier.ELEVATED


async def test_insert_applies_defaults(standard_adapter):
    rows = await standard_adapter.insert(Collection.COURSE_TYPES, {"name": "鋼琴"})
    assert len(rows) == 1
    assert rows[0]["id"]
    assert rows[0]["status"] is True
    assert rows[0]["created_at"] is not None


async def test_insert_empty_batch_is_noop(standard_adapter):
    assert await standard_adapter.insert(Collection.COURSE_TYPES, []) == []


async def test_select_filters_and_orders(seeded):
    rows = await seeded.select(
        Collection.COURSE_TYPES, filters=[eq("status", True)], order=[Order("name")],
    )
    assert [r["name"] for r in rows] == sorted(["鋼琴", "音樂專注力"])


async def test_select_projection(seeded):
    rows = await seeded.select(Collection.COURSE_TYPES, columns=["id", "name"])
    assert all(set(r) == {"id", "name"} for r in rows)


async def test_select_limit_and_desc(seeded):
    rows = await seeded.select(
        Collection.COURSE_TYPES, order=[desc("name")], limit=1,
    )
    assert len(rows) == 1


async def test_select_operators(seeded):
    assert len(await seeded.select(
        Collection.COURSE_TYPES, filters=[neq("name", "鋼琴")],
    )) == 2
    assert len(await seeded.select(
        Collection.COURSE_TYPES, filters=[in_("name", ["鋼琴", "小提琴"])],
    )) == 2
    assert len(await seeded.select(
        Collection.COURSE_TYPES, filters=[ilike("name", "%提琴%")],
    )) == 1


async def test_select_no_rows_is_empty_list(standard_adapter):
    assert await standard_adapter.select(Collection.TEACHERS) == []


async def test_select_one_and_count(seeded):
    assert await seeded.count(Collection.COURSE_TYPES) == 3
    assert await seeded.count(Collection.COURSE_TYPES, [eq("status", False)]) == 1
    row = await seeded.select_one(Collection.COURSE_TYPES, [eq("name", "小提琴")])
    assert row["status"] is False
    assert await seeded.select_one(Collection.COURSE_TYPES, [eq("name", "none")]) is None


async def test_update_returns_updated_record(seeded):
    row = await seeded.select_one(Collection.COURSE_TYPES, [eq("name", "小提琴")])
    updated = await seeded.update(Collection.COURSE_TYPES, row["id"], {"status": True})
    assert updated["id"] == row["id"]
    assert updated["status"] is True


async def test_update_missing_record_is_none(seeded):
    assert await seeded.update(Collection.COURSE_TYPES, "missing", {"status": True}) is None


async def test_update_scope_filter_excludes_other_tenants(elevated_adapter):
    [student] = await elevated_adapter.insert(
        Collection.STUDENTS, {"full_name": "陳小明", "org_id": "org-a"},
    )
    assert await elevated_adapter.update(
        Collection.STUDENTS, student["id"], {"nick_name": "明明"},
        filters=[eq("org_id", "org-b")],
    ) is None


async def test_update_requires_values(seeded):
    with pytest.raises(ValueError):
        await seeded.update(Collection.COURSE_TYPES, "x", {})


async def test_delete(seeded):
    row = await seeded.select_one(Collection.COURSE_TYPES, [eq("name", "鋼琴")])
    assert await seeded.delete(Collection.COURSE_TYPES, row["id"]) is True
    assert await seeded.delete(Collection.COURSE_TYPES, row["id"]) is False


async def test_writes_visible_across_tiers(standard_adapter, elevated_adapter):
    await elevated_adapter.insert(Collection.TEACHERS, {"teacher_nickname": "Ms Lee"})
    rows = await standard_adapter.select(Collection.TEACHERS)
    assert rows[0]["teacher_nickname"] == "Ms Lee"


async def test_unknown_collection_is_undefined_table(standard_adapter):
    with pytest.raises(AdapterError) as exc_info:
        await standard_adapter.select("hanami_nope")
    assert exc_info.value.code == AdapterError.UNDEFINED_TABLE
    assert exc_info.value.is_missing_table


async def test_unknown_column_is_undefined_column(standard_adapter):
    with pytest.raises(AdapterError) as exc_info:
        await standard_adapter.select(Collection.TEACHERS, filters=[eq("nope", 1)])
    assert exc_info.value.code == AdapterError.UNDEFINED_COLUMN


async def test_table_missing_in_database_is_undefined_table():
    """Known to the models but never created: the driver error maps to 42P01."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    try:
        adapter = DataAdapter(DatabaseSessionManager.from_engine(engine, TrustTier.STANDARD))
        with pytest.raises(AdapterError) as exc_info:
            await adapter.select(Collection.MEDIA_QUOTA_LEVELS)
        assert exc_info.value.is_missing_table
        assert exc_info.value.message == "資料庫查詢失敗"
    finally:
        await engine.dispose()


async def test_custom_metadata_limits_collections(standard_manager):
    adapter = DataAdapter(standard_manager, MetaData())
    with pytest.raises(AdapterError):
        adapter.columns(Collection.STUDENTS)
    assert "is_favorite" in DataAdapter(standard_manager, Base.metadata).columns(
        Collection.STUDENT_MEDIA,
    )
