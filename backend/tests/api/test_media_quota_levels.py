"""Media quota levels: listing, creation, default levels for a missing table."""

from hanami.api.deps import get_elevated_adapter
from hanami.core.domain_types import Collection
from hanami.core.errors import AdapterError
from hanami.main import app

LEVEL = {"level_name": "基礎版", "video_limit": 5, "photo_limit": 10, "storage_limit_mb": 250}


async def test_create_and_list_ordered_by_storage(client):
    res = await client.post(
        "/api/media-quota-levels", json={**LEVEL, "level_name": "標準版", "storage_limit_mb": 1500},
    )
    assert res.status_code == 201
    await client.post("/api/media-quota-levels", json=LEVEL)

    res = await client.get("/api/media-quota-levels")
    assert [lv["level_name"] for lv in res.json()["data"]] == ["基礎版", "標準版"]


async def test_active_only(client, elevated_adapter):
    await elevated_adapter.insert(Collection.MEDIA_QUOTA_LEVELS, [
        LEVEL, {**LEVEL, "level_name": "停用", "is_active": False},
    ])
    res = await client.get("/api/media-quota-levels", params={"active_only": "true"})
    assert [lv["level_name"] for lv in res.json()["data"]] == ["基礎版"]


async def test_create_invalid_limit_is_400(client):
    res = await client.post("/api/media-quota-levels", json={**LEVEL, "video_limit": 0})
    assert res.status_code == 400


async def test_missing_table_is_404_with_hint(client, bare_adapter):
    app.dependency_overrides[get_elevated_adapter] = lambda: bare_adapter
    res = await client.get("/api/media-quota-levels")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "資料表不存在，請先執行初始化"}


class _TableCreatedLateAdapter:
    """Reports the quota table missing on the first read, then behaves normally."""

    def __init__(self, adapter):
        self._adapter = adapter
        self.reads = 0

    def __getattr__(self, name):
        return getattr(self._adapter, name)

    async def select(self, collection, **kwargs):
        self.reads += 1
        if self.reads == 1:
            raise AdapterError(
                "資料庫查詢失敗", "select", code=AdapterError.UNDEFINED_TABLE,
            )
        return await self._adapter.select(collection, **kwargs)


async def test_missing_table_creates_default_levels(client, elevated_adapter):
    adapter = _TableCreatedLateAdapter(elevated_adapter)
    app.dependency_overrides[get_elevated_adapter] = lambda: adapter

    res = await client.get("/api/media-quota-levels")

    assert res.status_code == 200
    levels = res.json()["data"]
    assert [lv["storage_limit_mb"] for lv in levels] == [250, 1500, 5000, 10240]
    assert all(lv["is_active"] for lv in levels)
    assert adapter.reads == 2


async def test_failed_retry_after_creating_levels_is_500(client, elevated_adapter):
    adapter = _TableCreatedLateAdapter(elevated_adapter)

    async def always_missing(collection, **kwargs):
        raise AdapterError("資料庫查詢失敗", "select", code=AdapterError.UNDEFINED_TABLE)

    adapter.select = always_missing
    app.dependency_overrides[get_elevated_adapter] = lambda: adapter

    res = await client.get("/api/media-quota-levels")

    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "獲取配額等級失敗"}
