"""Progress data initialization: seeding counts, rerun safety, failure envelope."""

import pytest

from hanami.core.domain_types import Collection
from hanami.core.errors import AdapterError
from hanami.main import app
from hanami.services.progress_seeding import get_progress_seeder, seed_progress_data


async def test_init_seeds_everything(client):
    res = await client.post("/api/init-progress-data")
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "進度資料初始化成功"
    assert body["data"] == {
        "hanami_development_abilities": 5,
        "hanami_growth_trees": 1,
        "hanami_growth_goals": 5,
        "hanami_growth_tree_versions": 1,
        "hanami_media_quota_levels": 4,
    }


async def test_rerun_inserts_nothing(client):
    await client.post("/api/init-progress-data")
    res = await client.post("/api/init-progress-data")
    assert res.status_code == 200
    assert set(res.json()["data"].values()) == {0}


async def test_seeded_quota_levels_are_listed(client):
    await client.post("/api/init-progress-data")
    res = await client.get("/api/media-quota-levels", params={"active_only": "true"})
    assert [lv["storage_limit_mb"] for lv in res.json()["data"]] == [250, 1500, 5000, 10240]


async def test_failure_reports_caught_message(client):
    async def exploding_seeder(adapter):
        raise RuntimeError("成長樹建立失敗")

    app.dependency_overrides[get_progress_seeder] = lambda: exploding_seeder
    res = await client.post("/api/init-progress-data")
    assert res.status_code == 500
    assert res.json() == {
        "success": False, "message": "初始化失敗", "error": "成長樹建立失敗",
    }


async def test_get_is_advisory_405(client):
    res = await client.get("/api/init-progress-data")
    assert res.status_code == 405
    assert res.headers["allow"] == "POST"
    assert res.json()["success"] is False


class _FailOnceAdapter:
    """Delegates to a real adapter but fails the first insert into one collection."""

    def __init__(self, adapter, collection):
        self._adapter = adapter
        self._collection = collection
        self.failed = False

    def __getattr__(self, name):
        return getattr(self._adapter, name)

    async def insert(self, collection, rows):
        if collection is self._collection and not self.failed:
            self.failed = True
            raise AdapterError("資料庫寫入失敗", "insert")
        return await self._adapter.insert(collection, rows)


@pytest.mark.parametrize(
    "collection", [Collection.GROWTH_GOALS, Collection.GROWTH_TREE_VERSIONS],
)
async def test_rerun_repairs_interrupted_tree(elevated_adapter, collection):
    adapter = _FailOnceAdapter(elevated_adapter, collection)
    with pytest.raises(AdapterError):
        await seed_progress_data(adapter)

    inserted = await seed_progress_data(adapter)

    assert inserted[Collection.GROWTH_TREES.value] == 0
    assert await elevated_adapter.count(Collection.GROWTH_TREES) == 1
    assert await elevated_adapter.count(Collection.GROWTH_GOALS) == 5
    [version] = await elevated_adapter.select(Collection.GROWTH_TREE_VERSIONS)
    assert [g["goal_order"] for g in version["goals_snapshot"]] == [1, 2, 3, 4, 5]
