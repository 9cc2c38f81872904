"""Lesson plan activities: timeslot lookup and the missing-table fallback."""

from hanami.api.deps import get_standard_adapter
from hanami.core.domain_types import Collection
from hanami.main import app

PARAMS = {"lessonDate": "2025-03-01", "timeslot": "10:00", "courseType": "鋼琴"}


async def test_requires_all_parameters(client):
    res = await client.get(
        "/api/lesson-plan-activities", params={"lessonDate": "2025-03-01"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "缺少必要參數"


async def test_bad_date_format_is_400(client):
    res = await client.get(
        "/api/lesson-plan-activities", params={**PARAMS, "lessonDate": "01/03/2025"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "參數格式錯誤"


async def test_lists_class_activities_for_timeslot(client, standard_adapter):
    base = {"lesson_date": "2025-03-01", "timeslot": "10:00", "course_type": "鋼琴"}
    await standard_adapter.insert(Collection.LESSON_PLAN_ACTIVITIES, [
        {**base, "activity_id": "a1"},
        {**base, "activity_id": "a2", "activity_type": "homework"},
        {**base, "activity_id": "a3", "timeslot": "11:00"},
    ])
    res = await client.get("/api/lesson-plan-activities", params=PARAMS)
    assert res.status_code == 200
    assert [a["activity_id"] for a in res.json()["data"]] == ["a1"]


async def test_missing_table_is_empty_success(client, bare_adapter):
    app.dependency_overrides[get_standard_adapter] = lambda: bare_adapter
    res = await client.get("/api/lesson-plan-activities", params=PARAMS)
    assert res.status_code == 200
    assert res.json() == {
        "success": True, "data": [], "message": "資料表不存在，請先創建資料表",
    }
