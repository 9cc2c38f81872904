"""Students: tenant-scoped read (inactive, trial, regular) and typed partial update."""

from datetime import date, datetime, timezone

import pytest

from hanami.core.domain_types import Collection
from hanami.core.query import eq


@pytest.fixture
async def student(elevated_adapter):
    [row] = await elevated_adapter.insert(
        Collection.STUDENTS, {"full_name": "陳小明", "org_id": "org-a"},
    )
    return row


async def test_get_student(client, student):
    res = await client.get(f"/api/students/{student['id']}")
    assert res.status_code == 200
    assert res.json()["data"]["full_name"] == "陳小明"


async def test_get_student_outside_org_is_404(client, student):
    res = await client.get(f"/api/students/{student['id']}", params={"orgId": "org-b"})
    assert res.status_code == 404
    assert res.json()["error"] == "找不到學生資料或您沒有權限存取。"


async def test_get_missing_student(client):
    res = await client.get("/api/students/missing")
    assert res.status_code == 404
    assert res.json()["error"] == "找不到學生"


async def test_patch_student(client, student, elevated_adapter):
    res = await client.patch(
        f"/api/students/{student['id']}",
        json={"updates": {"nick_name": "明明"}, "orgId": "org-a"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "學生資料已更新"
    assert body["data"]["nick_name"] == "明明"

    res = await client.get(f"/api/students/{student['id']}")
    assert res.json()["data"]["nick_name"] == "明明"


async def test_patch_protected_column_is_400(client, student):
    res = await client.patch(
        f"/api/students/{student['id']}", json={"updates": {"org_id": "org-b"}},
    )
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_patch_unknown_column_is_400(client, student):
    res = await client.patch(
        f"/api/students/{student['id']}", json={"updates": {"shoe_size": 30}},
    )
    assert res.status_code == 400


async def test_patch_empty_updates_is_400(client, student):
    res = await client.patch(f"/api/students/{student['id']}", json={"updates": {}})
    assert res.status_code == 400
    assert res.json()["error"] == "參數格式錯誤"


async def test_patch_missing_body_field_is_400(client, student):
    res = await client.patch(f"/api/students/{student['id']}", json={})
    assert res.status_code == 400
    assert res.json()["error"] == "缺少必要參數"


async def test_patch_outside_org_is_404(client, student):
    res = await client.patch(
        f"/api/students/{student['id']}",
        json={"updates": {"nick_name": "x"}, "orgId": "org-b"},
    )
    assert res.status_code == 404


async def test_patch_parses_iso_date(client, student, elevated_adapter):
    res = await client.patch(
        f"/api/students/{student['id']}",
        json={"updates": {"student_dob": "2020-01-01"}},
    )
    assert res.status_code == 200
    assert res.json()["data"]["student_dob"] == "2020-01-01"

    stored = await elevated_adapter.select_one(
        Collection.STUDENTS, filters=[eq("id", student["id"])],
    )
    assert stored["student_dob"] == date(2020, 1, 1)


async def test_patch_null_for_required_column_is_400(client, student):
    res = await client.patch(
        f"/api/students/{student['id']}", json={"updates": {"care_alert": None}},
    )
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "參數格式錯誤"}


async def test_patch_malformed_date_is_400(client, student):
    res = await client.patch(
        f"/api/students/{student['id']}",
        json={"updates": {"student_dob": "last spring"}},
    )
    assert res.status_code == 400


async def test_patch_allows_null_for_optional_column(client, student):
    res = await client.patch(
        f"/api/students/{student['id']}", json={"updates": {"nick_name": None}},
    )
    assert res.status_code == 200
    assert res.json()["data"]["nick_name"] is None


# ─── Inactive and trial students ────────────────────────────────

@pytest.fixture
async def inactive_student(elevated_adapter):
    [row] = await elevated_adapter.insert(
        Collection.INACTIVE_STUDENTS,
        {
            "original_id": "stu-7", "org_id": "org-a", "full_name": "林小雨",
            "student_type": "regular",
            "inactive_date": datetime(2026, 3, 1, tzinfo=timezone.utc),
            "inactive_reason": "搬家",
        },
    )
    return row


@pytest.fixture
async def trial_student(elevated_adapter):
    [row] = await elevated_adapter.insert(
        Collection.TRIAL_STUDENTS,
        {"full_name": "黃小芳", "org_id": "org-a", "trial_status": "pending"},
    )
    return row


async def test_get_inactive_student_under_original_id(client, inactive_student):
    res = await client.get(
        f"/api/students/{inactive_student['id']}", params={"orgId": "org-a"},
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["id"] == "stu-7"
    assert data["original_id"] == "stu-7"
    assert data["student_type"] == "常規"
    assert data["is_inactive"] is True
    assert data["inactive_reason"] == "搬家"
    assert data["inactive_date"].startswith("2026-03-01")


async def test_get_inactive_trial_student_is_labelled_trial(client, elevated_adapter):
    [row] = await elevated_adapter.insert(
        Collection.INACTIVE_STUDENTS,
        {
            "original_id": "stu-8", "org_id": "org-a",
            "full_name": "周小安", "student_type": "trial",
        },
    )
    res = await client.get(f"/api/students/{row['id']}", params={"orgId": "org-a"})
    assert res.json()["data"]["student_type"] == "試堂"


async def test_inactive_list_needs_org_scope(client, inactive_student):
    res = await client.get(f"/api/students/{inactive_student['id']}")
    assert res.status_code == 404


async def test_get_trial_student(client, trial_student):
    res = await client.get(
        f"/api/students/{trial_student['id']}", params={"orgId": "org-a"},
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["full_name"] == "黃小芳"
    assert data["is_trial"] is True


async def test_get_trial_student_outside_org_is_404(client, trial_student):
    res = await client.get(
        f"/api/students/{trial_student['id']}", params={"orgId": "org-b"},
    )
    assert res.status_code == 404
    assert res.json()["error"] == "找不到學生資料或您沒有權限存取。"


async def test_get_regular_student_with_org_scope(client, student):
    res = await client.get(f"/api/students/{student['id']}", params={"orgId": "org-a"})
    assert res.status_code == 200
    assert "is_trial" not in res.json()["data"]


async def test_patch_trial_student_updates_trial_table(client, trial_student, elevated_adapter):
    res = await client.patch(
        f"/api/students/{trial_student['id']}",
        json={
            "updates": {"trial_status": "confirmed", "lesson_date": "2026-11-02"},
            "orgId": "org-a",
        },
    )
    assert res.status_code == 200
    assert res.json()["data"]["trial_status"] == "confirmed"

    stored = await elevated_adapter.select_one(
        Collection.TRIAL_STUDENTS, filters=[eq("id", trial_student["id"])],
    )
    assert stored["lesson_date"] == date(2026, 11, 2)


async def test_patch_trial_only_column_on_regular_student_is_400(client, student):
    res = await client.patch(
        f"/api/students/{student['id']}", json={"updates": {"trial_status": "confirmed"}},
    )
    assert res.status_code == 400


async def test_patch_trial_student_outside_org_is_404(client, trial_student):
    res = await client.patch(
        f"/api/students/{trial_student['id']}",
        json={"updates": {"nick_name": "芳芳"}, "orgId": "org-b"},
    )
    assert res.status_code == 404
