"""Lesson Plan Activities: activities assigned to one class timeslot.

Invariants:
    - lessonDate, timeslot and courseType are all required
    - A missing table reads as an empty success with a setup hint, not a 500
"""

from fastapi import APIRouter, Query

from hanami.api.deps import StandardAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.errors import AdapterError
from hanami.core.query import Order, eq
from hanami.schemas.envelope import Envelope

router = APIRouter(prefix="/api/lesson-plan-activities", tags=["lesson-plans"])

ACTIVITY_COLUMNS = [
    "id", "lesson_date", "timeslot", "course_type",
    "activity_id", "activity_type", "created_at",
]


@router.get("")
@enveloped()
async def list_lesson_plan_activities(
    adapter: StandardAdapter,
    lesson_date: str = Query(..., alias="lessonDate", pattern=r"^\d{4}-\d{2}-\d{2}$"),
    timeslot: str = Query(..., min_length=1),
    course_type: str = Query(..., alias="courseType", min_length=1),
):
    try:
        return await adapter.select(
            Collection.LESSON_PLAN_ACTIVITIES,
            columns=ACTIVITY_COLUMNS,
            filters=[
                eq("lesson_date", lesson_date),
                eq("timeslot", timeslot),
                eq("course_type", course_type),
                eq("activity_type", "class_activity"),
            ],
            order=[Order("created_at")],
        )
    except AdapterError as exc:
        if exc.is_missing_table:
            return Envelope.ok([], message="資料表不存在，請先創建資料表")
        raise
