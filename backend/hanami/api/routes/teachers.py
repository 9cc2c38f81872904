"""Teachers: staff listing and lookup."""

from fastapi import APIRouter, Query

from hanami.api.deps import StandardAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.errors import ResourceNotFoundError
from hanami.core.query import Order, eq

router = APIRouter(prefix="/api/teachers", tags=["teachers"])

TEACHER_COLUMNS = [
    "id", "org_id", "teacher_fullname", "teacher_nickname",
    "teacher_role", "teacher_status", "teacher_email",
]


@router.get("")
@enveloped()
async def list_teachers(
    adapter: StandardAdapter,
    teacher_status: str | None = Query(None, alias="status"),
    org_id: str | None = Query(None, alias="orgId"),
):
    filters = []
    if teacher_status:
        filters.append(eq("teacher_status", teacher_status))
    if org_id:
        filters.append(eq("org_id", org_id))
    return await adapter.select(
        Collection.TEACHERS, columns=TEACHER_COLUMNS, filters=filters,
        order=[Order("teacher_nickname")],
    )


@router.get("/{teacher_id}")
@enveloped()
async def get_teacher(teacher_id: str, adapter: StandardAdapter):
    teacher = await adapter.select_one(
        Collection.TEACHERS, filters=[eq("id", teacher_id)], columns=TEACHER_COLUMNS,
    )
    if teacher is None:
        raise ResourceNotFoundError("老師", teacher_id)
    return teacher
