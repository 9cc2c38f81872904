"""Students: single-record read and partial update on the service-role pool.

Invariants:
    - With orgId the lookup is tenant-scoped; a student of another org reads as not found
    - With orgId, the inactive list is consulted first, then trial students, then
      regular students; inactive records are returned under their original id
    - PATCH writes to the trial table when the id belongs to a trial student
    - id, org_id and created_at are never writable through PATCH
    - Unknown columns or values of the wrong type are rejected with 400 before any write
"""

from fastapi import APIRouter, Query
from pydantic import ValidationError

from hanami.api.deps import ElevatedAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection, Record
from hanami.core.errors import AdapterError, InputValidationError, ResourceNotFoundError
from hanami.core.query import Filter, eq
from hanami.infrastructure.data_adapter import DataAdapter
from hanami.schemas.student import StudentChanges, StudentUpdate, TrialStudentChanges

router = APIRouter(prefix="/api/students", tags=["students"])

PROTECTED_COLUMNS = frozenset({"id", "org_id", "created_at"})
SCOPED_NOT_FOUND = "找不到學生資料或您沒有權限存取。"
STUDENT_TYPE_LABELS = {"regular": "常規"}
TRIAL_LABEL = "試堂"


def _not_found(student_id: str, org_id: str | None) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "學生", student_id, SCOPED_NOT_FOUND if org_id else "找不到學生",
    )


async def _find(
    adapter: DataAdapter, collection: Collection, filters: list[Filter],
) -> Record | None:
    """select_one that treats a collection not yet created as empty."""
    try:
        return await adapter.select_one(collection, filters=filters)
    except AdapterError as exc:
        if exc.is_missing_table:
            return None
        raise


def _from_inactive(row: Record) -> Record:
    return {
        **row,
        "id": row["original_id"],
        "student_type": STUDENT_TYPE_LABELS.get(row.get("student_type"), TRIAL_LABEL),
        "is_inactive": True,
    }


@router.get("/{student_id}")
@enveloped()
async def get_student(
    student_id: str,
    adapter: ElevatedAdapter,
    org_id: str | None = Query(None, alias="orgId"),
):
    filters = [eq("id", student_id)]
    if org_id:
        filters.append(eq("org_id", org_id))

        inactive = await _find(adapter, Collection.INACTIVE_STUDENTS, filters)
        if inactive is not None:
            return _from_inactive(inactive)
        trial = await _find(adapter, Collection.TRIAL_STUDENTS, filters)
        if trial is not None:
            return {**trial, "is_trial": True}

    student = await adapter.select_one(Collection.STUDENTS, filters=filters)
    if student is None:
        raise _not_found(student_id, org_id)
    return student


@router.patch("/{student_id}")
@enveloped(message="學生資料已更新")
async def update_student(
    student_id: str, body: StudentUpdate, adapter: ElevatedAdapter,
):
    protected = sorted(PROTECTED_COLUMNS & body.updates.keys())
    if protected:
        raise InputValidationError(
            "不可更新的欄位", field=protected[0], details=", ".join(protected),
        )

    trial = await _find(adapter, Collection.TRIAL_STUDENTS, [eq("id", student_id)])
    if trial is not None:
        collection, schema = Collection.TRIAL_STUDENTS, TrialStudentChanges
    else:
        collection, schema = Collection.STUDENTS, StudentChanges

    unknown = sorted(body.updates.keys() - set(adapter.columns(collection)))
    if unknown:
        raise InputValidationError(
            "包含未知欄位", field=unknown[0], details=", ".join(unknown),
        )
    try:
        changes = schema.model_validate(body.updates).model_dump(exclude_unset=True)
    except ValidationError as exc:
        errors = exc.errors()
        raise InputValidationError(
            "參數格式錯誤",
            field=str(errors[0]["loc"][0]) if errors[0]["loc"] else None,
            details="; ".join(
                f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in errors
            ),
        ) from exc

    scope = [eq("org_id", body.org_id)] if body.org_id else []
    student = await adapter.update(collection, student_id, changes, filters=scope)
    if student is None:
        raise _not_found(student_id, body.org_id)
    return student
