"""Student Schemas.

Invariants:
    - StudentChanges mirrors the writable columns of Hanami_Students; only keys
      present in `updates` are written (exclude_unset)
    - Non-nullable columns (full_name, care_alert) reject an explicit null
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator


class StudentUpdate(BaseModel):
    """Body of PATCH /api/students/{id}: the columns to change, plus optional tenant scope."""
    updates: dict[str, Any]
    org_id: str | None = Field(None, alias="orgId")

    model_config = {"populate_by_name": True}

    @field_validator("updates")
    @classmethod
    def require_updates(cls, v: dict) -> dict:
        if not v:
            raise ValueError("updates cannot be empty")
        return v


class StudentChanges(BaseModel):
    """Typed view of `updates` for a regular student."""
    full_name: str = Field("", min_length=1, max_length=100)
    nick_name: str | None = Field(None, max_length=50)
    student_type: str | None = Field(None, max_length=20)
    course_type: str | None = Field(None, max_length=100)
    student_dob: date | None = None
    contact_number: str | None = Field(None, max_length=30)
    care_alert: bool = False
    student_remarks: str | None = None

    model_config = {"extra": "forbid"}


class TrialStudentChanges(StudentChanges):
    trial_status: str | None = Field(None, max_length=20)
    lesson_date: date | None = None
