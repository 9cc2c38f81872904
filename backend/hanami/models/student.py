"""Student ORM: regular, trial and inactive (archived) students of an organization.

Invariants:
    - org_id scopes a student to one tenant
    - id and org_id are never changed through the API
"""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hanami.db.base import Base, new_id, utc_now


class Student(Base):
    __tablename__ = "Hanami_Students"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    org_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    nick_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    student_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    course_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    student_dob: Mapped[date | None] = mapped_column(Date, nullable=True)
    contact_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    care_alert: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    student_remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )


class TrialStudent(Base):
    """Students booked for a trial lesson, kept apart from the regular roll."""
    __tablename__ = "hanami_trial_students"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    org_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    nick_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    student_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    course_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    student_dob: Mapped[date | None] = mapped_column(Date, nullable=True)
    contact_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    care_alert: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    student_remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    trial_status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    lesson_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )


class InactiveStudent(Base):
    """Archived copy of a deactivated student; original_id points at the former record."""
    __tablename__ = "inactive_student_list"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    original_id: Mapped[str] = mapped_column(String(36), nullable=False)
    org_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    nick_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    student_type: Mapped[str | None] = mapped_column(String(20), nullable=True)  # regular | trial
    course_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    student_dob: Mapped[date | None] = mapped_column(Date, nullable=True)
    contact_number: Mapped[str | None] = mapped_column(String(30), nullable=True)
    inactive_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    inactive_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
