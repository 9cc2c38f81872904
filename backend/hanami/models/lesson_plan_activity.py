"""Lesson Plan Activity ORM: activities assigned to a class timeslot on a given date."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from hanami.db.base import Base, new_id, utc_now


class LessonPlanActivity(Base):
    __tablename__ = "hanami_lesson_plan_activities"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    lesson_date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    timeslot: Mapped[str] = mapped_column(String(10), nullable=False)     # HH:MM
    course_type: Mapped[str] = mapped_column(String(100), nullable=False)
    activity_id: Mapped[str] = mapped_column(String(36), nullable=False)
    activity_type: Mapped[str] = mapped_column(
        String(30), nullable=False, default="class_activity",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
