"""Course Type ORM: the catalogue of lesson types (piano, music focus, ...)."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hanami.db.base import Base, new_id, utc_now


class CourseType(Base):
    __tablename__ = "Hanami_CourseTypes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # status doubles as the active flag
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_per_lesson: Mapped[float | None] = mapped_column(Numeric(10, 2), nullable=True)
    trial_limit: Mapped[int | None] = mapped_column(Integer, nullable=True)
    org_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
