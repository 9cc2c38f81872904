"""Teacher ORM: employees who teach lessons (table name kept from the hosted schema)."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from hanami.db.base import Base, new_id, utc_now


class Teacher(Base):
    __tablename__ = "hanami_employee"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    org_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    teacher_fullname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    teacher_nickname: Mapped[str] = mapped_column(String(50), nullable=False)
    teacher_role: Mapped[str | None] = mapped_column(String(50), nullable=True)
    teacher_status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    teacher_email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    teacher_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
