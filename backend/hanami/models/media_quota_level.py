"""Media Quota Level ORM: per-student upload allowances (count and size limits)."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hanami.db.base import Base, new_id, utc_now


class MediaQuotaLevel(Base):
    __tablename__ = "hanami_media_quota_levels"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    level_name: Mapped[str] = mapped_column(String(50), nullable=False)
    video_limit: Mapped[int] = mapped_column(Integer, nullable=False)
    photo_limit: Mapped[int] = mapped_column(Integer, nullable=False)
    storage_limit_mb: Mapped[int] = mapped_column(Integer, nullable=False)
    video_size_limit_mb: Mapped[int] = mapped_column(Integer, nullable=False, default=20)
    photo_size_limit_mb: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
