"""Development Ability ORM: skills assessed on a level scale (rhythm, pitch, focus...)."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hanami.db.base import Base, new_id, utc_now


class DevelopmentAbility(Base):
    __tablename__ = "hanami_development_abilities"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    ability_name: Mapped[str] = mapped_column(String(100), nullable=False)
    ability_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    ability_icon: Mapped[str | None] = mapped_column(String(20), nullable=True)
    ability_color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    max_level: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
