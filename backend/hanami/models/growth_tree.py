"""Growth Tree ORM: progress templates (trees, their goals, and versioned goal snapshots).

Invariants:
    - A goal belongs to exactly one tree (tree_id)
    - goals_snapshot is the full goal list of a tree at the time the version was cut
    - (tree_id, version) is unique
"""

from datetime import datetime

from sqlalchemy import (
    JSON, Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from hanami.db.base import Base, new_id, utc_now


class GrowthTree(Base):
    __tablename__ = "hanami_growth_trees"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    tree_name: Mapped[str] = mapped_column(String(100), nullable=False)
    tree_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    tree_icon: Mapped[str | None] = mapped_column(String(20), nullable=True)
    course_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tree_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )


class GrowthGoal(Base):
    __tablename__ = "hanami_growth_goals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    tree_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("hanami_growth_trees.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    goal_name: Mapped[str] = mapped_column(String(100), nullable=False)
    goal_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    goal_icon: Mapped[str | None] = mapped_column(String(20), nullable=True)
    goal_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    progress_max: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    required_abilities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )


class GrowthTreeVersion(Base):
    __tablename__ = "hanami_growth_tree_versions"
    __table_args__ = (UniqueConstraint("tree_id", "version"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    tree_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("hanami_growth_trees.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    version: Mapped[str] = mapped_column(String(20), nullable=False)
    version_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    version_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    goals_snapshot: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    changes_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
