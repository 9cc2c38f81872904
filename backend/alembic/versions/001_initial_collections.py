"""Initial schema: every collection the admin API reads or writes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id():
    return sa.Column("id", sa.String(36), primary_key=True)


def _created_at():
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "Hanami_CourseTypes",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("status", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price_per_lesson", sa.Numeric(10, 2), nullable=True),
        sa.Column("trial_limit", sa.Integer, nullable=True),
        sa.Column("org_id", sa.String(36), nullable=True),
        _created_at(),
    )

    op.create_table(
        "Hanami_Students",
        _id(),
        sa.Column("org_id", sa.String(36), nullable=True, index=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("nick_name", sa.String(50), nullable=True),
        sa.Column("student_type", sa.String(20), nullable=True),
        sa.Column("course_type", sa.String(100), nullable=True),
        sa.Column("student_dob", sa.Date, nullable=True),
        sa.Column("contact_number", sa.String(30), nullable=True),
        sa.Column("care_alert", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("student_remarks", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "hanami_trial_students",
        _id(),
        sa.Column("org_id", sa.String(36), nullable=True, index=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("nick_name", sa.String(50), nullable=True),
        sa.Column("student_type", sa.String(20), nullable=True),
        sa.Column("course_type", sa.String(100), nullable=True),
        sa.Column("student_dob", sa.Date, nullable=True),
        sa.Column("contact_number", sa.String(30), nullable=True),
        sa.Column("care_alert", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("student_remarks", sa.Text, nullable=True),
        sa.Column("trial_status", sa.String(20), nullable=True),
        sa.Column("lesson_date", sa.Date, nullable=True),
        _created_at(),
    )

    op.create_table(
        "inactive_student_list",
        _id(),
        sa.Column("original_id", sa.String(36), nullable=False),
        sa.Column("org_id", sa.String(36), nullable=True, index=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("nick_name", sa.String(50), nullable=True),
        sa.Column("student_type", sa.String(20), nullable=True),
        sa.Column("course_type", sa.String(100), nullable=True),
        sa.Column("student_dob", sa.Date, nullable=True),
        sa.Column("contact_number", sa.String(30), nullable=True),
        sa.Column("inactive_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("inactive_reason", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "hanami_student_media",
        _id(),
        sa.Column("student_id", sa.String(36), nullable=False, index=True),
        sa.Column("media_type", sa.String(10), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("file_path", sa.String(500), nullable=False),
        sa.Column("file_size", sa.Integer, nullable=True),
        sa.Column("file_duration", sa.Float, nullable=True),
        sa.Column("thumbnail_path", sa.String(500), nullable=True),
        sa.Column("title", sa.String(200), nullable=True),
        sa.Column("uploaded_by", sa.String(36), nullable=True),
        sa.Column("is_favorite", sa.Boolean, nullable=False, server_default=sa.false()),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "hanami_employee",
        _id(),
        sa.Column("org_id", sa.String(36), nullable=True, index=True),
        sa.Column("teacher_fullname", sa.String(100), nullable=True),
        sa.Column("teacher_nickname", sa.String(50), nullable=False),
        sa.Column("teacher_role", sa.String(50), nullable=True),
        sa.Column("teacher_status", sa.String(20), nullable=True),
        sa.Column("teacher_email", sa.String(200), nullable=True),
        sa.Column("teacher_phone", sa.String(30), nullable=True),
        _created_at(),
    )

    op.create_table(
        "hanami_promo_codes",
        _id(),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("institution_name", sa.String(100), nullable=True),
        sa.Column("institution_code", sa.String(50), nullable=True),
        sa.Column("total_usage_limit", sa.Integer, nullable=True),
        sa.Column("used_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("discount_type", sa.String(20), nullable=False),
        sa.Column("discount_value", sa.Numeric(10, 2), nullable=False),
        sa.Column("max_discount_amount", sa.Numeric(10, 2), nullable=True),
        sa.Column("valid_from", sa.DateTime(timezone=True), nullable=True),
        sa.Column("valid_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("notes", sa.Text, nullable=True),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "hanami_development_abilities",
        _id(),
        sa.Column("ability_name", sa.String(100), nullable=False),
        sa.Column("ability_description", sa.Text, nullable=True),
        sa.Column("ability_icon", sa.String(20), nullable=True),
        sa.Column("ability_color", sa.String(20), nullable=True),
        sa.Column("max_level", sa.Integer, nullable=False, server_default="5"),
        _created_at(),
    )

    op.create_table(
        "hanami_growth_trees",
        _id(),
        sa.Column("tree_name", sa.String(100), nullable=False),
        sa.Column("tree_description", sa.Text, nullable=True),
        sa.Column("tree_icon", sa.String(20), nullable=True),
        sa.Column("course_type", sa.String(100), nullable=True),
        sa.Column("tree_level", sa.Integer, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        _created_at(),
    )

    op.create_table(
        "hanami_growth_goals",
        _id(),
        sa.Column(
            "tree_id", sa.String(36),
            sa.ForeignKey("hanami_growth_trees.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("goal_name", sa.String(100), nullable=False),
        sa.Column("goal_description", sa.Text, nullable=True),
        sa.Column("goal_icon", sa.String(20), nullable=True),
        sa.Column("goal_order", sa.Integer, nullable=False, server_default="0"),
        sa.Column("progress_max", sa.Integer, nullable=False, server_default="5"),
        sa.Column("required_abilities", sa.JSON, nullable=False),
        _created_at(),
    )

    op.create_table(
        "hanami_growth_tree_versions",
        _id(),
        sa.Column(
            "tree_id", sa.String(36),
            sa.ForeignKey("hanami_growth_trees.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("version", sa.String(20), nullable=False),
        sa.Column("version_name", sa.String(100), nullable=True),
        sa.Column("version_description", sa.Text, nullable=True),
        sa.Column("goals_snapshot", sa.JSON, nullable=False),
        sa.Column("changes_summary", sa.Text, nullable=True),
        _created_at(),
        sa.UniqueConstraint("tree_id", "version"),
    )

    op.create_table(
        "hanami_media_quota_levels",
        _id(),
        sa.Column("level_name", sa.String(50), nullable=False),
        sa.Column("video_limit", sa.Integer, nullable=False),
        sa.Column("photo_limit", sa.Integer, nullable=False),
        sa.Column("storage_limit_mb", sa.Integer, nullable=False),
        sa.Column("video_size_limit_mb", sa.Integer, nullable=False, server_default="20"),
        sa.Column("photo_size_limit_mb", sa.Integer, nullable=False, server_default="1"),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        _created_at(),
    )

    op.create_table(
        "hanami_lesson_plan_activities",
        _id(),
        sa.Column("lesson_date", sa.String(10), nullable=False),
        sa.Column("timeslot", sa.String(10), nullable=False),
        sa.Column("course_type", sa.String(100), nullable=False),
        sa.Column("activity_id", sa.String(36), nullable=False),
        sa.Column(
            "activity_type", sa.String(30), nullable=False, server_default="class_activity",
        ),
        _created_at(),
    )

    op.create_table(
        "hanami_auth_sessions",
        _id(),
        sa.Column("user_id", sa.String(36), nullable=False, index=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        _created_at(),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("hanami_auth_sessions")
    op.drop_table("hanami_lesson_plan_activities")
    op.drop_table("hanami_media_quota_levels")
    op.drop_table("hanami_growth_tree_versions")
    op.drop_table("hanami_growth_goals")
    op.drop_table("hanami_growth_trees")
    op.drop_table("hanami_development_abilities")
    op.drop_table("hanami_promo_codes")
    op.drop_table("hanami_employee")
    op.drop_table("hanami_student_media")
    op.drop_table("inactive_student_list")
    op.drop_table("hanami_trial_students")
    op.drop_table("Hanami_Students")
    op.drop_table("Hanami_CourseTypes")
