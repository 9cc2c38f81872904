"""Domain Types: identity aliases and enums shared across layers.

Invariants:
    - Record ids are opaque strings; the core never parses them
    - TrustTier has exactly two members; the tier is a capability, not a protocol
"""

from enum import Enum
from typing import Any

Record = dict[str, Any]


class TrustTier(str, Enum):
    """Access-control level of a data adapter."""
    ELEVATED = "elevated"   # service role, bypasses row-level security
    STANDARD = "standard"   # tenant-scoped role, row-level security applies


class Collection(str, Enum):
    """Named tables the API reads or writes."""
    COURSE_TYPES = "Hanami_CourseTypes"
    STUDENTS = "Hanami_Students"
    TRIAL_STUDENTS = "hanami_trial_students"
    INACTIVE_STUDENTS = "inactive_student_list"
    STUDENT_MEDIA = "hanami_student_media"
    TEACHERS = "hanami_employee"
    PROMO_CODES = "hanami_promo_codes"
    GROWTH_TREES = "hanami_growth_trees"
    GROWTH_GOALS = "hanami_growth_goals"
    GROWTH_TREE_VERSIONS = "hanami_growth_tree_versions"
    DEVELOPMENT_ABILITIES = "hanami_development_abilities"
    MEDIA_QUOTA_LEVELS = "hanami_media_quota_levels"
    LESSON_PLAN_ACTIVITIES = "hanami_lesson_plan_activities"
    AUTH_SESSIONS = "hanami_auth_sessions"
