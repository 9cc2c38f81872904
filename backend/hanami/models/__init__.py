"""ORM Models: SQLAlchemy declarative models, one per collection.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every collection on Base.metadata,
      which is what the data adapter resolves collection names against
"""

from hanami.models.ability import DevelopmentAbility  # noqa: F401
from hanami.models.auth_session import AuthSession  # noqa: F401
from hanami.models.course_type import CourseType  # noqa: F401
from hanami.models.growth_tree import GrowthGoal, GrowthTree, GrowthTreeVersion  # noqa: F401
from hanami.models.lesson_plan_activity import LessonPlanActivity  # noqa: F401
from hanami.models.media_quota_level import MediaQuotaLevel  # noqa: F401
from hanami.models.promo_code import PromoCode  # noqa: F401
from hanami.models.student import InactiveStudent, Student, TrialStudent  # noqa: F401
from hanami.models.student_media import StudentMedia  # noqa: F401
from hanami.models.teacher import Teacher  # noqa: F401
