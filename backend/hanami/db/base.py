"""SQLAlchemy Declarative Base: shared base class and id/timestamp helpers for all ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single registry the data adapter resolves collection names against
    - Primary keys are opaque strings (uuid4 text by default)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Hanami ORM models."""
    pass


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
