"""Course Types: read-only catalogue of lesson types."""

from fastapi import APIRouter, Query

from hanami.api.deps import StandardAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.query import Order, eq

router = APIRouter(prefix="/api/course-types", tags=["course-types"])


@router.get("")
@enveloped()
async def list_course_types(
    adapter: StandardAdapter,
    include_inactive: bool = Query(False, alias="includeInactive"),
):
    """Active course types ordered by name; all of them with includeInactive=true."""
    filters = [] if include_inactive else [eq("status", True)]
    return await adapter.select(
        Collection.COURSE_TYPES, filters=filters, order=[Order("name")],
    )
