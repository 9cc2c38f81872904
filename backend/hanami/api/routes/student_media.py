"""Student Media: per-student media listing and the favorite toggle.

Invariants:
    - Listing requires studentId; results are newest first
    - PATCH .../favorite writes only is_favorite and updated_at, and returns the stored record
    - Setting the same favorite value twice leaves the same stored value (idempotent)
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Query

from hanami.api.deps import StandardAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.errors import ResourceNotFoundError
from hanami.core.query import desc, eq
from hanami.schemas.media import FavoriteUpdate

router = APIRouter(prefix="/api/student-media", tags=["student-media"])


@router.get("")
@enveloped()
async def list_student_media(
    adapter: StandardAdapter,
    student_id: str = Query(..., alias="studentId", min_length=1),
    favorites_only: bool = Query(False, alias="favoritesOnly"),
    limit: int | None = Query(None, ge=1, le=500),
):
    filters = [eq("student_id", student_id)]
    if favorites_only:
        filters.append(eq("is_favorite", True))
    return await adapter.select(
        Collection.STUDENT_MEDIA, filters=filters,
        order=[desc("created_at")], limit=limit,
    )


@router.patch("/{media_id}/favorite")
@enveloped()
async def set_favorite(
    media_id: str, body: FavoriteUpdate, adapter: StandardAdapter,
):
    media = await adapter.update(
        Collection.STUDENT_MEDIA, media_id,
        {"is_favorite": body.is_favorite, "updated_at": datetime.now(timezone.utc)},
    )
    if media is None:
        raise ResourceNotFoundError("媒體", media_id)
    return media
