"""Media Quota Levels: upload allowance tiers.

Invariants:
    - Listing is ordered by storage_limit_mb ascending
    - A missing table gets the default levels created and the read retried once;
      when that creation fails too the response is 404 with an instruction to run initialization
"""

import logging

from fastapi import APIRouter, Query, status

from hanami.api.deps import ElevatedAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.errors import AdapterError, ResourceNotFoundError
from hanami.core.query import Order, eq
from hanami.schemas.media import QuotaLevelCreate
from hanami.services.progress_seeding import DEFAULT_QUOTA_LEVELS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media-quota-levels", tags=["media"])


async def _select_levels(adapter, filters):
    return await adapter.select(
        Collection.MEDIA_QUOTA_LEVELS, filters=filters,
        order=[Order("storage_limit_mb")],
    )


@router.get("")
@enveloped()
async def list_quota_levels(
    adapter: ElevatedAdapter,
    active_only: bool = Query(False),
):
    filters = [eq("is_active", True)] if active_only else []
    try:
        return await _select_levels(adapter, filters)
    except AdapterError as exc:
        if not exc.is_missing_table:
            raise
        missing = exc

    try:
        await adapter.insert(
            Collection.MEDIA_QUOTA_LEVELS,
            [{**level, "is_active": True} for level in DEFAULT_QUOTA_LEVELS],
        )
    except AdapterError as exc:
        logger.warning(
            f"Creating default quota levels failed: {exc.message}",
            extra={"collection": Collection.MEDIA_QUOTA_LEVELS.value},
        )
        raise ResourceNotFoundError(
            "資料表", Collection.MEDIA_QUOTA_LEVELS.value,
            "資料表不存在，請先執行初始化",
        ) from missing

    try:
        return await _select_levels(adapter, filters)
    except AdapterError as exc:
        raise AdapterError(
            "獲取配額等級失敗", "select", code=exc.code, details=exc.details,
            context=exc.context,
        ) from exc


@router.post("")
@enveloped(message="配額等級已建立", status_code=status.HTTP_201_CREATED)
async def create_quota_level(body: QuotaLevelCreate, adapter: ElevatedAdapter):
    created = await adapter.insert(Collection.MEDIA_QUOTA_LEVELS, body.model_dump())
    return created[0]
