"""Promo Codes: institution discount code administration (service-role pool).

Invariants:
    - code is stored upper-case
    - PUT writes only fields present in the body; nulls are written only to nullable fields
    - An empty PUT body is a 400, not a no-op success
    - Every by-id operation answers 404 when the code does not exist
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Query, status

from hanami.api.deps import ElevatedAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.errors import InputValidationError, ResourceNotFoundError
from hanami.core.query import desc, eq
from hanami.schemas.envelope import Envelope
from hanami.schemas.promo_code import PromoCodeCreate, PromoCodeUpdate

router = APIRouter(prefix="/api/promo-codes", tags=["promo-codes"])

NULLABLE_FIELDS = frozenset({
    "description", "institution_name", "institution_code", "total_usage_limit",
    "max_discount_amount", "valid_until", "notes",
})


def _not_found(promo_code_id: str) -> ResourceNotFoundError:
    return ResourceNotFoundError("優惠碼", promo_code_id)


@router.get("")
@enveloped()
async def list_promo_codes(
    adapter: ElevatedAdapter,
    active_only: bool = Query(False, alias="activeOnly"),
):
    filters = [eq("is_active", True)] if active_only else []
    return await adapter.select(
        Collection.PROMO_CODES, filters=filters, order=[desc("created_at")],
    )


@router.post("")
@enveloped(message="優惠碼已建立", status_code=status.HTTP_201_CREATED)
async def create_promo_code(body: PromoCodeCreate, adapter: ElevatedAdapter):
    created = await adapter.insert(Collection.PROMO_CODES, body.model_dump())
    return created[0]


@router.get("/{promo_code_id}")
@enveloped()
async def get_promo_code(promo_code_id: str, adapter: ElevatedAdapter):
    promo_code = await adapter.select_one(
        Collection.PROMO_CODES, filters=[eq("id", promo_code_id)],
    )
    if promo_code is None:
        raise _not_found(promo_code_id)
    return promo_code


@router.put("/{promo_code_id}")
@enveloped(message="優惠碼已更新")
async def update_promo_code(
    promo_code_id: str, body: PromoCodeUpdate, adapter: ElevatedAdapter,
):
    values = {
        key: value
        for key, value in body.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_FIELDS
    }
    if not values:
        raise InputValidationError("沒有提供要更新的欄位")
    values["updated_at"] = datetime.now(timezone.utc)
    promo_code = await adapter.update(Collection.PROMO_CODES, promo_code_id, values)
    if promo_code is None:
        raise _not_found(promo_code_id)
    return promo_code


@router.delete("/{promo_code_id}")
@enveloped()
async def delete_promo_code(promo_code_id: str, adapter: ElevatedAdapter):
    if not await adapter.delete(Collection.PROMO_CODES, promo_code_id):
        raise _not_found(promo_code_id)
    return Envelope.ok(message="優惠碼已刪除")
