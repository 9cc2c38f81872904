"""Auth: server-side sign-out on the service-role pool."""

from datetime import datetime, timezone

from fastapi import APIRouter

from hanami.api.deps import ElevatedAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.errors import ResourceNotFoundError
from hanami.schemas.auth import LogoutRequest
from hanami.schemas.envelope import Envelope

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/logout")
@enveloped()
async def logout(body: LogoutRequest, adapter: ElevatedAdapter):
    """Revoke one login session. Revoking twice is harmless."""
    revoked = await adapter.update(
        Collection.AUTH_SESSIONS, body.session_id,
        {"is_active": False, "revoked_at": datetime.now(timezone.utc)},
    )
    if revoked is None:
        raise ResourceNotFoundError("登入工作階段", body.session_id)
    return Envelope.ok(message="已成功登出")
