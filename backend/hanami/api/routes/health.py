"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 unless both trust-tier pools answer (readiness)
"""

from fastapi import APIRouter, status

from hanami.api.route_handler import envelope_response
from hanami.core.domain_types import TrustTier
from hanami.infrastructure import database
from hanami.schemas.envelope import Envelope

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return envelope_response(Envelope.ok({
        "status": "healthy",
        "service": "hanami-api",
    }))


@router.get("/ready")
async def readiness_check():
    """Readiness probe: includes database connectivity for each tier."""
    checks = {}
    for tier in TrustTier:
        manager = database.managers.get(tier)
        healthy = await manager.health_check() if manager else False
        checks[tier.value] = "healthy" if healthy else "unavailable"
    if any(state != "healthy" for state in checks.values()):
        return envelope_response(
            Envelope.fail(
                "database_unavailable", message="not_ready",
                details=", ".join(f"{k}: {v}" for k, v in checks.items()),
            ),
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return envelope_response(Envelope.ok({"status": "ready", "checks": checks}))
