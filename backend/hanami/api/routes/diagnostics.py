"""Diagnostics: configuration presence and connectivity echo.

Invariants:
    - Only presence is reported, never a configured value
    - Neither endpoint touches the database
"""

import json
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from hanami.api.route_handler import enveloped
from hanami.config import DIAGNOSTIC_VARIABLES, Settings, get_settings
from hanami.core.errors import InputValidationError

router = APIRouter(prefix="/api/debug", tags=["diagnostics"])

SET = "已設置"
NOT_SET = "未設置"


@router.get("/env")
@enveloped(verbose=True)
async def environment_presence(settings: Settings = Depends(get_settings)):
    report = {}
    for variable in DIAGNOSTIC_VARIABLES:
        present = settings.is_configured(variable)
        report[variable] = {"present": present, "status": SET if present else NOT_SET}
    return report


@router.post("/echo")
@enveloped(message="連線正常", verbose=True)
async def echo(request: Request):
    raw = await request.body()
    try:
        received = json.loads(raw) if raw else None
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InputValidationError("無效的 JSON", details=str(exc)) from exc
    return {
        "received": received,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
