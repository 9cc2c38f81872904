"""Error Handlers: global exception handlers for failures raised outside a route body.

Invariants:
    - HanamiError -> failure envelope with its own status code
    - RequestValidationError -> 400 envelope; "缺少必要參數" when something required is missing
    - Starlette HTTPException (unknown path, wrong method) -> envelope with the same status
    - Exception (catch-all) -> 500 envelope, never leaks internal details

Design Decisions:
    - Route bodies are guarded by route_handler.enveloped; these handlers cover
      what happens before it runs (parameter parsing, dependency resolution)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hanami.api.route_handler import (
    INTERNAL_ERROR_MESSAGE, envelope_response, error_response,
)
from hanami.config import get_settings
from hanami.core.errors import HanamiError
from hanami.core.redaction import redact
from hanami.schemas.envelope import Envelope

logger = logging.getLogger(__name__)

MISSING_PARAMETER_MESSAGE = "缺少必要參數"
INVALID_PARAMETER_MESSAGE = "參數格式錯誤"

_HTTP_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "找不到請求的資源",
    status.HTTP_405_METHOD_NOT_ALLOWED: "不支援此請求方法",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_hanami_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_hanami_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HanamiError)
    async def hanami_error_handler(request: Request, exc: HanamiError):
        """Handle Hanami errors raised by dependencies."""
        settings = get_settings()
        logger.error(
            f"HanamiError: {redact(exc.message, settings.secret_values())}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(
            exc, settings.secret_values(), settings.expose_error_details,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request parsing/validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "status_code": 400},
        )
        return envelope_response(
            build_validation_envelope(exc.errors()),
            status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing-level errors in envelope form."""
        message = _HTTP_MESSAGES.get(exc.status_code)
        if message is None:
            message = exc.detail if isinstance(exc.detail, str) else "請求失敗"
        return envelope_response(
            Envelope.fail(message), exc.status_code, getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        secrets = get_settings().secret_values()
        logger.error(
            f"Unhandled exception on {request.url.path}: {redact(str(exc), secrets)}",
            exc_info=True,
            extra={"path": request.url.path, "status_code": 500},
        )
        return envelope_response(
            Envelope.fail(INTERNAL_ERROR_MESSAGE),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def build_validation_envelope(errors: list[dict]) -> Envelope:
    """Failure envelope naming every offending parameter."""
    missing = any(e.get("type") == "missing" for e in errors)
    fields = "; ".join(
        f"{'.'.join(str(loc) for loc in e.get('loc', ()))}: {e.get('msg', '')}"
        for e in errors
    )
    return Envelope.fail(
        MISSING_PARAMETER_MESSAGE if missing else INVALID_PARAMETER_MESSAGE,
        details=fields or None,
    )
