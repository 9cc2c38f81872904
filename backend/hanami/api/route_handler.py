"""Route Handler Wrapper: one boundary that turns a route coroutine into an envelope endpoint.

Invariants:
    - Success -> Envelope.ok(result); a returned Envelope or Response passes through untouched
    - HanamiError -> failure envelope with the error's status code and headers
    - Any other exception -> 500 failure envelope; no stack trace ever reaches the body
    - error/details text is redacted against configured secrets before it is sent
    - details appear only for verbose routes or when EXPOSE_ERROR_DETAILS is on

Design Decisions:
    - Decorator over per-route try/except: FastAPI still sees the wrapped
      signature (functools.wraps), so Query/Path/Body/Depends keep working
    - Global handlers (error_handlers.py) stay as the outer layer for failures
      raised before the route body runs (validation, dependencies)
"""

import functools
import logging

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from hanami.config import get_settings
from hanami.core.errors import HanamiError
from hanami.core.redaction import redact
from hanami.schemas.envelope import Envelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "內部服務器錯誤"


def envelope_response(envelope: Envelope, status_code: int = status.HTTP_200_OK, headers=None):
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope.to_body()),
        headers=headers,
    )


def error_response(
    exc: HanamiError,
    secrets: list[str],
    include_details: bool = False,
    message: str | None = None,
) -> JSONResponse:
    """Failure envelope for a HanamiError."""
    details = redact(exc.details, secrets) if include_details else None
    error = redact(exc.message, secrets) or INTERNAL_ERROR_MESSAGE
    envelope = Envelope.fail(error, message, details)
    return envelope_response(envelope, exc.http_status, exc.headers)


def enveloped(
    *,
    message: str | None = None,
    status_code: int = status.HTTP_200_OK,
    failure_message: str | None = None,
    verbose: bool = False,
    expose_exception: bool = False,
):
    """Wrap a route coroutine in the envelope contract.

    message: static note added to successful envelopes.
    failure_message: static note added to failed envelopes.
    verbose: always include redacted `details` on failure.
    expose_exception: use the caught exception's (redacted) text as `error`
        instead of the generic internal-error message.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            settings = get_settings()
            secrets = settings.secret_values()
            include_details = verbose or settings.expose_error_details
            try:
                result = await func(*args, **kwargs)
            except HanamiError as exc:
                log = logger.error if exc.http_status >= 500 else logger.warning
                log(
                    f"{func.__name__} failed: {redact(exc.message, secrets)}",
                    extra={"error_code": exc.code, "status_code": exc.http_status},
                )
                return error_response(exc, secrets, include_details, failure_message)
            except Exception as exc:
                text = redact(str(exc), secrets)
                logger.error(
                    f"Unhandled exception in {func.__name__}: {text}",
                    exc_info=True,
                    extra={"status_code": status.HTTP_500_INTERNAL_SERVER_ERROR},
                )
                error = text if expose_exception and text else INTERNAL_ERROR_MESSAGE
                details = f"{type(exc).__name__}: {text}" if include_details else None
                return envelope_response(
                    Envelope.fail(error, failure_message, details),
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                )

            if isinstance(result, Response):
                return result
            if isinstance(result, Envelope):
                return envelope_response(result, status_code)
            return envelope_response(Envelope.ok(result, message), status_code)

        return wrapper

    return decorator
