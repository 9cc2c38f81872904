"""Error Hierarchy: typed, categorized exceptions for every Hanami failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors are 4xx and recoverable; adapter/infrastructure errors are 5xx
    - `message` is user-safe; `details` holds lower-level text and is redacted before it leaves

Design Decisions:
    - Single hierarchy rooted at HanamiError: route wrapper and global handlers catch one type
    - ErrorContext as dataclass: observability fields kept out of the response body
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    DATABASE = "database"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-side context attached to an error for logging only."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    operation: str | None = None
    tier: str | None = None
    debug_info: dict[str, Any] | None = None


class HanamiError(Exception):
    """Base exception for all Hanami errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details
        self.headers = headers


# ─── Caller errors (4xx) ────────────────────────────────────────

class InputValidationError(HanamiError):
    """Caller omitted or mis-typed a required parameter."""
    def __init__(
        self, message: str, field: str | None = None, details: str | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, None, 400, details,
        )
        self.field = field


class ResourceNotFoundError(HanamiError):
    """Identified resource does not exist (or is outside the caller's scope)."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or f"找不到{resource_type}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
            f"{resource_type} '{resource_id}' not found",
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class MethodNotAllowedError(HanamiError):
    """Endpoint exists but only answers another method."""
    def __init__(self, allowed: str, message: str):
        super().__init__(
            message, "METHOD_NOT_ALLOWED", ErrorCategory.METHOD_NOT_ALLOWED,
            ErrorSeverity.INFO, None, 405, headers={"Allow": allowed},
        )
        self.allowed = allowed


# ─── Infrastructure errors (5xx) ────────────────────────────────

class AdapterError(HanamiError):
    """A data-access call failed (network, permission, missing table/column, constraint).

    `code` carries the database SQLSTATE when one is known (e.g. 42P01 for a
    missing table) so handlers can branch on it.
    """

    UNDEFINED_TABLE = "42P01"
    UNDEFINED_COLUMN = "42703"

    def __init__(
        self,
        message: str,
        operation: str,
        code: str | None = None,
        details: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code or "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500, details,
        )
        self.operation = operation

    @property
    def is_missing_table(self) -> bool:
        return self.code == self.UNDEFINED_TABLE


class ConfigurationError(HanamiError):
    """Required server configuration is absent."""
    def __init__(self, setting: str):
        super().__init__(
            "服務器配置錯誤", "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, None, 500, f"{setting} is not configured",
        )
        self.setting = setting
