"""Response Envelope: the uniform JSON wrapper returned by every route.

Invariants:
    - success is always present
    - success=true never carries error; success=false always carries error
    - data and error are never populated together
    - absent fields are omitted from the JSON body (data=[] is kept)
"""

from typing import Any

from pydantic import BaseModel, model_validator


class Envelope(BaseModel):
    """{success, data|error, message?, details?}"""
    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None
    details: str | None = None

    @model_validator(mode="after")
    def check_shape(self):
        if self.success and self.error is not None:
            raise ValueError("successful envelope cannot carry error")
        if not self.success and not self.error:
            raise ValueError("failed envelope requires a non-empty error")
        if self.data is not None and self.error is not None:
            raise ValueError("envelope cannot carry both data and error")
        return self

    @classmethod
    def ok(cls, data: Any = None, message: str | None = None) -> "Envelope":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(
        cls,
        error: str,
        message: str | None = None,
        details: str | None = None,
    ) -> "Envelope":
        return cls(success=False, error=error, message=message, details=details)

    def to_body(self) -> dict:
        """Dict with unset optional fields dropped; record contents left untouched."""
        body: dict[str, Any] = {"success": self.success}
        for key in ("data", "message", "error", "details"):
            value = getattr(self, key)
            if value is not None:
                body[key] = value
        return body
