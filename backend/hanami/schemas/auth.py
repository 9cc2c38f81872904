"""Auth Schemas."""

from pydantic import BaseModel, Field


class LogoutRequest(BaseModel):
    session_id: str = Field(min_length=1)
