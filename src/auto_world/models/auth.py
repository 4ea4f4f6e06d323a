"""Models for the login endpoint."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Credentials(BaseModel):
    """Email/password pair held only until the login request is sent."""

    email: str
    password: str = Field(repr=False)


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status_code: Optional[int] = Field(default=None, alias="statusCode")
    status: bool = False
    message: Optional[str] = None
    token: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _truthy(cls, v: Any) -> bool:
        return bool(v)

    @field_validator("message", mode="before")
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)
