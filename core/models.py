"""Data models shared across the users API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class User(BaseModel):
    """User record as it travels over the wire."""

    username: str = Field(..., description="Display name, not checked for uniqueness")
    email: str = Field(..., description="Contact address, not checked for format")

    @classmethod
    def from_json(cls, raw: str | bytes) -> "User":
        return cls.model_validate_json(raw)


__all__ = ["User"]
