"""User lookups behind a swappable source."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from core.constants import MAX_USER_ID, PLACEHOLDER_EMAIL, SAMPLE_USERS, USERNAME_PREFIX
from core.models import User

_USER_ID_PATTERN = re.compile(r"\+?[0-9]+")


class InvalidUserId(ValueError):
    """Raised when a path value is not an unsigned 64-bit integer."""


def parse_user_id(raw: str) -> int:
    """Parse ``raw`` as an unsigned 64-bit integer.

    Only ASCII digits with an optional leading ``+`` are accepted; ``int()``
    alone would also let through whitespace, underscores and non-ASCII digits.
    """
    if not isinstance(raw, str) or not _USER_ID_PATTERN.fullmatch(raw):
        raise InvalidUserId(f"user_id is not an unsigned integer: {raw!r}")
    value = int(raw)
    if value > MAX_USER_ID:
        raise InvalidUserId(f"user_id is out of range: {raw!r}")
    return value


class UserSource(ABC):
    """Read access to users."""

    @abstractmethod
    def get_user(self, user_id: int) -> User:
        raise NotImplementedError

    @abstractmethod
    def list_users(self) -> list[User]:
        raise NotImplementedError


class SampleUserSource(UserSource):
    """Synthesises users instead of reading a store."""

    def get_user(self, user_id: int) -> User:
        return User(username=f"{USERNAME_PREFIX}{user_id}", email=PLACEHOLDER_EMAIL)

    def list_users(self) -> list[User]:
        return [User.model_validate(item) for item in SAMPLE_USERS]


__all__ = ["InvalidUserId", "SampleUserSource", "UserSource", "parse_user_id"]
