"""User model decoding and encoding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.models import User


def test_user_fields_keep_declared_order():
    user = User(username="bob", email="bob@x.com")
    assert list(user.model_dump()) == ["username", "email"]


def test_user_from_json_ignores_unknown_keys():
    user = User.from_json(b'{"username": "bob", "email": "bob@x.com", "admin": true}')
    assert user.model_dump() == {"username": "bob", "email": "bob@x.com"}


def test_user_accepts_unvalidated_values():
    user = User.from_json('{"username": "", "email": "not-an-email"}')
    assert user.username == ""
    assert user.email == "not-an-email"


@pytest.mark.parametrize(
    "raw",
    [
        b'{"username": "bob"}',
        b"not json",
        b"",
        b'["bob", "bob@x.com"]',
        b'{"username": 1, "email": "bob@x.com"}',
        b'{"username": "bob", "email": null}',
    ],
)
def test_user_from_json_rejects_malformed_payloads(raw):
    with pytest.raises(ValidationError):
        User.from_json(raw)


def test_user_decodes_non_ascii():
    user = User.from_json('{"username": "zoë", "email": "zoë@example.com"}'.encode("utf-8"))
    assert user.model_dump() == {"username": "zoë", "email": "zoë@example.com"}
