from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from apiserver.app import Application, build_app
from apiserver.router import RequestScope
from core.config import Settings
from core.datasource import SampleUserSource


def _rest_event(method: str, user_id: str | None = None, body: str | None = None, **extra: Any) -> dict[str, Any]:
    event: dict[str, Any] = {
        "httpMethod": method,
        "path": f"/users/{user_id}" if user_id is not None else "/users",
        "pathParameters": {"user_id": user_id} if user_id is not None else None,
        "body": body,
        "isBase64Encoded": False,
        "requestContext": {"requestId": "req-1"},
    }
    event.update(extra)
    return event


@pytest.fixture
def rest_event() -> Callable[..., dict[str, Any]]:
    return _rest_event


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def scope(logger: MagicMock) -> RequestScope:
    return RequestScope(logger=logger, source=SampleUserSource(), settings=Settings())


@pytest.fixture
def application(logger: MagicMock) -> Application:
    return build_app(Settings(), logger=logger)
