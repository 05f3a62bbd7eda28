"""Request and response shapes for API Gateway proxy integrations."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel

from apiserver.errors import BadRequestError

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class ApiRequest:
    """Inbound request, owned by a single invocation."""

    method: str
    path_parameters: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    path: str = "/"
    request_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path_parameters", MappingProxyType(dict(self.path_parameters)))

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> "ApiRequest":
        """Build a request from a REST (v1) or HTTP API (v2) proxy event."""
        request_context = event.get("requestContext") or {}
        http_context = request_context.get("http") or {}

        method = event.get("httpMethod")
        if method is None:
            method = http_context.get("method", "GET")
        path = event.get("path") or event.get("rawPath") or http_context.get("path") or "/"
        params = event.get("pathParameters") or {}

        return cls(
            method=method,
            path_parameters={str(key): str(value) for key, value in params.items() if value is not None},
            body=_decode_body(event.get("body"), bool(event.get("isBase64Encoded"))),
            path=path,
            request_id=request_context.get("requestId"),
        )


def _decode_body(raw: Any, is_base64: bool) -> bytes | None:
    if raw is None:
        return None
    if is_base64:
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise BadRequestError(f"body is not valid base64: {exc}") from exc
    if isinstance(raw, bytes):
        return raw
    return str(raw).encode("utf-8")


def _default_serializer(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def text(cls, status_code: int, message: str) -> "ApiResponse":
        return cls(status_code, message, {"Content-Type": TEXT_CONTENT_TYPE})

    @classmethod
    def json(cls, status_code: int, payload: Any) -> "ApiResponse":
        rendered = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=_default_serializer)
        return cls(status_code, rendered, {"Content-Type": JSON_CONTENT_TYPE})

    def to_event(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
            "isBase64Encoded": False,
        }


__all__ = ["ApiRequest", "ApiResponse"]
