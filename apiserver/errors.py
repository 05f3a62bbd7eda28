"""Errors that map directly onto HTTP responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apiserver.contract import ApiResponse


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail

    def to_response(self) -> "ApiResponse":
        from apiserver.contract import ApiResponse

        return ApiResponse.text(self.status_code, self.message)


class BadRequestError(ApiError):
    status_code = 400
    message = "Bad request"


class MethodNotAllowedError(ApiError):
    status_code = 405
    message = "Method not allowed"


__all__ = ["ApiError", "BadRequestError", "MethodNotAllowedError"]
