"""API routes for the users resource."""

from __future__ import annotations

from pydantic import ValidationError

from apiserver.contract import ApiRequest, ApiResponse
from apiserver.errors import BadRequestError
from apiserver.router import RequestScope
from core.constants import USER_ID_PARAM
from core.datasource import InvalidUserId, parse_user_id
from core.models import User


def _lookup(raw_id: str, scope: RequestScope) -> ApiResponse:
    try:
        user_id = parse_user_id(raw_id)
    except InvalidUserId as exc:
        scope.logger.error("Bad request", extra={"error": str(exc)})
        raise BadRequestError(str(exc)) from exc
    return ApiResponse.json(200, scope.source.get_user(user_id))


def get_user(request: ApiRequest, scope: RequestScope) -> ApiResponse:
    """Return a single user; ``user_id`` is required."""
    scope.logger.info("path", extra={"path_parameters": dict(request.path_parameters)})
    raw_id = request.path_parameters.get(USER_ID_PARAM)
    if raw_id is None:
        raise BadRequestError(f"missing path parameter {USER_ID_PARAM}")
    return _lookup(raw_id, scope)


def list_users(request: ApiRequest, scope: RequestScope) -> ApiResponse:
    """Return one user when ``user_id`` is given, otherwise every sample user."""
    scope.logger.info("path", extra={"path_parameters": dict(request.path_parameters)})
    raw_id = request.path_parameters.get(USER_ID_PARAM)
    if raw_id is not None:
        return _lookup(raw_id, scope)
    return ApiResponse.json(200, scope.source.list_users())


def create_user(request: ApiRequest, scope: RequestScope) -> ApiResponse:
    """Echo the decoded user back; nothing is stored."""
    try:
        user = User.from_json(request.body or b"")
    except ValidationError as exc:
        scope.logger.error("Bad request", extra={"error": str(exc)})
        raise BadRequestError(str(exc)) from exc
    return ApiResponse.json(201, user)
