"""Method based dispatch for the users resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

from apiserver.contract import ApiRequest, ApiResponse
from apiserver.errors import ApiError, MethodNotAllowedError
from core.config import Settings
from core.datasource import UserSource


@dataclass(frozen=True)
class RequestScope:
    """Process-lifetime collaborators handed to every route handler."""

    logger: Any
    source: UserSource
    settings: Settings


RouteHandler = Callable[[ApiRequest, RequestScope], ApiResponse]


class Router:
    def __init__(self, routes: Dict[str, RouteHandler] | None = None) -> None:
        self._routes: Dict[str, RouteHandler] = dict(routes or {})

    def register(self, method: str, handler: RouteHandler) -> None:
        self._routes[method] = handler

    def methods(self) -> list[str]:
        return list(self._routes)

    def handler_for(self, method: str) -> RouteHandler | None:
        # Verbs are matched exactly as received; "get" is not "GET".
        return self._routes.get(method)

    def dispatch(self, request: ApiRequest, scope: RequestScope) -> ApiResponse:
        handler = self.handler_for(request.method)
        try:
            if handler is None:
                raise MethodNotAllowedError(request.method)
            return handler(request, scope)
        except MethodNotAllowedError as exc:
            scope.logger.error(exc.message, extra={"method": request.method})
            return exc.to_response()
        except ApiError as exc:
            return exc.to_response()


__all__ = ["RequestScope", "RouteHandler", "Router"]
