"""Entrypoint compatible with AWS Lambda + API Gateway."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apiserver.contract import ApiRequest, ApiResponse
from apiserver.errors import ApiError
from apiserver.observability import build_logger
from apiserver.router import RequestScope, Router
from apiserver.routes import users
from core.config import Settings, load_settings, settings_path
from core.datasource import SampleUserSource, UserSource


def build_router(settings: Settings) -> Router:
    get_handler = users.get_user if settings.strict_user_id else users.list_users
    return Router(
        {
            "GET": get_handler,
            "POST": users.create_user,
        }
    )


@dataclass
class Application:
    """Everything an invocation needs, built once per process."""

    router: Router
    scope: RequestScope

    def handle(self, event: dict[str, Any], context: Any = None) -> dict[str, Any]:
        logger = self.scope.logger
        context_request_id = getattr(context, "aws_request_id", None)
        logger.append_keys(request_id=context_request_id)

        try:
            request = ApiRequest.from_event(event)
            if context_request_id is None:
                logger.append_keys(request_id=request.request_id)
            response = self.router.dispatch(request, self.scope)
        except ApiError as exc:
            logger.error(exc.message, extra={"error": str(exc)})
            response = exc.to_response()
        except Exception:
            logger.exception("Unhandled error while serving request")
            response = ApiResponse.text(500, ApiError.message)
        return response.to_event()


def build_app(
    settings: Settings | None = None,
    source: UserSource | None = None,
    logger: Any = None,
) -> Application:
    settings = settings or load_settings(settings_path())
    scope = RequestScope(
        logger=logger or build_logger(settings),
        source=source or SampleUserSource(),
        settings=settings,
    )
    return Application(router=build_router(settings), scope=scope)


_APP: Application | None = None


def get_app() -> Application:
    """Return the process-wide application, building it on first use."""
    global _APP
    if _APP is None:
        _APP = build_app()
    return _APP


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    return get_app().handle(event, context)
