"""Command line interface for exercising the users API locally."""

from __future__ import annotations

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import Any

from apiserver.app import Application, build_app
from apiserver.observability import build_logger
from cli import output
from core import config
from core.constants import USER_ID_PARAM

FORMATS = ["json", "md", "table"]


class CLIError(Exception):
    def __init__(self, message: str, exit_code: int = 2) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="usersapi", description="Users API developer toolkit")
    parser.add_argument("--config", type=Path, default=config.CONFIG_PATH, help="Path to configuration file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # invoke -----------------------------------------------------------------
    invoke_cmd = subparsers.add_parser("invoke", help="Run the Lambda handler against a synthetic event")
    invoke_cmd.add_argument("method", help="HTTP method, passed through verbatim")
    invoke_cmd.add_argument("--user-id", help="Value of the user_id path parameter")
    body = invoke_cmd.add_mutually_exclusive_group()
    body.add_argument("--body", help="Raw request body")
    body.add_argument("--body-file", type=Path)
    invoke_cmd.add_argument("--strict-user-id", action="store_true", help="Reject GET requests without user_id")
    invoke_cmd.add_argument("--log-level")
    invoke_cmd.add_argument("--format", choices=FORMATS, help="Output format override")

    # routes -----------------------------------------------------------------
    routes_cmd = subparsers.add_parser("routes", help="Show the method table")
    routes_cmd.add_argument("--strict-user-id", action="store_true")
    routes_cmd.add_argument("--format", choices=FORMATS, help="Output format override")

    return parser


def app(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = config.load_settings(args.config)
        merged = settings.merge_cli(
            format_override=args.format,
            log_level=getattr(args, "log_level", None),
            strict_user_id=True if args.strict_user_id else None,
        )

        if args.command == "invoke":
            return _cmd_invoke(args, merged)
        if args.command == "routes":
            return _cmd_routes(args, merged)
    except CLIError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    except Exception as exc:  # pragma: no cover - unexpected errors bubble up
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


# ---------------------------------------------------------------------------
# Command implementations


def _cmd_invoke(args: argparse.Namespace, settings: config.Settings) -> int:
    event = build_event(args.method, user_id=args.user_id, body=_read_body(args))
    result = _build_app(settings).handle(event)
    output.emit(_render_result(result), settings.default_format)
    return 0 if result["statusCode"] < 400 else 4


def _cmd_routes(args: argparse.Namespace, settings: config.Settings) -> int:
    router = _build_app(settings).router
    rows = []
    for method in router.methods():
        handler = router.handler_for(method)
        rows.append(
            {
                "method": method,
                "handler": f"{handler.__module__}.{handler.__name__}",
                "doc": (handler.__doc__ or "").strip().split("\n")[0],
            }
        )
    output.emit(rows, settings.default_format)
    return 0


# ---------------------------------------------------------------------------
# Helpers


def _build_app(settings: config.Settings) -> Application:
    # stdout carries the command output only
    return build_app(settings, logger=build_logger(settings, stream=sys.stderr))


def build_event(method: str, user_id: str | None = None, body: str | None = None) -> dict[str, Any]:
    """Build a REST API proxy event like the one API Gateway would send."""
    path_parameters = {USER_ID_PARAM: user_id} if user_id is not None else None
    path = f"/users/{user_id}" if user_id is not None else "/users"
    return {
        "resource": "/users/{user_id}" if user_id is not None else "/users",
        "path": path,
        "httpMethod": method,
        "headers": {"Content-Type": "application/json"} if body is not None else {},
        "pathParameters": path_parameters,
        "body": body,
        "isBase64Encoded": False,
        "requestContext": {"requestId": f"local-{uuid.uuid4()}"},
    }


def _read_body(args: argparse.Namespace) -> str | None:
    if args.body_file:
        if not args.body_file.exists():
            raise CLIError(f"Body file not found: {args.body_file}")
        return args.body_file.read_text(encoding="utf-8")
    return args.body


def _render_result(result: dict[str, Any]) -> dict[str, Any]:
    rendered = dict(result)
    if result["headers"].get("Content-Type") == "application/json":
        rendered["body"] = json.loads(result["body"])
    return rendered


def main() -> None:
    raise SystemExit(app())


if __name__ == "__main__":
    main()
