"""CLI forwarding module to allow `python -m usersapi.cli`."""

from cli.main import app, build_event, build_parser, main

__all__ = ["app", "build_event", "build_parser", "main"]
