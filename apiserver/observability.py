"""Logger construction for the Lambda runtime."""

from __future__ import annotations

import logging
from typing import IO

from aws_lambda_powertools import Logger

from core.config import Settings


def build_logger(settings: Settings, stream: IO[str] | None = None) -> Logger:
    """Create the process-wide structured logger.

    Records go to stdout unless ``stream`` is given.
    """
    handler = logging.StreamHandler(stream) if stream is not None else None
    return Logger(service=settings.service_name, level=settings.log_level, logger_handler=handler)


__all__ = ["build_logger"]
