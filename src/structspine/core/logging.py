"""Logging setup for the command line.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog
from rich.logging import RichHandler

if TYPE_CHECKING:
    from structspine.core.config import Settings


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering stdlib log records as one JSON object per line.

    Example:
        >>> import json
        >>> import logging
        >>> from structspine.core.logging import json_formatter
        >>> record = logging.LogRecord("structspine", logging.INFO, "", 0, "hello", None, None)
        >>> data = json.loads(json_formatter().format(record))
        >>> data["event"], data["logger"], data["level"]
        ('hello', 'structspine', 'info')
    """
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a handler to the ``structspine`` logger.

    Args:
        settings: Source of ``log_level`` and ``log_format``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("structspine")
    logger.handlers.clear()

    if settings.log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(json_formatter())
    else:
        handler = RichHandler(show_path=False, rich_tracebacks=True)

    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    return logger
