"""Tests for structspine.core.logging."""

from __future__ import annotations

import json
import logging
import sys

import pytest
import structlog
from rich.logging import RichHandler

from structspine.core.config import get_settings
from structspine.core.logging import configure_logging, json_formatter

pytestmark = pytest.mark.usefixtures("restore_logger")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_uses_rich(self) -> None:
        """Console format installs a RichHandler."""
        logger = configure_logging(get_settings(log_format="console", log_level="WARNING"))

        assert logger.name == "structspine"
        assert [type(h) for h in logger.handlers] == [RichHandler]
        assert logger.level == logging.WARNING

    def test_json_format(self) -> None:
        """JSON format installs the structlog JSON formatter."""
        logger = configure_logging(get_settings(log_format="json", log_level="DEBUG"))

        assert isinstance(logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert logger.level == logging.DEBUG

    def test_reconfigure_replaces_handler(self) -> None:
        """Calling twice leaves a single handler."""
        configure_logging(get_settings())
        logger = configure_logging(get_settings())

        assert len(logger.handlers) == 1

    def test_json_lines_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Package loggers emit one JSON object per record."""
        configure_logging(get_settings(log_format="json", log_level="INFO"))

        logging.getLogger("structspine.hierarchy.build").info("Loaded hierarchy from %s", "box.json")

        data = json.loads(capsys.readouterr().err.strip())
        assert data["event"] == "Loaded hierarchy from box.json"
        assert data["logger"] == "structspine.hierarchy.build"


class TestJsonFormatter:
    """Tests for json_formatter."""

    def test_fields(self) -> None:
        """Records become JSON objects."""
        record = logging.LogRecord("structspine.chain", logging.DEBUG, "", 0, "Invoking %s", ("email",), None)

        data = json.loads(json_formatter().format(record))

        assert data == {"event": "Invoking email", "logger": "structspine.chain", "level": "debug"}

    def test_exception_info(self) -> None:
        """Tracebacks are included when present."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("structspine", logging.ERROR, "", 0, "failed", None, sys.exc_info())

        data = json.loads(json_formatter().format(record))

        assert "RuntimeError: boom" in data["exception"]
