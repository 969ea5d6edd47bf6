"""Logging setup for the command line."""

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger.json import JsonFormatter

LOGGER_NAME = "budgetdash"
TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class BudgetJsonFormatter(JsonFormatter):
    """JSON formatter with timestamp and service metadata."""

    def add_fields(
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "budgetdash"


def setup_logging(level: str = "WARNING", json_format: bool = False) -> None:
    """Configure the budgetdash logger to write to stderr.

    Args:
        level: Log level name
        json_format: Emit one JSON object per line instead of plain text
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(BudgetJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
