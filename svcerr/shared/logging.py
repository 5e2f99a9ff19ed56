"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Key/value fields travel in the ``context`` attribute of a log record.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """JSON log formatter that keeps the record's context fields."""

    def __init__(self, service_name: str = "svcerr", *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
            "context": getattr(record, "context", {}),
        }
        if record.exc_info:
            log_obj["stack_trace"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str)


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    service_name: str = "svcerr",
) -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        json_format: Emit one JSON object per record instead of plain text.
        service_name: Value of the ``service`` field in JSON records.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    if json_format:
        for handler in logging.getLogger().handlers:
            handler.setFormatter(StructuredFormatter(service_name=service_name))

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log ``message`` with key/value fields attached as ``record.context``."""
    logger.log(level, message, extra={"context": context})
