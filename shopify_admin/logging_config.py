"""Logging configuration for the Shopify Admin client.

The library itself only creates loggers under the ``shopify_admin`` namespace
and never installs handlers. Applications (and the bundled CLI) call
``setup_logging`` to get one of two output formats:
- Console: Rich-formatted colored output for development
- JSON: Structured JSON logs for production/log aggregation
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from shopify_admin.config import LogFormat

BASE_LOGGER = "shopify_admin"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs each log record as a single JSON line. Fields passed through
    ``extra`` (status codes, attempt numbers, paths) become top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str, ensure_ascii=False)


def setup_logging(
    log_level: str = "INFO",
    log_format: LogFormat = LogFormat.CONSOLE,
) -> logging.Logger:
    """Configure and return the ``shopify_admin`` logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
        log_format: CONSOLE for Rich output, JSON for one JSON object per line.

    Returns:
        Configured logger instance.

    Example:
        >>> logger = setup_logging("DEBUG", LogFormat.JSON)
        >>> logger.info("Client ready")
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(BASE_LOGGER)
    logger.setLevel(level)

    # Calling setup twice must not duplicate output
    logger.handlers.clear()
    logger.propagate = False

    handler: logging.Handler
    if log_format == LogFormat.JSON:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
    else:
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=level <= logging.DEBUG,
            rich_tracebacks=True,
            tracebacks_show_locals=level <= logging.DEBUG,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    handler.setLevel(level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``shopify_admin`` namespace.

    Module names that already start with the namespace are used as is, so
    ``get_logger(__name__)`` inside the package does not double the prefix.

    Args:
        name: Optional name for the logger. Typically use __name__.

    Returns:
        Logger instance.
    """
    if not name:
        return logging.getLogger(BASE_LOGGER)
    if name == BASE_LOGGER or name.startswith(f"{BASE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
