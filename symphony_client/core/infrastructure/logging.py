"""Logging setup for the Symphony client."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

ROOT_LOGGER_NAME = "symphony_client"


class JsonFormatter(logging.Formatter):
    """Format log records as JSON for machine consumption."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        operation = getattr(record, "operation", None)
        if operation is not None:
            payload["operation"] = operation
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"))


def setup_logging(
    level: str = "INFO",
    format_string: str | None = None,
    logger_name: str = ROOT_LOGGER_NAME,
    json_output: bool = False,
) -> logging.Logger:
    """
    Set up logging for the Symphony client.

    Without this call the package logs nothing: the package logger only
    carries a NullHandler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Optional custom format string (console output only)
        logger_name: Name for the logger
        json_output: Emit one JSON object per record instead of text

    Returns:
        Configured logger

    Example:
        logger = setup_logging(level="DEBUG")
        logger.debug("Debug message")
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter: logging.Formatter
    if json_output:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(format_string)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid adding duplicate handlers
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Names already under the package namespace (``__name__`` of a package
    module) are used as-is; anything else is nested under it.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger for the module
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class OperationLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that stamps the remote operation name on each record.

    Example:
        logger = OperationLoggerAdapter(get_logger(__name__), {"operation": "get_room_info"})
        logger.warning("Session rejected")  # "[get_room_info] Session rejected"
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        """Prefix the message and add the operation to the record's extra."""
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        operation = self.extra.get("operation")
        if operation:
            msg = f"[{operation}] {msg}"
        return msg, kwargs
