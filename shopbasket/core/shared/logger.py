"""
Shared Logger

Logging configuration for the basket core and a small context-carrying
logger used where structured fields matter (locale migration, order store).
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shopbasket.config.settings import Settings


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data["extra"] = extra_data

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console log formatter."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors without touching the shared record."""
        color = self.COLORS.get(record.levelname, self.RESET)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class ContextLogger:
    """Logger that attaches a fixed set of context fields to every record."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def with_context(self, **kwargs) -> "ContextLogger":
        """Create new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def log(self, level: int, message: str, **kwargs) -> None:
        """Log `message` with the bound context plus `kwargs` as `extra_data`."""
        self._logger.log(level, message, extra={"extra_data": {**self._context, **kwargs}})

    def info(self, message: str, **kwargs) -> None:
        self.log(logging.INFO, message, **kwargs)


LINE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JSONFormatter()
    if format_type == "colored":
        return ColoredFormatter(LINE_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT)


def configure_logging(
    level: str | None = None,
    format_type: str | None = None,
    log_file: str | None = None,
    settings: "Settings | None" = None,
) -> None:
    """
    Configure root logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL), defaults to LOG_LEVEL
        format_type: 'colored', 'json' or 'plain', defaults to LOG_FORMAT
        log_file: Optional file path, always written as JSON
        settings: Settings to read the defaults from
    """
    if settings is None and (level is None or format_type is None):
        from shopbasket.config.settings import get_settings

        settings = get_settings()

    level = (level or settings.LOG_LEVEL).upper()  # type: ignore[union-attr]
    format_type = format_type or settings.LOG_FORMAT  # type: ignore[union-attr]
    numeric_level = getattr(logging, level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(_console_formatter(format_type))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """Get a context-aware logger."""
    return ContextLogger(name, context)


def get_service_logger(service_name: str) -> ContextLogger:
    """Get logger for basket domain services."""
    return get_logger(f"shopbasket.service.{service_name}", {"component": "service", "service": service_name})

