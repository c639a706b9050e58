"""
Logging configuration module for hello service.

Sets up console logging with either JSON or human-readable output, and keeps
the current request ID in a context variable so every log line written while
a request is in flight can be correlated.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional, TextIO
from uuid import uuid4

DEFAULT_SERVICE_NAME = "hello-service"

# Request ID for the request currently handled by this task
request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class StructuredFormatter(logging.Formatter):
    """
    Log formatter that writes one JSON object per record.

    Fields passed through ``extra={"extra_fields": {...}}`` are merged into
    the top-level object.
    """

    def __init__(
        self,
        service_name: str = DEFAULT_SERVICE_NAME,
        datefmt: Optional[str] = None,
    ) -> None:
        super().__init__(datefmt=datefmt)
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "service": self.service_name,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = request_id_context.get()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_data.update(extra_fields)

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Colored single-line formatter for local development.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        log_parts = [
            self.formatTime(record, self.datefmt),
            f"{color}{record.levelname:8}{reset}",
            f"[{record.name}]",
        ]

        request_id = request_id_context.get()
        if request_id:
            log_parts.append(f"[req:{request_id[:8]}]")

        log_parts.append(record.getMessage())
        message = " ".join(log_parts)

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def setup_logging(
    log_level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    use_json: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure root logging for the service.

    Replaces any handlers already installed on the root logger with a single
    console handler writing to stdout unless another stream is given.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Name of the service for log identification
        use_json: Use JSON structured logging instead of human-readable format
        stream: Stream for the console handler, defaults to sys.stdout

    Returns:
        Logger named after the service
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter: logging.Formatter
    if use_json:
        formatter = StructuredFormatter(
            service_name=service_name, datefmt="%Y-%m-%dT%H:%M:%S"
        )
    else:
        formatter = HumanReadableFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(service_name)
    logger.setLevel(numeric_level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name for the logger (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or DEFAULT_SERVICE_NAME)


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Set request ID in context, generating a UUID4 when none is given.

    Returns:
        The request ID that was set
    """
    if request_id is None:
        request_id = str(uuid4())
    request_id_context.set(request_id)
    return request_id


def get_request_id() -> Optional[str]:
    """Get current request ID from context."""
    return request_id_context.get()


def clear_request_id() -> None:
    """Clear request ID from context."""
    request_id_context.set(None)
