"""
Tests for logging configuration and request ID helpers.
"""

import io
import json
import logging
import sys

from app.logging_config import (
    HumanReadableFormatter,
    StructuredFormatter,
    clear_request_id,
    get_request_id,
    set_request_id,
    setup_logging,
)


def _make_record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_outputs_json() -> None:
    """Test JSON output carries level, logger, message, and service."""
    formatter = StructuredFormatter(service_name="hello-service")

    data = json.loads(formatter.format(_make_record()))

    assert data["level"] == "INFO"
    assert data["logger"] == "app.test"
    assert data["message"] == "hello"
    assert data["service"] == "hello-service"
    assert "request_id" not in data


def test_structured_formatter_includes_request_id_and_extra_fields() -> None:
    """Test the request ID and extra fields are merged into the object."""
    formatter = StructuredFormatter()
    set_request_id("req-42")
    try:
        output = formatter.format(_make_record(extra_fields={"port": 3000}))
    finally:
        clear_request_id()

    data = json.loads(output)
    assert data["request_id"] == "req-42"
    assert data["port"] == 3000


def test_structured_formatter_includes_exception() -> None:
    """Test exception text is included when exc_info is set."""
    formatter = StructuredFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = _make_record(exc_info=sys.exc_info())

    data = json.loads(formatter.format(record))
    assert "ValueError: boom" in data["exception"]


def test_human_readable_formatter_shows_short_request_id() -> None:
    """Test the first eight characters of the request ID are shown."""
    formatter = HumanReadableFormatter()
    set_request_id("0123456789abcdef")
    try:
        output = formatter.format(_make_record())
    finally:
        clear_request_id()

    assert "[req:01234567]" in output
    assert "[app.test]" in output
    assert output.endswith("hello")


def test_set_request_id_generates_uuid() -> None:
    """Test a UUID is generated when no request ID is given."""
    try:
        request_id = set_request_id()
        assert len(request_id) == 36
        assert get_request_id() == request_id
    finally:
        clear_request_id()

    assert get_request_id() is None


def test_setup_logging_json(restore_root_logger: None) -> None:
    """Test setup_logging installs a single stdout handler with JSON output."""
    logger = setup_logging(log_level="DEBUG", service_name="svc", use_json=True)

    root = logging.getLogger()
    assert logger.name == "svc"
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, StructuredFormatter)


def test_setup_logging_human_readable(restore_root_logger: None) -> None:
    """Test the human-readable formatter is the default."""
    setup_logging(log_level="warning")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, HumanReadableFormatter)


def test_setup_logging_custom_stream(restore_root_logger: None) -> None:
    """Test records go to the stream passed to setup_logging."""
    stream = io.StringIO()
    setup_logging(stream=stream)

    logging.getLogger("app.test").error("written to stream")

    assert "written to stream" in stream.getvalue()
