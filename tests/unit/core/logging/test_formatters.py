"""
Tests for log formatters and filters.
"""

import json
import logging

import pytest

from src.http_request.core.logging.filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from src.http_request.core.logging.formatters import (
    ColoredFormatter,
    JSONFormatter,
    TextFormatter,
    get_formatter,
)


def make_record(msg="Request completed", **fields):
    record = logging.LogRecord(
        name="http_request",
        level=logging.INFO,
        pathname="request.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None
    )
    for key, value in fields.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """JSON, text and colored output."""

    def test_json_includes_extra_fields(self):
        data = json.loads(JSONFormatter().format(make_record(method="GET", status_code=200)))

        assert data["message"] == "Request completed"
        assert data["level"] == "INFO"
        assert data["method"] == "GET"
        assert data["status_code"] == 200
        assert "timestamp" in data

    def test_json_serializes_unknown_types(self):
        data = json.loads(JSONFormatter().format(make_record(payload=b"raw")))
        assert data["payload"] == "b'raw'"

    def test_text_appends_fields(self):
        output = TextFormatter().format(make_record(method="POST", duration_ms=1.5))

        assert "[INFO] [http_request] Request completed" in output
        assert output.endswith("method=POST duration_ms=1.5")

    def test_colored_restores_levelname(self):
        record = make_record()
        output = ColoredFormatter().format(record)

        assert "\033[32mINFO\033[0m" in output
        assert record.levelname == "INFO"

    @pytest.mark.parametrize("name, cls", [
        ("json", JSONFormatter),
        ("TEXT", TextFormatter),
        ("colored", ColoredFormatter),
    ])
    def test_get_formatter(self, name, cls):
        assert type(get_formatter(name)) is cls

    def test_get_formatter_unknown(self):
        with pytest.raises(ValueError, match="Unknown format type"):
            get_formatter("xml")


class TestFilters:
    """Correlation id and extra fields."""

    def teardown_method(self):
        clear_correlation_id()

    def test_correlation_id_added(self):
        set_correlation_id("abc")
        record = make_record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "abc"

    def test_no_correlation_id(self):
        clear_correlation_id()
        record = make_record()
        CorrelationIdFilter().filter(record)

        assert get_correlation_id() is None
        assert not hasattr(record, "correlation_id")

    def test_extra_fields_do_not_override(self):
        record = make_record(service="explicit")
        ExtraFieldsFilter({"service": "default", "env": "test"}).filter(record)

        assert record.service == "explicit"
        assert record.env == "test"
