"""Tests for the structured log formatters."""

import json
import logging

from catalog.logging import (
    HumanReadableFormatter,
    StructuredJSONFormatter,
    clear_log_context,
    set_log_context,
)
from catalog.middlewares.correlation_id import correlation_id


def make_record(level=logging.ERROR, msg="Something failed", **extra):
    record = logging.LogRecord(
        name="catalog",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    def test_includes_context_and_correlation_id(self):
        token = correlation_id.set("abcd1234")
        set_log_context(endpoint="/api/books", method="POST")
        try:
            data = json.loads(StructuredJSONFormatter().format(make_record()))
        finally:
            clear_log_context()
            correlation_id.reset(token)

        assert data["level"] == "ERROR"
        assert data["message"] == "Something failed"
        assert data["request_id"] == "abcd1234"
        assert data["endpoint"] == "/api/books"
        assert data["method"] == "POST"
        assert data["environment"] == "dev"

    def test_includes_extra_fields(self):
        record = make_record(exception_type="OperationalError")

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["exception_type"] == "OperationalError"
        assert "request_id" not in data


class TestHumanReadableFormatter:
    def test_uses_dash_without_correlation_id(self):
        line = HumanReadableFormatter().format(
            make_record(level=logging.INFO, msg="Created Author 1")
        )

        assert "[-] INFO: Created Author 1" in line
