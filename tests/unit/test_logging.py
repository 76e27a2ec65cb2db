"""Unit tests for structured logging and PII masking."""

import json
import logging
import sys

import pytest

from compliance.core.logging_config import StructuredFormatter, configure_structured_logging
from core.logging_utils import sanitize_fein, sanitize_org_name


def _record(msg="Validated document", exc_info=None, **extra):
    record = logging.LogRecord(
        name="compliance.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_emits_json_line(self):
        line = StructuredFormatter().format(_record())
        data = json.loads(line)

        assert data["level"] == "INFO"
        assert data["logger"] == "compliance.test"
        assert data["message"] == "Validated document"
        assert data["timestamp"].endswith("Z")

    def test_copies_known_extras_only(self):
        record = _record(trace_id="abc", document_type="bylaws", missing_count=2, secret="x")
        data = json.loads(StructuredFormatter().format(record))

        assert data["trace_id"] == "abc"
        assert data["document_type"] == "bylaws"
        assert data["missing_count"] == 2
        assert "secret" not in data

    def test_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(exc_info=sys.exc_info())

        data = json.loads(StructuredFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "boom"
        assert "Traceback" in data["exception"]["traceback"]

    def test_keeps_non_ascii(self):
        data = json.loads(StructuredFormatter().format(_record(msg="Café Société LLC")))
        assert data["message"] == "Café Société LLC"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_handler(self):
        configure_structured_logging(level="debug", json_format=True)
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_plain_handler(self):
        configure_structured_logging(level="WARNING", json_format=False)
        root = logging.getLogger()

        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, StructuredFormatter)


class TestSanitizers:
    @pytest.mark.parametrize(
        "name, expected",
        [
            (None, "***"),
            ("", "***"),
            ("Abc", "***"),
            ("Acme LLC", "Ac***LC"),
            ("  Acme Widgets Inc  ", "Ac***nc"),
        ],
    )
    def test_org_name(self, name, expected):
        assert sanitize_org_name(name) == expected

    @pytest.mark.parametrize(
        "fein, expected",
        [
            (None, "***"),
            ("", "***"),
            ("12-34", "***"),
            ("12-3456789", "***789"),
            ("123 456 789", "***789"),
        ],
    )
    def test_fein(self, fein, expected):
        assert sanitize_fein(fein) == expected
