"""
Test suite for correlation ID tracking and log record injection.

System role: Verification of request tracing helpers
"""

import logging

from stats_service.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from stats_service.observability.log_utils import safe_log_value
from stats_service.observability.logger import CorrelationIdFilter


def test_set_correlation_id_should_keep_given_value() -> None:
    assert set_correlation_id("req-1") == "req-1"
    assert get_correlation_id() == "req-1"
    clear_correlation_id()
    assert get_correlation_id() == ""


def test_set_correlation_id_should_generate_when_missing() -> None:
    generated = set_correlation_id()
    assert generated
    assert get_correlation_id() == generated
    clear_correlation_id()


def test_filter_should_attach_correlation_id() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    set_correlation_id("req-2")
    CorrelationIdFilter().filter(record)
    clear_correlation_id()

    assert record.correlation_id == "req-2"


def test_filter_should_use_placeholder_outside_requests() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    CorrelationIdFilter().filter(record)

    assert record.correlation_id == "-"


def test_safe_log_value_should_summarise_collections() -> None:
    assert safe_log_value(None) == "None"
    assert safe_log_value([1, 2, 3]) == "list(3 items)"
    assert safe_log_value({"a": 1}) == "dict(1 keys)"
    assert safe_log_value("x" * 10, max_length=4) == "xxxx... (truncated, 10 total)"
