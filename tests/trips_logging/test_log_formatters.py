"""Tests for logging formatters."""

import json
import logging
import sys

import pytest

from koolihub_trips.trips_logging import DevFormatter, JSONFormatter


@pytest.fixture
def log_record():
    return logging.LogRecord(
        name="koolihub_trips.pricing",
        level=logging.INFO,
        pathname="test.py",
        lineno=10,
        msg="Refund of %s issued",
        args=("₹984",),
        exc_info=None,
    )


@pytest.mark.unit
class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_output(self, log_record):
        data = json.loads(JSONFormatter().format(log_record))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "koolihub_trips.pricing"
        assert data["message"] == "Refund of ₹984 issued"
        assert data["env"] == "development"

    def test_rupee_sign_is_not_escaped(self, log_record):
        assert "₹984" in JSONFormatter().format(log_record)

    def test_includes_context_fields(self, log_record):
        log_record.trip_id = "trip-123"
        log_record.booking_id = "booking-456"
        log_record.correlation_id = "booking-456"

        data = json.loads(JSONFormatter("production").format(log_record))

        assert data["trip_id"] == "trip-123"
        assert data["booking_id"] == "booking-456"
        assert data["correlation_id"] == "booking-456"
        assert data["env"] == "production"
        assert "passenger_id" not in data

    def test_includes_exception(self, log_record):
        try:
            raise ValueError("bad seat count")
        except ValueError:
            log_record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(log_record))

        assert "ValueError: bad seat count" in data["exception"]


@pytest.mark.unit
class TestDevFormatter:
    """Tests for DevFormatter."""

    def test_human_readable_line(self, log_record):
        log_record.correlation_id = "trip-123"

        output = DevFormatter().format(log_record)

        assert "[    INFO]" in output
        assert "koolihub_trips.pricing [trip-123]: Refund of ₹984 issued" in output
