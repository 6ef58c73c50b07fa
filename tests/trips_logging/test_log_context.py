"""Tests for thread-local log context."""

import logging
import threading

import pytest

from koolihub_trips.trips_logging import (
    ContextFilter,
    LogContext,
    log_booking_context,
    log_context,
    log_trip_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, "test.py", 1, "msg", (), None)


@pytest.mark.unit
class TestLogContext:
    def test_set_and_clear(self):
        LogContext.set(trip_id="trip-1")
        assert LogContext.get() == {"trip_id": "trip-1"}

        LogContext.clear()
        assert LogContext.get() == {}

    def test_is_thread_local(self):
        LogContext.set(trip_id="trip-1")
        seen = {}

        def read_context():
            seen.update(LogContext.get())

        worker = threading.Thread(target=read_context)
        worker.start()
        worker.join()

        assert seen == {}


@pytest.mark.unit
class TestContextManagers:
    def test_log_context_clears_on_exit(self):
        with log_context(passenger_id="p-1"):
            assert LogContext.get() == {"passenger_id": "p-1"}
        assert LogContext.get() == {}

    def test_trip_context_uses_trip_as_correlation_id(self):
        with log_trip_context("trip-9"):
            assert LogContext.get() == {"trip_id": "trip-9", "correlation_id": "trip-9"}

    def test_booking_context_nests_inside_trip_context(self):
        with log_trip_context("trip-9"):
            with log_booking_context("booking-3", "trip-9"):
                assert LogContext.get()["correlation_id"] == "booking-3"
                assert LogContext.get()["booking_id"] == "booking-3"
            assert LogContext.get() == {"trip_id": "trip-9", "correlation_id": "trip-9"}

    def test_context_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with log_trip_context("trip-9"):
                raise RuntimeError("boom")
        assert LogContext.get() == {}

    def test_explicit_correlation_id(self):
        with log_trip_context("trip-9", correlation_id="req-1"):
            assert LogContext.get()["correlation_id"] == "req-1"


@pytest.mark.unit
class TestContextFilter:
    def test_injects_context_fields(self):
        record = _record()
        with log_booking_context("booking-3", "trip-9"):
            ContextFilter().filter(record)

        assert record.booking_id == "booking-3"
        assert record.trip_id == "trip-9"

    def test_does_not_override_explicit_extra(self):
        record = _record()
        record.trip_id = "trip-explicit"
        with log_trip_context("trip-9"):
            ContextFilter().filter(record)

        assert record.trip_id == "trip-explicit"
