import pytest

from koolihub_trips.core import (
    PermanentError,
    SeatAvailabilityError,
    StateError,
    TransientError,
    TripsError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    def test_transient_errors(self):
        assert issubclass(SeatAvailabilityError, TransientError)
        assert issubclass(TransientError, TripsError)

    def test_permanent_errors(self):
        assert issubclass(StateError, PermanentError)
        assert issubclass(PermanentError, TripsError)
        assert not issubclass(StateError, TransientError)

    def test_message_and_details(self):
        err = StateError("Cannot cancel booking", details={"booking_id": "b-1"})

        assert str(err) == "Cannot cancel booking"
        assert err.message == "Cannot cancel booking"
        assert err.details == {"booking_id": "b-1"}

    def test_details_default_to_empty(self):
        assert TripsError("boom").details == {}
