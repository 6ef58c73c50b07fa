"""Standardized exception hierarchy for the trips core."""

from typing import Any


class TripsError(Exception):
    """Base exception for all trips core errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransientError(TripsError):
    """Errors that may succeed on retry."""

    pass


class SeatAvailabilityError(TransientError):
    """Live seat count could not be fetched for a trip."""

    pass


class PermanentError(TripsError):
    """Errors that will not succeed on retry."""

    pass


class StateError(PermanentError):
    """Invalid state transition."""

    pass
