"""Core building blocks shared across the trips package."""

from .exceptions import (
    PermanentError,
    SeatAvailabilityError,
    StateError,
    TransientError,
    TripsError,
)

__all__ = [
    "TripsError",
    "TransientError",
    "SeatAvailabilityError",
    "PermanentError",
    "StateError",
]
