"""Live seat re-check right before a booking is committed."""

import logging
from collections.abc import Awaitable, Callable

from pydantic import BaseModel

from koolihub_trips.core.exceptions import SeatAvailabilityError
from koolihub_trips.trips_logging import log_trip_context

logger = logging.getLogger(__name__)


class SeatAvailability(BaseModel):
    available: bool
    current_seats: int


async def check_seat_availability(
    trip_id: str,
    requested_seats: int,
    get_current_available_seats: Callable[[], Awaitable[int]],
) -> SeatAvailability:
    """Fetch the live seat count once and compare it with the request.

    This only narrows the race between reading seats and booking them.
    Concurrent bookings must still be serialized by the datastore.

    Raises:
        SeatAvailabilityError: The seat count getter failed.
    """
    with log_trip_context(trip_id):
        try:
            current_seats = await get_current_available_seats()
        except Exception as e:
            logger.warning(f"Seat count lookup failed for trip {trip_id}: {e}")
            raise SeatAvailabilityError(
                f"Could not fetch available seats for trip {trip_id}",
                details={"trip_id": trip_id, "requested_seats": requested_seats},
            ) from e

        available = current_seats >= requested_seats
        if not available:
            logger.info(
                f"Trip {trip_id} has {current_seats} seat(s) left, "
                f"{requested_seats} requested"
            )

    return SeatAvailability(available=available, current_seats=current_seats)
