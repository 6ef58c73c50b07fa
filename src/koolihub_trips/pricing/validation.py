"""Pre-booking checks reported as errors (blocking) and warnings (informational)."""

import logging
from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from koolihub_trips.pricing.cancellation import as_utc, hours_until, utc_now
from koolihub_trips.pricing.fees import BookingPriceBreakdown

logger = logging.getLogger(__name__)

DEFAULT_BOOKING_DEADLINE_HOURS = 2.0
IMMINENT_DEPARTURE_HOURS = 4.0


class BookingValidation(BaseModel):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def validate_booking(
    available_seats: int,
    requested_seats: int,
    departure_time: datetime,
    booking_deadline_hours: float = DEFAULT_BOOKING_DEADLINE_HOURS,
    *,
    now: datetime | None = None,
    imminent_departure_hours: float = IMMINENT_DEPARTURE_HOURS,
) -> BookingValidation:
    """Check a booking request against seat count and departure time.

    Every failing rule is reported, not just the first one.
    """
    now = as_utc(now) if now is not None else utc_now()
    departure_time = as_utc(departure_time)
    errors: list[str] = []
    warnings: list[str] = []

    if requested_seats > available_seats:
        errors.append(
            f"Only {available_seats} seat(s) available. You requested {requested_seats}."
        )

    if departure_time < now:
        errors.append("Cannot book a trip that has already departed.")

    deadline = departure_time - timedelta(hours=booking_deadline_hours)
    if now > deadline:
        errors.append(
            f"Booking deadline has passed. Must book at least "
            f"{booking_deadline_hours:g} hour(s) before departure."
        )

    if requested_seats < 1:
        errors.append("Must book at least 1 seat.")

    if hours_until(departure_time, now) < imminent_departure_hours:
        warnings.append(
            f"Trip departs in less than {imminent_departure_hours:g} hours. "
            "Please ensure you can reach the pickup point on time."
        )

    if errors:
        logger.debug(f"Booking rejected with {len(errors)} error(s): {errors}")

    return BookingValidation(is_valid=not errors, errors=errors, warnings=warnings)


def validate_price_breakdown(breakdown: BookingPriceBreakdown) -> BookingValidation:
    """Flag a breakdown whose discount pushes the total below zero."""
    errors: list[str] = []
    if breakdown.total_amount < 0:
        errors.append(
            f"Discount of {breakdown.discount_amount:.2f} exceeds the booking "
            f"amount; total would be {breakdown.total_amount:.2f}."
        )
    return BookingValidation(is_valid=not errors, errors=errors)
