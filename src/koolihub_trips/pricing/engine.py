"""Pricing, validation and refund entry points bound to PricingSettings."""

from datetime import datetime
from typing import TYPE_CHECKING

from koolihub_trips.pricing.cancellation import RefundCalculation, calculate_refund
from koolihub_trips.pricing.fees import (
    BookingPriceBreakdown,
    PlatformFeeConfig,
    TripPricingInput,
    calculate_booking_price,
    price_booking,
)
from koolihub_trips.pricing.validation import BookingValidation, validate_booking
from koolihub_trips.settings import PricingSettings

if TYPE_CHECKING:
    from koolihub_trips.domain.trip import Trip


class PricingEngine:
    """The booking engine configured from PRICING_* settings.

    The module-level functions keep their hard-coded defaults; this class
    feeds them the configured fee rules, booking deadline and
    imminent-departure window instead.
    """

    def __init__(self, settings: PricingSettings | None = None) -> None:
        self.settings = settings or PricingSettings()
        self.fee_config = PlatformFeeConfig.from_settings(self.settings)

    def price(
        self,
        price_per_seat: float,
        seats_booked: int,
        toll_charges: float = 0.0,
        discount_amount: float = 0.0,
    ) -> BookingPriceBreakdown:
        return calculate_booking_price(
            price_per_seat, seats_booked, toll_charges, discount_amount, self.fee_config
        )

    def price_input(self, pricing: TripPricingInput) -> BookingPriceBreakdown:
        return price_booking(pricing, self.fee_config)

    def price_trip(
        self, trip: "Trip", seats: int, discount_amount: float = 0.0
    ) -> BookingPriceBreakdown:
        return trip.price_breakdown(seats, discount_amount, self.fee_config)

    def validate(
        self,
        available_seats: int,
        requested_seats: int,
        departure_time: datetime,
        booking_deadline_hours: float | None = None,
        *,
        now: datetime | None = None,
    ) -> BookingValidation:
        """Validate a booking; the deadline defaults to the configured one."""
        if booking_deadline_hours is None:
            booking_deadline_hours = self.settings.default_booking_deadline_hours
        return validate_booking(
            available_seats,
            requested_seats,
            departure_time,
            booking_deadline_hours,
            now=now,
            imminent_departure_hours=self.settings.imminent_departure_hours,
        )

    def validate_trip_booking(
        self, trip: "Trip", seats: int, now: datetime | None = None
    ) -> BookingValidation:
        """Validate against the trip's own deadline and the configured warning window."""
        return trip.validate_booking(
            seats, now=now, imminent_departure_hours=self.settings.imminent_departure_hours
        )

    def refund(
        self,
        departure_time: datetime,
        total_amount: float,
        platform_fee: float = 0.0,
        *,
        now: datetime | None = None,
    ) -> RefundCalculation:
        return calculate_refund(departure_time, total_amount, platform_fee, now=now)
