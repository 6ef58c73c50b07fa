"""Pricing and cancellation engine for seat bookings."""

from .availability import SeatAvailability, check_seat_availability
from .cancellation import (
    CANCELLATION_POLICIES,
    CancellationPolicy,
    RefundCalculation,
    calculate_refund,
    get_cancellation_policy,
)
from .engine import PricingEngine
from .fees import (
    PLATFORM_FEE_CONFIG,
    BookingPriceBreakdown,
    PlatformFeeConfig,
    TripPricingInput,
    calculate_booking_price,
    calculate_gst,
    calculate_platform_fee,
    price_booking,
)
from .validation import BookingValidation, validate_booking, validate_price_breakdown

__all__ = [
    "PLATFORM_FEE_CONFIG",
    "PlatformFeeConfig",
    "TripPricingInput",
    "BookingPriceBreakdown",
    "calculate_platform_fee",
    "calculate_gst",
    "calculate_booking_price",
    "price_booking",
    "CANCELLATION_POLICIES",
    "CancellationPolicy",
    "RefundCalculation",
    "get_cancellation_policy",
    "calculate_refund",
    "BookingValidation",
    "validate_booking",
    "validate_price_breakdown",
    "SeatAvailability",
    "check_seat_availability",
    "PricingEngine",
]
