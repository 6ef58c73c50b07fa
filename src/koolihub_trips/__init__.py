"""Trip booking domain layer: pricing, cancellation refunds and fuzzy trip search."""

from .formatting import format_price
from .geo import GeoCoordinates, haversine_distance_km
from .pricing import (
    BookingPriceBreakdown,
    BookingValidation,
    RefundCalculation,
    calculate_booking_price,
    calculate_refund,
    check_seat_availability,
    validate_booking,
)
from .search import TripSearchCriteria, TripSearcher, match_trip_by_text, match_trip_within_radius

__version__ = "0.1.0"

__all__ = [
    "BookingPriceBreakdown",
    "BookingValidation",
    "RefundCalculation",
    "calculate_booking_price",
    "calculate_refund",
    "validate_booking",
    "check_seat_availability",
    "GeoCoordinates",
    "haversine_distance_km",
    "TripSearchCriteria",
    "TripSearcher",
    "match_trip_by_text",
    "match_trip_within_radius",
    "format_price",
]
