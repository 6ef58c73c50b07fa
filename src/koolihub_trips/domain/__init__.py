"""Trip, booking and vehicle records with their business rules."""

from .booking import Booking, BookingStatus, PaymentDetails, PaymentStatus
from .trip import RouteStopover, Trip, TripRoute, TripStatus
from .vehicle import Vehicle, VehicleDocument, VehiclePhoto

__all__ = [
    "Trip",
    "TripRoute",
    "RouteStopover",
    "TripStatus",
    "Booking",
    "BookingStatus",
    "PaymentDetails",
    "PaymentStatus",
    "Vehicle",
    "VehicleDocument",
    "VehiclePhoto",
]
