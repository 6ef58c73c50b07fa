"""Scheduled ride-share trip and its booking rules."""

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, Field

from koolihub_trips.geo.distance import GeoCoordinates
from koolihub_trips.pricing.cancellation import as_utc, utc_now
from koolihub_trips.pricing.fees import (
    PLATFORM_FEE_CONFIG,
    BookingPriceBreakdown,
    PlatformFeeConfig,
    calculate_booking_price,
)
from koolihub_trips.pricing.validation import (
    IMMINENT_DEPARTURE_HOURS,
    BookingValidation,
    validate_booking,
)

# Drivers may start a trip this long before the scheduled departure
START_WINDOW_MINUTES = 30


class TripStatus(str, Enum):
    """Trip lifecycle states."""

    SCHEDULED = "scheduled"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RouteStopover(BaseModel):
    id: str
    route_id: str
    city_name: str
    state_name: str
    latitude: float | None = None
    longitude: float | None = None
    stop_order: int = Field(ge=0)
    estimated_arrival_offset_minutes: int | None = None
    price_from_origin: float | None = Field(default=None, ge=0)
    distance_from_origin_km: float | None = Field(default=None, ge=0)

    @property
    def location(self) -> str:
        return f"{self.city_name}, {self.state_name}"

    @property
    def coordinates(self) -> GeoCoordinates | None:
        if self.latitude is None or self.longitude is None:
            return None
        return GeoCoordinates(lat=self.latitude, lon=self.longitude)


class TripRoute(BaseModel):
    id: str
    origin: str
    destination: str
    distance_km: float = Field(ge=0)
    estimated_duration_minutes: int = Field(ge=0)
    stopovers: list[RouteStopover] = Field(default_factory=list)
    origin_coordinates: GeoCoordinates | None = None
    destination_coordinates: GeoCoordinates | None = None

    def ordered_stopovers(self) -> list[RouteStopover]:
        return sorted(self.stopovers, key=lambda stop: stop.stop_order)


class Trip(BaseModel):
    """A driver's published trip with seats for sale."""

    id: str
    driver_id: str
    vehicle_id: str
    route_id: str
    route: TripRoute
    departure_time: datetime
    price_per_seat: float = Field(ge=0)
    base_price: float | None = None
    price_per_km: float | None = None
    available_seats: int = Field(ge=0)
    total_seats: int = Field(ge=1)
    status: TripStatus = TripStatus.SCHEDULED
    pickup_landmark: str | None = None
    dropoff_landmark: str | None = None
    toll_charges: float | None = Field(default=None, ge=0)
    booking_deadline_hours: float = Field(default=2.0, ge=0)
    instant_booking: bool = False
    ladies_only: bool = False
    smoking_allowed: bool = False
    amenities: list[str] = Field(default_factory=list)
    cancellation_policy: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def _now(self, now: datetime | None) -> datetime:
        return as_utc(now) if now is not None else utc_now()

    @property
    def departs_at(self) -> datetime:
        return as_utc(self.departure_time)

    def can_accept_booking(self, seats: int, now: datetime | None = None) -> bool:
        now = self._now(now)
        return (
            self.status == TripStatus.SCHEDULED
            and self.available_seats >= seats
            and not self.is_past_booking_deadline(now)
            and now < self.departs_at
        )

    def is_past_booking_deadline(self, now: datetime | None = None) -> bool:
        deadline = self.departs_at - timedelta(hours=self.booking_deadline_hours)
        return self._now(now) > deadline

    def can_be_cancelled(self, now: datetime | None = None) -> bool:
        return self.status == TripStatus.SCHEDULED and self._now(now) < self.departs_at

    def calculate_total_price(self, seats: int) -> float:
        """Seat price plus each seat's share of the trip's tolls.

        Tolls are spread over all seats in the vehicle, not only the booked ones.
        """
        base_amount = self.price_per_seat * seats
        toll_per_seat = (self.toll_charges or 0.0) / self.total_seats
        return base_amount + toll_per_seat * seats

    @property
    def booked_seats(self) -> int:
        return self.total_seats - self.available_seats

    @property
    def is_fully_booked(self) -> bool:
        return self.available_seats == 0

    @property
    def occupancy_percentage(self) -> float:
        return self.booked_seats / self.total_seats * 100

    def can_be_started(self, now: datetime | None = None) -> bool:
        start_window_opens = self.departs_at - timedelta(minutes=START_WINDOW_MINUTES)
        return (
            self.status == TripStatus.SCHEDULED
            and self._now(now) >= start_window_opens
            and self.booked_seats > 0
        )

    def price_breakdown(
        self,
        seats: int,
        discount_amount: float = 0.0,
        config: PlatformFeeConfig = PLATFORM_FEE_CONFIG,
    ) -> BookingPriceBreakdown:
        """Full checkout breakdown for booking `seats` on this trip."""
        return calculate_booking_price(
            self.price_per_seat,
            seats,
            toll_charges=self.toll_charges or 0.0,
            discount_amount=discount_amount,
            config=config,
        )

    def validate_booking(
        self,
        seats: int,
        now: datetime | None = None,
        imminent_departure_hours: float = IMMINENT_DEPARTURE_HOURS,
    ) -> BookingValidation:
        return validate_booking(
            self.available_seats,
            seats,
            self.departure_time,
            self.booking_deadline_hours,
            now=now,
            imminent_departure_hours=imminent_departure_hours,
        )

    def route_locations(self) -> list[str]:
        """Origin, stopovers in travel order, then destination."""
        stops = self.route.ordered_stopovers()
        return [self.route.origin, *(stop.location for stop in stops), self.route.destination]
