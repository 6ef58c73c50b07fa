"""Fare and timing for the part of a route a passenger actually rides.

Route positions count the origin as 0, stopovers from 1 in travel order and
the destination last, the same order as Trip.route_locations().
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Literal

from pydantic import BaseModel

from koolihub_trips.domain.trip import RouteStopover, Trip
from koolihub_trips.utils.rounding import round_half_up

AVERAGE_SPEED_KMH = 55.0
MIN_SEGMENT_MINUTES = 30

# Alighting point assumed for stopover-to-stopover fares with no distance on record
DEFAULT_ALIGHTING_FRACTION = 0.75

PriceCalculationMethod = Literal[
    "full-route", "stopover-price", "distance-ratio", "order-ratio", "default"
]


class MatchType(str, Enum):
    """Which route points a search hit boards and alights at."""

    ORIGIN_DESTINATION = "origin-destination"
    ORIGIN_STOPOVER = "origin-stopover"
    STOPOVER_DESTINATION = "stopover-destination"
    STOPOVER_STOPOVER = "stopover-stopover"
    TEXT_MATCH = "text-match"


class SegmentPrice(BaseModel):
    segment_price: float
    price_calculation_method: PriceCalculationMethod


class SegmentTiming(BaseModel):
    segment_duration_minutes: int
    estimated_departure_time: datetime
    estimated_arrival_time: datetime


def segment_match_type(pickup_index: int, dropoff_index: int, destination_index: int) -> MatchType:
    from_origin = pickup_index == 0
    to_destination = dropoff_index == destination_index
    if from_origin and to_destination:
        return MatchType.ORIGIN_DESTINATION
    elif from_origin:
        return MatchType.ORIGIN_STOPOVER
    elif to_destination:
        return MatchType.STOPOVER_DESTINATION
    return MatchType.STOPOVER_STOPOVER


def _stopover_at(stops: list[RouteStopover], index: int) -> RouteStopover | None:
    if 1 <= index <= len(stops):
        return stops[index - 1]
    return None


def _whole(amount: float) -> float:
    return round_half_up(amount, 0)


def _price(amount: float, method: PriceCalculationMethod) -> SegmentPrice:
    return SegmentPrice(segment_price=amount, price_calculation_method=method)


def calculate_segment_price(trip: Trip, pickup_index: int, dropoff_index: int) -> SegmentPrice:
    """Seat price between two route positions.

    A stopover's own price_from_origin wins. Failing that the fare is split by
    distance from origin, and failing that by the number of stops covered.
    Split fares are rounded to whole rupees and never go below zero.
    """
    full_price = trip.price_per_seat
    total_km = trip.route.distance_km
    stops = trip.route.ordered_stopovers()
    destination_index = len(stops) + 1
    # Origin and destination each count as a slot
    slots = len(stops) + 2

    boarding = _stopover_at(stops, pickup_index)
    alighting = _stopover_at(stops, dropoff_index)

    if boarding is None and alighting is None:
        return _price(full_price, "full-route")

    if boarding is not None and alighting is None:
        if boarding.price_from_origin:
            return _price(max(0.0, full_price - boarding.price_from_origin), "stopover-price")
        if boarding.distance_from_origin_km and total_km > 0:
            ratio = (total_km - boarding.distance_from_origin_km) / total_km
            return _price(max(0.0, _whole(full_price * ratio)), "distance-ratio")
        stops_remaining = destination_index - pickup_index
        return _price(_whole(full_price * stops_remaining / slots), "order-ratio")

    if boarding is None and alighting is not None:
        if alighting.price_from_origin:
            return _price(alighting.price_from_origin, "stopover-price")
        if alighting.distance_from_origin_km and total_km > 0:
            ratio = alighting.distance_from_origin_km / total_km
            return _price(_whole(full_price * ratio), "distance-ratio")
        return _price(_whole(full_price * dropoff_index / slots), "order-ratio")

    if boarding.price_from_origin and alighting.price_from_origin:
        return _price(
            max(0.0, alighting.price_from_origin - boarding.price_from_origin), "stopover-price"
        )
    if total_km > 0:
        from_km = boarding.distance_from_origin_km or 0.0
        to_km = alighting.distance_from_origin_km or total_km * DEFAULT_ALIGHTING_FRACTION
        ratio = (to_km - from_km) / total_km
        return _price(max(0.0, _whole(full_price * ratio)), "distance-ratio")

    return _price(full_price, "default")


def duration_from_distance(distance_km: float) -> int:
    """Driving minutes at an average Indian highway speed."""
    return int(_whole(distance_km / AVERAGE_SPEED_KMH * 60))


def calculate_segment_timing(trip: Trip, pickup_index: int, dropoff_index: int) -> SegmentTiming:
    """Estimated boarding time, alighting time and ride length for a segment.

    Partial segments are reported as at least 30 minutes long.
    """
    total_km = trip.route.distance_km
    total_minutes = trip.route.estimated_duration_minutes
    if total_minutes <= 0 and total_km > 0:
        total_minutes = duration_from_distance(total_km)

    stops = trip.route.ordered_stopovers()
    slots = len(stops) + 2
    departs_at = trip.departs_at

    boarding = _stopover_at(stops, pickup_index)
    alighting = _stopover_at(stops, dropoff_index)

    if boarding is None and alighting is None:
        return SegmentTiming(
            segment_duration_minutes=total_minutes,
            estimated_departure_time=departs_at,
            estimated_arrival_time=departs_at + timedelta(minutes=total_minutes),
        )

    if boarding is not None and boarding.distance_from_origin_km is not None and total_km > 0:
        to_km = (alighting.distance_from_origin_km if alighting else None) or total_km
        minutes = duration_from_distance(to_km - boarding.distance_from_origin_km)
    else:
        to_position = dropoff_index if alighting is not None else slots
        minutes = int(_whole(total_minutes * (to_position - pickup_index) / slots))

    offset = int(_whole(total_minutes * pickup_index / slots))
    boarding_at = departs_at + timedelta(minutes=offset)

    return SegmentTiming(
        segment_duration_minutes=max(minutes, MIN_SEGMENT_MINUTES),
        estimated_departure_time=boarding_at,
        estimated_arrival_time=boarding_at + timedelta(minutes=minutes),
    )
