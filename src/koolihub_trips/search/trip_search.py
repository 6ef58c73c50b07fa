"""Filter and rank candidate trips for a passenger's search."""

import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime

import pytz
from pydantic import BaseModel

from koolihub_trips.domain.trip import Trip, TripStatus
from koolihub_trips.domain.vehicle import Vehicle
from koolihub_trips.geo.distance import GeoCoordinates
from koolihub_trips.pricing.cancellation import as_utc, utc_now
from koolihub_trips.search.matcher import (
    SearchMatchResult,
    TripSearchCriteria,
    match_trip_by_text,
    match_trip_within_radius,
)
from koolihub_trips.search.segments import (
    MatchType,
    SegmentPrice,
    SegmentTiming,
    calculate_segment_price,
    calculate_segment_timing,
    segment_match_type,
)
from koolihub_trips.settings import SearchSettings

logger = logging.getLogger(__name__)

TEXT_ONLY_SCORE = 100.0


class TripSearchHit(BaseModel):
    """A matching trip and the part of its route the passenger would ride."""

    trip: Trip
    match_score: float
    match_type: MatchType
    matched_from: str
    matched_to: str
    price: SegmentPrice
    timing: SegmentTiming
    geo_match: SearchMatchResult | None = None


class TripSearcher:
    """Runs the fuzzy matcher over trips already loaded by the caller.

    Candidates come from the datastore; this class never fetches. Each
    candidate costs a few Levenshtein passes per route location, so callers
    should pre-filter by date or region before handing over large lists.
    """

    def __init__(self, settings: SearchSettings | None = None) -> None:
        self.settings = settings or SearchSettings()
        self._timezone = pytz.timezone(self.settings.timezone)

    def search(
        self,
        trips: Sequence[Trip],
        criteria: TripSearchCriteria,
        vehicles: Mapping[str, Vehicle] | None = None,
        radius_km: float | None = None,
        now: datetime | None = None,
    ) -> list[TripSearchHit]:
        """Return matching trips, best score first, earliest departure on ties."""
        now = as_utc(now) if now is not None else utc_now()
        radius = self._effective_radius(radius_km)
        from_term = self._usable_term(criteria.from_location)
        to_term = self._usable_term(criteria.to_location)

        if len(trips) > self.settings.max_candidates:
            logger.warning(
                f"Search received {len(trips)} candidates, "
                f"examining the first {self.settings.max_candidates}"
            )
            trips = trips[: self.settings.max_candidates]

        hits: list[TripSearchHit] = []
        for trip in trips:
            if not self._is_bookable(trip, criteria, vehicles, now):
                continue
            text_segment = self._match_text(trip, from_term, to_term)
            if text_segment is None:
                continue

            geo_segment = self._best_geo_segment(trip, criteria, radius)
            hit = self._build_hit(trip, text_segment, geo_segment)
            if hit.match_score <= 0:
                continue
            hits.append(hit)

        hits.sort(key=lambda hit: (-hit.match_score, hit.trip.departs_at))
        logger.debug(f"Search matched {len(hits)} of {len(trips)} trips")
        return hits

    def _build_hit(
        self,
        trip: Trip,
        text_segment: tuple[int, int],
        geo_segment: tuple[int, int, SearchMatchResult] | None,
    ) -> TripSearchHit:
        locations = trip.route_locations()
        if geo_segment is not None:
            pickup, dropoff, geo_match = geo_segment
            score = geo_match.match_score
            match_type = segment_match_type(pickup, dropoff, len(locations) - 1)
        else:
            pickup, dropoff = text_segment
            geo_match = None
            score = TEXT_ONLY_SCORE
            match_type = MatchType.TEXT_MATCH

        return TripSearchHit(
            trip=trip,
            match_score=score,
            match_type=match_type,
            matched_from=locations[pickup],
            matched_to=locations[dropoff],
            price=calculate_segment_price(trip, pickup, dropoff),
            timing=calculate_segment_timing(trip, pickup, dropoff),
            geo_match=geo_match,
        )

    def _effective_radius(self, radius_km: float | None) -> float:
        if radius_km is None:
            return self.settings.default_radius_km
        return max(min(radius_km, self.settings.max_radius_km), 0.0)

    def _usable_term(self, term: str | None) -> str | None:
        if term is None:
            return None
        term = term.strip()
        if len(term) < self.settings.min_search_length:
            return None
        return term

    def _is_bookable(
        self,
        trip: Trip,
        criteria: TripSearchCriteria,
        vehicles: Mapping[str, Vehicle] | None,
        now: datetime,
    ) -> bool:
        if trip.status != TripStatus.SCHEDULED or trip.departs_at <= now:
            return False
        if trip.available_seats < (criteria.passengers or 1):
            return False
        if criteria.date is not None and self._local_date(trip) != criteria.date:
            return False
        if criteria.vehicle_type is not None:
            vehicle = (vehicles or {}).get(trip.vehicle_id)
            if vehicle is None or vehicle.vehicle_type != criteria.vehicle_type:
                return False
        return True

    def _local_date(self, trip: Trip) -> date:
        return trip.departs_at.astimezone(self._timezone).date()

    def _matches(self, location: str, term: str) -> bool:
        return match_trip_by_text(location, term, self.settings.fuzzy_match_threshold)

    def _match_text(
        self, trip: Trip, from_term: str | None, to_term: str | None
    ) -> tuple[int, int] | None:
        """Match pickup and dropoff terms against the route, in travel order.

        The pickup may be the origin or any stopover and the dropoff any
        stopover or the destination, but the pickup must come first. Returns
        the earliest pickup and latest dropoff positions.
        """
        locations = trip.route_locations()
        pickup_indexes = [
            i
            for i, location in enumerate(locations[:-1])
            if from_term is None or self._matches(location, from_term)
        ]
        dropoff_indexes = [
            i
            for i, location in enumerate(locations)
            if i > 0 and (to_term is None or self._matches(location, to_term))
        ]
        if not pickup_indexes or not dropoff_indexes:
            return None
        pickup, dropoff = min(pickup_indexes), max(dropoff_indexes)
        if pickup >= dropoff:
            return None
        return pickup, dropoff

    @staticmethod
    def _route_points(trip: Trip) -> list[GeoCoordinates | None]:
        route = trip.route
        return [
            route.origin_coordinates,
            *(stop.coordinates for stop in route.ordered_stopovers()),
            route.destination_coordinates,
        ]

    def _best_geo_segment(
        self, trip: Trip, criteria: TripSearchCriteria, radius_km: float
    ) -> tuple[int, int, SearchMatchResult] | None:
        """Score every boarding/alighting pair along the route; keep the best.

        Pairs are tried in route order, boarding point first, and the first
        pair with the top score wins.
        """
        if criteria.from_coords is None or criteria.to_coords is None:
            return None

        points = self._route_points(trip)
        best: tuple[int, int, SearchMatchResult] | None = None
        for pickup, pickup_point in enumerate(points[:-1]):
            if pickup_point is None:
                continue
            for dropoff in range(pickup + 1, len(points)):
                dropoff_point = points[dropoff]
                if dropoff_point is None:
                    continue
                result = match_trip_within_radius(
                    pickup_point,
                    dropoff_point,
                    criteria.from_coords,
                    criteria.to_coords,
                    radius_km,
                )
                if best is None or result.match_score > best[2].match_score:
                    best = (pickup, dropoff, result)
        return best
