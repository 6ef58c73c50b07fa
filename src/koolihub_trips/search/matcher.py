"""Trip matching by coordinates and by free-text location."""

import datetime
import re

from pydantic import BaseModel, Field

from koolihub_trips.geo.distance import GeoCoordinates, distance_between
from koolihub_trips.search.phonetics import normalize_for_phonetics
from koolihub_trips.search.similarity import are_phonetically_similar, string_similarity
from koolihub_trips.utils.rounding import round_half_up

DEFAULT_RADIUS_KM = 5.0
DEFAULT_SIMILARITY_THRESHOLD = 0.65
MIN_WORD_LENGTH = 3

# Score penalties, per leg
IN_RADIUS_MAX_PENALTY = 25.0
OUT_OF_RADIUS_PENALTY = 50.0

_SEARCH_WORD_SPLIT = re.compile(r"\s+")
_LOCATION_WORD_SPLIT = re.compile(r"[\s,]+")


class TripSearchCriteria(BaseModel):
    from_location: str | None = None
    to_location: str | None = None
    date: datetime.date | None = None
    vehicle_type: str | None = None
    passengers: int | None = Field(default=None, ge=1)
    from_coords: GeoCoordinates | None = None
    to_coords: GeoCoordinates | None = None


class SearchMatchResult(BaseModel):
    match_score: float = Field(ge=0, le=100)
    pickup_distance_km: float = Field(ge=0)
    dropoff_distance_km: float = Field(ge=0)
    is_within_radius: bool


def _leg_penalty(distance_km: float, radius_km: float) -> float:
    if radius_km <= 0:
        return 0.0 if distance_km == 0 else OUT_OF_RADIUS_PENALTY
    if distance_km <= radius_km:
        return distance_km / radius_km * IN_RADIUS_MAX_PENALTY
    return OUT_OF_RADIUS_PENALTY


def match_trip_within_radius(
    trip_pickup: GeoCoordinates,
    trip_dropoff: GeoCoordinates,
    search_pickup: GeoCoordinates,
    search_dropoff: GeoCoordinates,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> SearchMatchResult:
    """Score how close a trip's endpoints are to the searched endpoints.

    Each leg inside the radius loses up to 25 points in proportion to its
    distance; a leg outside the radius loses a flat 50. Trips that miss the
    radius still get a score so they can be listed as near misses. A radius
    of zero or less only accepts exact endpoints.
    """
    radius_km = max(radius_km, 0.0)
    pickup_distance_km = distance_between(trip_pickup, search_pickup)
    dropoff_distance_km = distance_between(trip_dropoff, search_dropoff)

    is_within_radius = pickup_distance_km <= radius_km and dropoff_distance_km <= radius_km

    match_score = 100.0
    match_score -= _leg_penalty(pickup_distance_km, radius_km)
    match_score -= _leg_penalty(dropoff_distance_km, radius_km)

    return SearchMatchResult(
        match_score=max(0.0, match_score),
        pickup_distance_km=round_half_up(pickup_distance_km),
        dropoff_distance_km=round_half_up(dropoff_distance_km),
        is_within_radius=is_within_radius,
    )


def _words_match(location_word: str, search_word: str, similarity_threshold: float) -> bool:
    if location_word in search_word or search_word in location_word:
        return True
    if are_phonetically_similar(location_word, search_word):
        return True
    return string_similarity(location_word, search_word) > similarity_threshold


def match_trip_by_text(
    trip_location: str,
    search_term: str,
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> bool:
    """Fuzzy match a trip location such as "Rayachoty, Andhra Pradesh" against a query.

    Strategies are tried cheapest first and the first hit wins:

    1. Substring either way, on the full location and on the city name
       (the part before the first comma)
    2. Phonetic similarity on the city name
    3. Edit-distance similarity on the city name above the threshold
    4. Substring either way on the phonetically normalised forms
    5. Word by word, skipping words under 3 characters
    """
    if not trip_location or not search_term:
        return False

    trip_lower = trip_location.lower().strip()
    search_lower = search_term.lower().strip()
    city_name = trip_lower.split(",")[0].strip()

    if search_lower in trip_lower or trip_lower in search_lower:
        return True
    if search_lower in city_name or city_name in search_lower:
        return True

    if are_phonetically_similar(city_name, search_lower):
        return True

    if string_similarity(city_name, search_lower) > similarity_threshold:
        return True

    norm_trip = normalize_for_phonetics(city_name)
    norm_search = normalize_for_phonetics(search_lower)
    if norm_search in norm_trip or norm_trip in norm_search:
        return True

    search_words = _SEARCH_WORD_SPLIT.split(search_lower)
    location_words = _LOCATION_WORD_SPLIT.split(trip_lower)

    for search_word in search_words:
        if len(search_word) < MIN_WORD_LENGTH:
            continue
        for location_word in location_words:
            if len(location_word) < MIN_WORD_LENGTH:
                continue
            if _words_match(location_word, search_word, similarity_threshold):
                return True

    return False
