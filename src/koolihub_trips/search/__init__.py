"""Fuzzy geo/text trip matching."""

from .matcher import (
    SearchMatchResult,
    TripSearchCriteria,
    match_trip_by_text,
    match_trip_within_radius,
)
from .phonetics import PHONETIC_RULES, normalize_for_phonetics
from .segments import (
    MatchType,
    SegmentPrice,
    SegmentTiming,
    calculate_segment_price,
    calculate_segment_timing,
    duration_from_distance,
)
from .similarity import are_phonetically_similar, levenshtein_distance, string_similarity
from .trip_search import TripSearcher, TripSearchHit

__all__ = [
    "TripSearchCriteria",
    "SearchMatchResult",
    "match_trip_within_radius",
    "match_trip_by_text",
    "PHONETIC_RULES",
    "normalize_for_phonetics",
    "MatchType",
    "SegmentPrice",
    "SegmentTiming",
    "calculate_segment_price",
    "calculate_segment_timing",
    "duration_from_distance",
    "levenshtein_distance",
    "string_similarity",
    "are_phonetically_similar",
    "TripSearcher",
    "TripSearchHit",
]
