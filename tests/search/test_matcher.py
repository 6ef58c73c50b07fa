import pytest
from pydantic import ValidationError

from koolihub_trips.geo import GeoCoordinates
from koolihub_trips.search import (
    TripSearchCriteria,
    match_trip_by_text,
    match_trip_within_radius,
)

RAYACHOTY = GeoCoordinates(lat=14.0576, lon=78.7518)
TIRUPATI = GeoCoordinates(lat=13.6288, lon=79.4192)

# 0.009 degrees of latitude is roughly 1km
ONE_KM_NORTH_OF_RAYACHOTY = GeoCoordinates(lat=14.0666, lon=78.7518)


@pytest.mark.unit
class TestMatchTripWithinRadius:
    def test_exact_match_scores_full_marks(self):
        result = match_trip_within_radius(RAYACHOTY, TIRUPATI, RAYACHOTY, TIRUPATI)

        assert result.match_score == 100.0
        assert result.pickup_distance_km == 0.0
        assert result.dropoff_distance_km == 0.0
        assert result.is_within_radius is True

    def test_penalty_is_proportional_inside_radius(self):
        result = match_trip_within_radius(
            RAYACHOTY, TIRUPATI, ONE_KM_NORTH_OF_RAYACHOTY, TIRUPATI, radius_km=5
        )

        assert result.is_within_radius is True
        assert result.pickup_distance_km == pytest.approx(1.0, abs=0.01)
        assert result.match_score == pytest.approx(95.0, abs=0.1)

    def test_leg_outside_radius_loses_fifty(self):
        result = match_trip_within_radius(
            RAYACHOTY, TIRUPATI, ONE_KM_NORTH_OF_RAYACHOTY, TIRUPATI, radius_km=0.5
        )

        assert result.is_within_radius is False
        assert result.match_score == pytest.approx(50.0)

    def test_both_legs_outside_radius_scores_zero(self):
        result = match_trip_within_radius(RAYACHOTY, TIRUPATI, TIRUPATI, RAYACHOTY)

        assert result.match_score == 0.0
        assert result.is_within_radius is False
        assert result.pickup_distance_km > 50

    def test_distances_are_rounded_to_two_places(self):
        result = match_trip_within_radius(RAYACHOTY, TIRUPATI, TIRUPATI, RAYACHOTY)
        assert result.pickup_distance_km == round(result.pickup_distance_km, 2)

    def test_zero_distance_is_inside_any_radius(self):
        result = match_trip_within_radius(
            RAYACHOTY, TIRUPATI, RAYACHOTY, TIRUPATI, radius_km=0.0001
        )
        assert result.is_within_radius is True

    def test_zero_radius_accepts_exact_endpoints(self):
        result = match_trip_within_radius(RAYACHOTY, TIRUPATI, RAYACHOTY, TIRUPATI, radius_km=0)

        assert result.match_score == 100.0
        assert result.is_within_radius is True

    def test_zero_radius_puts_any_offset_outside(self):
        result = match_trip_within_radius(
            RAYACHOTY, TIRUPATI, ONE_KM_NORTH_OF_RAYACHOTY, TIRUPATI, radius_km=0
        )

        assert result.match_score == pytest.approx(50.0)
        assert result.is_within_radius is False

    def test_negative_radius_behaves_like_zero(self):
        result = match_trip_within_radius(
            RAYACHOTY, TIRUPATI, ONE_KM_NORTH_OF_RAYACHOTY, TIRUPATI, radius_km=-5
        )

        assert result.match_score == pytest.approx(50.0)
        assert result.is_within_radius is False


@pytest.mark.unit
class TestMatchTripByText:
    def test_transliteration_variant(self):
        assert match_trip_by_text("Rayachoty, Andhra Pradesh", "Rayachoti") is True

    def test_unrelated_cities(self):
        assert match_trip_by_text("Mumbai", "Delhi") is False

    def test_city_substring(self):
        assert match_trip_by_text("Tirupati, Andhra Pradesh", "tirupati") is True

    def test_state_substring(self):
        assert match_trip_by_text("Kadapa, Andhra Pradesh", "Andhra") is True

    def test_query_containing_location(self):
        assert match_trip_by_text("Kadapa", "Kadapa bus stand") is True

    def test_word_by_word(self):
        assert match_trip_by_text("Rayachoty, Andhra Pradesh", "pradesh state") is True

    def test_aspirated_spelling(self):
        assert match_trip_by_text("Tirupati, Andhra Pradesh", "Tirupathi") is True

    def test_different_city_in_same_region(self):
        assert match_trip_by_text("Chennai, Tamil Nadu", "Hyderabad") is False

    @pytest.mark.parametrize("location,term", [("", "Kadapa"), ("Kadapa", ""), ("", "")])
    def test_empty_inputs_never_match(self, location, term):
        assert match_trip_by_text(location, term) is False


@pytest.mark.unit
class TestTripSearchCriteria:
    def test_everything_is_optional(self):
        criteria = TripSearchCriteria()
        assert criteria.from_location is None
        assert criteria.passengers is None

    def test_passengers_must_be_positive(self):
        with pytest.raises(ValidationError):
            TripSearchCriteria(passengers=0)
