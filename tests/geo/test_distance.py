"""Tests for the haversine distance utility."""

import pytest
from pydantic import ValidationError

from koolihub_trips.geo import (
    EARTH_RADIUS_KM,
    GeoCoordinates,
    distance_between,
    haversine_distance_km,
)


@pytest.mark.unit
class TestHaversineDistanceKm:
    """Tests for haversine_distance_km function."""

    def test_same_point_returns_zero(self) -> None:
        lat, lon = 14.0576, 78.7518  # Rayachoty
        assert haversine_distance_km(lat, lon, lat, lon) == pytest.approx(0.0, abs=1e-9)

    def test_known_distance_hyderabad_to_bengaluru(self) -> None:
        """Hyderabad to Bengaluru is roughly 500km as the crow flies."""
        distance = haversine_distance_km(17.3850, 78.4867, 12.9716, 77.5946)
        assert 490 <= distance <= 510

    def test_short_distance_accuracy(self) -> None:
        """0.009 degrees of latitude is about 1km."""
        distance = haversine_distance_km(14.0576, 78.7518, 14.0666, 78.7518)
        assert 0.95 <= distance <= 1.05

    def test_symmetry(self) -> None:
        lat1, lon1 = 13.6288, 79.4192
        lat2, lon2 = 14.4674, 78.8241

        distance_ab = haversine_distance_km(lat1, lon1, lat2, lon2)
        distance_ba = haversine_distance_km(lat2, lon2, lat1, lon1)

        assert distance_ab == pytest.approx(distance_ba, rel=1e-9)

    def test_antipodal_points(self) -> None:
        """Half the circumference for opposite points on the globe."""
        distance = haversine_distance_km(0.0, 0.0, 0.0, 180.0)
        assert distance == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM, rel=1e-9)


@pytest.mark.unit
class TestDistanceBetween:
    def test_matches_raw_function(self) -> None:
        origin = GeoCoordinates(lat=16.5062, lon=80.6480)
        destination = GeoCoordinates(lat=17.3850, lon=78.4867)

        assert distance_between(origin, destination) == haversine_distance_km(
            16.5062, 80.6480, 17.3850, 78.4867
        )

    def test_coordinates_are_immutable(self) -> None:
        point = GeoCoordinates(lat=1.0, lon=2.0)
        with pytest.raises(ValidationError):
            point.lat = 3.0
