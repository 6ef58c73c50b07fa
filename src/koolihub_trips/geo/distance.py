"""Great-circle distance between WGS84 coordinates.

Used by the trip matcher to compare a trip's pickup and dropoff points
with the points a passenger searched for.
"""

from math import atan2, cos, radians, sin, sqrt

from pydantic import BaseModel, ConfigDict

EARTH_RADIUS_KM = 6371.0


class GeoCoordinates(BaseModel):
    """A WGS84 point in degrees. Ranges are not validated."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


def haversine_distance_km(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate the great-circle distance between two points in kilometers.

    Args:
        lat1: Latitude of first point in degrees
        lon1: Longitude of first point in degrees
        lat2: Latitude of second point in degrees
        lon2: Longitude of second point in degrees

    Returns:
        Distance between the two points in kilometers
    """
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_between(origin: GeoCoordinates, destination: GeoCoordinates) -> float:
    """Haversine distance in kilometers between two coordinate models."""
    return haversine_distance_km(origin.lat, origin.lon, destination.lat, destination.lon)
