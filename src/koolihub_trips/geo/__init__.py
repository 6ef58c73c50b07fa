from .distance import EARTH_RADIUS_KM, GeoCoordinates, distance_between, haversine_distance_km

__all__ = ["EARTH_RADIUS_KM", "GeoCoordinates", "distance_between", "haversine_distance_km"]
