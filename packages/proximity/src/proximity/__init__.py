"""Great-circle proximity checks."""

from proximity.distance import EARTH_RADIUS_KM, haversine_distance_km
from proximity.exceptions import InvalidCoordinate
from proximity.geofence import is_near, validate_threshold_km
from proximity.models import GeoPoint

__all__ = [
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "InvalidCoordinate",
    "haversine_distance_km",
    "is_near",
    "validate_threshold_km",
]
