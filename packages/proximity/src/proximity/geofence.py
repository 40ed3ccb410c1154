import math

from proximity.distance import haversine_distance_km
from proximity.exceptions import InvalidCoordinate
from proximity.models import GeoPoint


def is_near(origin: GeoPoint, target: GeoPoint, threshold_km: float) -> bool:
    """Whether ``target`` lies within ``threshold_km`` of ``origin`` (inclusive)."""
    validate_threshold_km(threshold_km)
    return haversine_distance_km(origin, target) <= threshold_km


def validate_threshold_km(threshold_km: float) -> None:
    if isinstance(threshold_km, bool) or not isinstance(threshold_km, (int, float)):
        raise InvalidCoordinate("threshold_km must be a number")
    if not math.isfinite(threshold_km):
        raise InvalidCoordinate("threshold_km must be finite")
    if threshold_km < 0:
        raise InvalidCoordinate("threshold_km must be >= 0")
