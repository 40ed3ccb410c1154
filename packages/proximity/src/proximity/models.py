import math
from dataclasses import dataclass

from proximity.exceptions import InvalidCoordinate


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _validate_degrees("latitude", self.latitude, 90.0)
        _validate_degrees("longitude", self.longitude, 180.0)


def _validate_degrees(field: str, value: float, limit: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCoordinate(f"{field} must be a number")
    if not math.isfinite(value):
        raise InvalidCoordinate(f"{field} must be finite")
    if value < -limit or value > limit:
        raise InvalidCoordinate(f"{field} must be between {-limit:g} and {limit:g}")
