import math

from proximity.models import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(origin: GeoPoint, target: GeoPoint) -> float:
    origin_lat = math.radians(origin.latitude)
    target_lat = math.radians(target.latitude)
    delta_lat = math.radians(target.latitude - origin.latitude)
    delta_lng = math.radians(target.longitude - origin.longitude)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(origin_lat) * math.cos(target_lat) * math.sin(delta_lng / 2) ** 2
    )
    # rounding can push a just past 1 near antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
