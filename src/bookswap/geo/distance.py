"""Great-circle distance between coordinates."""

import math

from ..catalog.schemas import Coordinates

EARTH_RADIUS_KM = 6371


def haversine_km(origin: Coordinates, destination: Coordinates) -> float:
    """Unrounded great-circle distance in kilometers."""
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(destination.latitude)
    d_lat = math.radians(destination.latitude - origin.latitude)
    d_lon = math.radians(destination.longitude - origin.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(origin: Coordinates, destination: Coordinates) -> int:
    """Great-circle distance rounded to the nearest whole kilometer.

    Args:
        origin: Starting point
        destination: End point

    Returns:
        Distance in km
    """
    # Half-up, so 0.5 km rounds to 1
    return int(math.floor(haversine_km(origin, destination) + 0.5))
