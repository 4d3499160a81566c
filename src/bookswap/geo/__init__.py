"""Geographic primitives."""

from .cities import CITY_COORDINATES, DEFAULT_CITY, CityDirectory, lookup_city, nearest_city
from .distance import EARTH_RADIUS_KM, distance_km, haversine_km

__all__ = [
    "CITY_COORDINATES",
    "DEFAULT_CITY",
    "CityDirectory",
    "lookup_city",
    "nearest_city",
    "EARTH_RADIUS_KM",
    "distance_km",
    "haversine_km",
]
