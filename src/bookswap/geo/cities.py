"""City coordinate lookup.

Owner locations are only known by city name, so distances are computed
between city centers taken from a fixed table.
"""

import logging
import math
from types import MappingProxyType
from typing import Mapping, Optional

from ..catalog.schemas import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_CITY = "İstanbul"

CITY_COORDINATES: Mapping[str, Coordinates] = MappingProxyType({
    "İstanbul": Coordinates(latitude=41.0082, longitude=28.9784),
    "Ankara": Coordinates(latitude=39.9334, longitude=32.8597),
    "İzmir": Coordinates(latitude=38.4237, longitude=27.1428),
    "Bursa": Coordinates(latitude=40.1826, longitude=29.0665),
    "Antalya": Coordinates(latitude=36.8969, longitude=30.7133),
    "Adana": Coordinates(latitude=37.0000, longitude=35.3213),
    "Konya": Coordinates(latitude=37.8713, longitude=32.4846),
    "Gaziantep": Coordinates(latitude=37.0662, longitude=37.3833),
    "Mersin": Coordinates(latitude=36.8121, longitude=34.6415),
    "Kayseri": Coordinates(latitude=38.7312, longitude=35.4787),
})


class CityDirectory:
    """Resolves city names to coordinates with a default-city fallback."""

    def __init__(
        self,
        cities: Mapping[str, Coordinates] = CITY_COORDINATES,
        default_city: str = DEFAULT_CITY,
    ):
        """Initialize the directory.

        Args:
            cities: City name to coordinate table
            default_city: City used for unknown names, must be in the table

        Raises:
            ValueError: If the default city is not in the table
        """
        if default_city not in cities:
            raise ValueError(f"Default city not in table: {default_city}")
        self.cities = MappingProxyType(dict(cities))
        self.default_city = default_city

    def __contains__(self, city: object) -> bool:
        return city in self.cities

    def lookup(self, city: Optional[str]) -> Coordinates:
        """Coordinates for a city, falling back to the default city.

        Args:
            city: City name, may be None or unknown

        Returns:
            Coordinates of the city or of the default city
        """
        if city and city in self.cities:
            return self.cities[city]
        logger.debug("Unknown city %r, using %s", city, self.default_city)
        return self.cities[self.default_city]

    def nearest(self, coords: Coordinates) -> str:
        """Name of the table city closest to a coordinate.

        Uses flat degree distance, which is enough to pick a city label.
        """
        best_city = self.default_city
        best_distance = math.inf
        for name, city_coords in self.cities.items():
            d = math.hypot(
                coords.latitude - city_coords.latitude,
                coords.longitude - city_coords.longitude,
            )
            if d < best_distance:
                best_distance = d
                best_city = name
        return best_city


_default_directory = CityDirectory()


def lookup_city(city: Optional[str]) -> Coordinates:
    """Coordinates for a city using the built-in table."""
    return _default_directory.lookup(city)


def nearest_city(coords: Coordinates) -> str:
    """Closest built-in table city to a coordinate."""
    return _default_directory.nearest(coords)
