"""Swap catalog data model and data access."""

from .repository import CatalogRepository, InMemoryCatalog, JsonCatalog
from .schemas import Coordinates, OwnedBookRecord, ReadingState, User, UserProfile

__all__ = [
    "CatalogRepository",
    "InMemoryCatalog",
    "JsonCatalog",
    "Coordinates",
    "OwnedBookRecord",
    "ReadingState",
    "User",
    "UserProfile",
]
