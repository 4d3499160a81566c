"""Book discovery: search, geo filtering and ranking."""

from .schemas import (
    OwnerSummary,
    SearchCriteria,
    SearchFilters,
    SearchResponse,
    SearchResultItem,
    SortDirection,
    SortField,
)
from .search import SearchRanker

__all__ = [
    "OwnerSummary",
    "SearchCriteria",
    "SearchFilters",
    "SearchRanker",
    "SearchResponse",
    "SearchResultItem",
    "SortDirection",
    "SortField",
]
