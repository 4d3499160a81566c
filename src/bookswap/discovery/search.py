"""Book discovery across the community catalog.

Finds books other members own, attaches owner details, measures how far
away each owner is and ranks the matches.
"""

import logging
import math
from dataclasses import asdict, replace
from typing import Callable, Optional, Sequence

from ..catalog.repository import CatalogRepository
from ..catalog.schemas import Coordinates, OwnedBookRecord, User
from ..errors import CatalogMissingError
from ..geo.cities import CityDirectory
from ..geo.distance import distance_km
from ..text.collation import collation_key, turkish_lower
from .schemas import (
    UNKNOWN_OWNER_NAME,
    OwnerSummary,
    SearchCriteria,
    SearchFilters,
    SearchResponse,
    SearchResultItem,
    SortDirection,
    SortField,
)

logger = logging.getLogger(__name__)

DEFAULT_NEARBY_RADIUS_KM = 50
DEFAULT_NEARBY_LIMIT = 5


def _contains(haystack: str, needle: str) -> bool:
    return turkish_lower(needle) in turkish_lower(haystack)


def _sort_key(field: SortField) -> Callable[[SearchResultItem], object]:
    """Key function for a sort field."""
    if field == SortField.AUTHOR:
        return lambda item: collation_key(item.user_book.primary_author)
    if field == SortField.RATING:
        return lambda item: item.user_book.rating or 0
    if field == SortField.DATE_ADDED:
        return lambda item: item.user_book.added_at.timestamp()
    if field == SortField.DISTANCE:
        return lambda item: math.inf if item.distance is None else item.distance
    return lambda item: collation_key(item.user_book.title)


class SearchRanker:
    """Filters, geolocates and ranks books owned by other members."""

    def __init__(
        self,
        catalog: Optional[CatalogRepository] = None,
        cities: Optional[CityDirectory] = None,
        nearby_radius_km: float = DEFAULT_NEARBY_RADIUS_KM,
        nearby_limit: int = DEFAULT_NEARBY_LIMIT,
    ):
        """Initialize the ranker.

        Args:
            catalog: Source of books and users for ``search_catalog``
            cities: City coordinate lookup, defaults to the built-in table
            nearby_radius_km: Nearby radius when criteria set no max distance
            nearby_limit: Maximum number of nearby results
        """
        self.catalog = catalog
        self.cities = cities or CityDirectory()
        self.nearby_radius_km = nearby_radius_km
        self.nearby_limit = nearby_limit

    def search(
        self,
        all_books: Sequence[OwnedBookRecord],
        all_users: Sequence[User],
        criteria: Optional[SearchCriteria] = None,
        filters: Optional[SearchFilters] = None,
        requesting_user_id: Optional[str] = None,
        requesting_coords: Optional[Coordinates] = None,
    ) -> SearchResponse:
        """Run the full search pipeline.

        Args:
            all_books: Every owned-book record in the community
            all_users: Every user, used to resolve owners
            criteria: What to look for
            filters: Sorting and availability options
            requesting_user_id: The searcher, whose own books are excluded
            requesting_coords: The searcher's position, enables distances

        Returns:
            SearchResponse with ranked and nearby results

        Raises:
            CatalogMissingError: If either catalog is None
        """
        if all_books is None:
            raise CatalogMissingError("all_books is required")
        if all_users is None:
            raise CatalogMissingError("all_users is required")

        criteria = criteria or SearchCriteria()
        filters = filters or SearchFilters()

        books = self._filter_books(all_books, criteria, requesting_user_id)
        results = self._attach_owners(books, all_users)

        if requesting_coords is not None:
            results = self._attach_distances(results, requesting_coords)

        results = self._apply_result_filters(results, criteria, filters)
        results = self._sort_results(results, filters)

        radius = criteria.max_distance or self.nearby_radius_km
        nearby = self._nearby(results, radius)

        logger.debug(
            "Search for %r: %d of %d books matched, %d nearby",
            criteria.query,
            len(results),
            len(all_books),
            len(nearby),
        )

        return SearchResponse(
            results=results,
            nearby_results=nearby,
            applied_filters={**asdict(criteria), **asdict(filters)},
        )

    def search_catalog(
        self,
        criteria: Optional[SearchCriteria] = None,
        filters: Optional[SearchFilters] = None,
        requesting_user_id: Optional[str] = None,
        requesting_coords: Optional[Coordinates] = None,
    ) -> SearchResponse:
        """Search using the books and users of the injected catalog.

        Raises:
            CatalogMissingError: If the ranker has no catalog
        """
        if self.catalog is None:
            raise CatalogMissingError("SearchRanker was created without a catalog")
        return self.search(
            self.catalog.list_owned_books(),
            self.catalog.list_users(),
            criteria,
            filters,
            requesting_user_id,
            requesting_coords,
        )

    # -------------------------------------------------------------------------
    # Pipeline stages
    # -------------------------------------------------------------------------

    def _filter_books(
        self,
        books: Sequence[OwnedBookRecord],
        criteria: SearchCriteria,
        requesting_user_id: Optional[str],
    ) -> list[OwnedBookRecord]:
        """Drop the requester's own books and apply the text and rating criteria."""
        matched = []
        for book in books:
            if requesting_user_id is not None and book.user_id == requesting_user_id:
                continue

            if criteria.query:
                title_match = _contains(book.title, criteria.query)
                author_match = any(_contains(a, criteria.query) for a in book.authors)
                if not title_match and not author_match:
                    continue

            if criteria.author and not any(
                _contains(a, criteria.author) for a in book.authors
            ):
                continue

            if criteria.title and not _contains(book.title, criteria.title):
                continue

            if criteria.min_rating is not None:
                if book.rating is None:
                    if not criteria.include_unrated:
                        continue
                elif book.rating < criteria.min_rating:
                    continue

            matched.append(book)
        return matched

    def _attach_owners(
        self,
        books: list[OwnedBookRecord],
        users: Sequence[User],
    ) -> list[SearchResultItem]:
        users_by_id = {user.id: user for user in users}
        results = []
        for book in books:
            owner = users_by_id.get(book.user_id)
            if owner is None:
                summary = OwnerSummary(id=book.user_id, display_name=UNKNOWN_OWNER_NAME)
            else:
                summary = OwnerSummary(
                    id=owner.id,
                    display_name=owner.display_name or UNKNOWN_OWNER_NAME,
                    city=owner.city,
                    avatar=owner.avatar,
                )
            results.append(SearchResultItem(user_book=book, owner=summary))
        return results

    def _attach_distances(
        self,
        results: list[SearchResultItem],
        origin: Coordinates,
    ) -> list[SearchResultItem]:
        return [
            replace(item, distance=distance_km(origin, self.cities.lookup(item.owner.city)))
            for item in results
        ]

    def _apply_result_filters(
        self,
        results: list[SearchResultItem],
        criteria: SearchCriteria,
        filters: SearchFilters,
    ) -> list[SearchResultItem]:
        """Distance, availability, city and owner filters."""
        has_distances = any(item.distance is not None for item in results)

        if criteria.max_distance is not None and has_distances:
            results = [
                item for item in results
                if item.distance is None or item.distance <= criteria.max_distance
            ]

        if filters.nearby_only and has_distances:
            radius = criteria.max_distance or self.nearby_radius_km
            results = [
                item for item in results
                if item.distance is not None and item.distance <= radius
            ]

        if filters.available_only:
            results = [item for item in results if item.user_book.status.is_offerable]

        if criteria.city:
            results = [item for item in results if item.owner.city == criteria.city]

        if criteria.owner:
            results = [
                item for item in results
                if _contains(item.owner.display_name, criteria.owner)
            ]

        return results

    def _sort_results(
        self,
        results: list[SearchResultItem],
        filters: SearchFilters,
    ) -> list[SearchResultItem]:
        # sorted() is stable in both directions
        return sorted(
            results,
            key=_sort_key(filters.sort_by),
            reverse=filters.sort_order == SortDirection.DESC,
        )

    def _nearby(
        self,
        results: list[SearchResultItem],
        radius_km: float,
    ) -> list[SearchResultItem]:
        """Closest results within the radius, nearest first."""
        within = [
            item for item in results
            if item.distance is not None and item.distance <= radius_km
        ]
        within.sort(key=lambda item: item.distance)
        return within[: self.nearby_limit]
