"""Search option bags and result projections."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

from ..catalog.schemas import OwnedBookRecord

UNKNOWN_OWNER_NAME = "Bilinmeyen Kullanıcı"


class SortField(str, Enum):
    """Fields search results can be sorted by."""

    TITLE = "title"
    AUTHOR = "author"
    RATING = "rating"
    DATE_ADDED = "dateAdded"
    DISTANCE = "distance"


class SortDirection(str, Enum):
    """Sort direction for results."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SearchCriteria:
    """What the requester is looking for."""

    query: Optional[str] = None  # Matches title or any author
    author: Optional[str] = None
    title: Optional[str] = None
    city: Optional[str] = None  # Exact owner city
    owner: Optional[str] = None  # Owner display name substring
    min_rating: Optional[int] = None
    max_distance: Optional[float] = None  # km
    include_unrated: bool = False  # Let unrated books through min_rating


@dataclass(frozen=True)
class SearchFilters:
    """How results are narrowed and ordered."""

    sort_by: SortField = SortField.TITLE
    sort_order: SortDirection = SortDirection.ASC
    available_only: bool = False
    nearby_only: bool = False


@dataclass(frozen=True)
class OwnerSummary:
    """Public summary of a book's owner."""

    id: str
    display_name: str
    city: Optional[str] = None
    avatar: Optional[str] = None


@dataclass(frozen=True)
class SearchResultItem:
    """A matched owned book with its owner and optional distance."""

    user_book: OwnedBookRecord
    owner: OwnerSummary
    distance: Optional[int] = None  # km
    match_score: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "user_book": self.user_book.model_dump(mode="json"),
            "owner": asdict(self.owner),
            "distance": self.distance,
            "match_score": self.match_score,
        }


@dataclass
class SearchResponse:
    """Ranked search results plus the nearby subset."""

    results: list[SearchResultItem]
    nearby_results: list[SearchResultItem]
    applied_filters: dict[str, Any] = field(default_factory=dict)

    @property
    def total_results(self) -> int:
        """Number of ranked results."""
        return len(self.results)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "results": [item.to_dict() for item in self.results],
            "total_results": self.total_results,
            "nearby_results": [item.to_dict() for item in self.nearby_results],
            "applied_filters": self.applied_filters,
        }
