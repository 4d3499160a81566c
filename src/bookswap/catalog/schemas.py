"""Pydantic schemas for the swap catalog.

These describe the plain data the discovery and matching engines consume:
owned-book records, users and their taste profiles.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ReadingState(str, Enum):
    """Lifecycle state of an owned book."""

    WANT_TO_READ = "want-to-read"
    CURRENTLY_READING = "currently-reading"
    READ = "read"

    @property
    def is_offerable(self) -> bool:
        """Whether a book in this state can be offered for a swap."""
        return self is not ReadingState.CURRENTLY_READING


class Coordinates(BaseModel):
    """A latitude/longitude pair in degrees."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = {"frozen": True}


# ============================================================================
# Books
# ============================================================================


class OwnedBookRecord(BaseModel):
    """One user's copy of a catalog book."""

    id: str
    book_id: str = Field(..., description="Catalog book id")
    user_id: str = Field(..., description="Owning user id")

    # Denormalized for display and search
    title: str = ""
    authors: list[str] = Field(default_factory=list)
    cover_url: Optional[str] = None

    status: ReadingState = ReadingState.WANT_TO_READ
    rating: Optional[int] = Field(None, ge=1, le=5, description="Rating 1-5")
    review: Optional[str] = None

    added_at: datetime
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def primary_author(self) -> str:
        """First listed author, or an empty string."""
        return self.authors[0] if self.authors else ""


# ============================================================================
# Users
# ============================================================================


class UserProfile(BaseModel):
    """Declared taste signals of a user."""

    city: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    favorite_genres: list[str] = Field(default_factory=list)
    favorite_authors: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    intellectual_bio: Optional[str] = None

    @field_validator("favorite_genres", "favorite_authors", "interests", mode="before")
    @classmethod
    def drop_blank_labels(cls, v):
        """Strip labels and drop blank ones."""
        if v is None:
            return []
        return [str(item).strip() for item in v if str(item).strip()]

    @property
    def has_signals(self) -> bool:
        """Whether the profile declares any genre, author or interest."""
        return bool(self.favorite_genres or self.favorite_authors or self.interests)


class User(BaseModel):
    """A member of the swapping community."""

    id: str
    display_name: str
    avatar: Optional[str] = None
    profile: Optional[UserProfile] = None

    @property
    def city(self) -> Optional[str]:
        """City from the profile, if any."""
        return self.profile.city if self.profile else None
