"""Compatibility result structures."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from ..catalog.schemas import User


class RecommendationTier(str, Enum):
    """Coarse recommendation level derived from the overall score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_score(cls, score: float) -> "RecommendationTier":
        """Tier for an overall score."""
        if score >= 0.75:
            return cls.HIGH
        if score >= 0.50:
            return cls.MEDIUM
        return cls.LOW


@dataclass(frozen=True)
class CompatibilityResult:
    """Compatibility breakdown between two readers."""

    overall_score: float = 0.0

    # Individual scores (0-1)
    genre_score: float = 0.0
    interest_score: float = 0.0
    author_score: float = 0.0
    intellectual_score: float = 0.0
    pattern_score: float = 0.0

    match_reasons: list[str] = field(default_factory=list)
    tier: RecommendationTier = RecommendationTier.LOW

    common_genres: list[str] = field(default_factory=list)
    common_interests: list[str] = field(default_factory=list)
    common_authors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        data = asdict(self)
        data["tier"] = self.tier.value
        return data


@dataclass(frozen=True)
class UserMatch:
    """A candidate user with their compatibility result."""

    user: User
    result: CompatibilityResult

    @property
    def score(self) -> float:
        return self.result.overall_score
