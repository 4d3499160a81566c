"""Reader compatibility matching."""

from .schemas import CompatibilityResult, RecommendationTier, UserMatch
from .scorer import SCORE_WEIGHTS, CompatibilityScorer, find_users
from .weights import (
    AUTHOR_INFLUENCE,
    DEFAULT_TABLES,
    GENRE_WEIGHTS,
    INTELLECTUAL_GENRES,
    INTEREST_CATEGORIES,
    InterestCategory,
    WeightTables,
)

__all__ = [
    "CompatibilityResult",
    "CompatibilityScorer",
    "RecommendationTier",
    "UserMatch",
    "SCORE_WEIGHTS",
    "find_users",
    "AUTHOR_INFLUENCE",
    "DEFAULT_TABLES",
    "GENRE_WEIGHTS",
    "INTELLECTUAL_GENRES",
    "INTEREST_CATEGORIES",
    "InterestCategory",
    "WeightTables",
]
