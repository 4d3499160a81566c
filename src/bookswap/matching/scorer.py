"""Reader compatibility scoring.

Compares two taste profiles on five signals and combines them into a
single score used to suggest people to follow and swap with.
"""

import logging
from typing import Iterable, Optional, Sequence

from ..catalog.schemas import User, UserProfile
from ..text.collation import collation_key, turkish_lower
from .overlap import (
    category_overlap,
    count_similarity,
    genre_overlap,
    influence_overlap,
    length_similarity,
    round_half_up,
)
from .schemas import CompatibilityResult, RecommendationTier, UserMatch
from .weights import DEFAULT_TABLES, WeightTables

logger = logging.getLogger(__name__)

SCORE_WEIGHTS = {
    "genre": 0.25,
    "interest": 0.30,
    "author": 0.20,
    "intellectual": 0.15,
    "pattern": 0.10,
}

# Thresholds for personalized recommendations
STRONG_MATCH_SCORE = 0.8
GOOD_MATCH_SCORE = 0.6


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _sorted_labels(labels: Iterable[str]) -> list[str]:
    return sorted(labels, key=collation_key)


class CompatibilityScorer:
    """Scores how well two readers' tastes line up."""

    def __init__(self, tables: WeightTables = DEFAULT_TABLES):
        """Initialize the scorer.

        Args:
            tables: Genre, interest and author weight tables
        """
        self.tables = tables

    def score(
        self,
        first: Optional[UserProfile],
        second: Optional[UserProfile],
    ) -> CompatibilityResult:
        """Compatibility between two profiles.

        A missing profile, or one declaring no genres, authors or interests,
        yields a zero result rather than an error.

        Args:
            first: One reader's profile
            second: The other reader's profile

        Returns:
            CompatibilityResult with sub-scores, reasons and tier
        """
        if first is None or second is None:
            return CompatibilityResult()
        if not first.has_signals or not second.has_signals:
            return CompatibilityResult()

        genres_a, genres_b = set(first.favorite_genres), set(second.favorite_genres)
        interests_a, interests_b = set(first.interests), set(second.interests)
        authors_a, authors_b = set(first.favorite_authors), set(second.favorite_authors)

        genre_score, common_genres = genre_overlap(
            genres_a, genres_b, self.tables.genre_weights
        )
        interest_score = category_overlap(
            interests_a, interests_b, self.tables.interest_categories
        )
        common_interests = interests_a & interests_b
        author_score, common_authors = influence_overlap(
            authors_a, authors_b, self.tables.author_influence
        )
        intellectual_score = self._intellectual_compatibility(first, second)
        pattern_score = self._reading_pattern_similarity(first, second)

        overall = round_half_up(
            genre_score * SCORE_WEIGHTS["genre"]
            + interest_score * SCORE_WEIGHTS["interest"]
            + author_score * SCORE_WEIGHTS["author"]
            + intellectual_score * SCORE_WEIGHTS["intellectual"]
            + pattern_score * SCORE_WEIGHTS["pattern"]
        )

        reasons = []
        if common_genres:
            reasons.append(_plural(len(common_genres), "common genre"))
        if common_interests:
            reasons.append(_plural(len(common_interests), "common interest"))
        if common_authors:
            reasons.append(_plural(len(common_authors), "common favorite author"))
        if intellectual_score > 0.7:
            reasons.append("Similar intellectual level")
        if pattern_score > 0.6:
            reasons.append("Similar reading preferences")

        return CompatibilityResult(
            overall_score=overall,
            genre_score=genre_score,
            interest_score=interest_score,
            author_score=author_score,
            intellectual_score=intellectual_score,
            pattern_score=pattern_score,
            match_reasons=reasons,
            tier=RecommendationTier.from_score(overall),
            common_genres=_sorted_labels(common_genres),
            common_interests=_sorted_labels(common_interests),
            common_authors=_sorted_labels(common_authors),
        )

    def rank(
        self,
        target: Optional[UserProfile],
        candidates: Sequence[Optional[UserProfile]],
    ) -> list[Optional[UserProfile]]:
        """Candidates ordered by compatibility with the target, best first."""
        scored = [(self.score(target, candidate).overall_score, candidate) for candidate in candidates]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [candidate for _, candidate in scored]

    def explain(self, result: CompatibilityResult) -> list[str]:
        """Human-readable sentences describing a result.

        Args:
            result: A compatibility result

        Returns:
            Explanation sentences, possibly empty
        """
        explanations = []

        if result.tier == RecommendationTier.HIGH:
            explanations.append("High compatibility! You could have great book conversations.")
        elif result.tier == RecommendationTier.MEDIUM:
            explanations.append("Moderate compatibility. You may discover new perspectives.")

        if result.genre_score > 0.6:
            explanations.append("You enjoy similar genres.")
        if result.intellectual_score > 0.7:
            explanations.append("Your intellectual interests look aligned.")
        if result.author_score > 0.5:
            explanations.append("You share favorite authors.")

        return explanations

    def _intellectual_compatibility(self, first: UserProfile, second: UserProfile) -> float:
        """Average of three intellectual signals.

        Shared intellectual genres add 0.4, shared intellectual interests add
        0.3 and similar biography lengths add up to 0.3. The sum is always
        divided by three.
        """
        score = 0.0

        intellectual_genres = self.tables.intellectual_genres
        if (
            intellectual_genres & set(first.favorite_genres)
            and intellectual_genres & set(second.favorite_genres)
        ):
            score += 0.4

        intellectual_interests = self.tables.intellectual_interests
        if (
            intellectual_interests & set(first.interests)
            and intellectual_interests & set(second.interests)
        ):
            score += 0.3

        score += 0.3 * length_similarity(
            first.intellectual_bio or "", second.intellectual_bio or ""
        )

        return score / 3

    def _reading_pattern_similarity(self, first: UserProfile, second: UserProfile) -> float:
        """How alike the sizes of the two profiles' genre, author and interest lists are."""
        return (
            count_similarity(len(set(first.favorite_genres)), len(set(second.favorite_genres)))
            + count_similarity(len(set(first.favorite_authors)), len(set(second.favorite_authors)))
            + count_similarity(len(set(first.interests)), len(set(second.interests)))
        ) / 3

    # -------------------------------------------------------------------------
    # User-level helpers
    # -------------------------------------------------------------------------

    def rank_users(self, current_user: User, users: Sequence[User]) -> list[UserMatch]:
        """Other users ordered by compatibility with the current user.

        Args:
            current_user: The user suggestions are for
            users: Candidate users, the current user is skipped

        Returns:
            List of matches, best first
        """
        matches = [
            UserMatch(user=user, result=self.score(current_user.profile, user.profile))
            for user in users
            if user.id != current_user.id
        ]
        matches.sort(key=lambda match: match.score, reverse=True)
        logger.debug("Ranked %d users for %s", len(matches), current_user.id)
        return matches

    def cultural_matches(
        self,
        current_user: User,
        users: Sequence[User],
        min_score: float = 0.6,
        preferred_genres: Optional[Sequence[str]] = None,
        preferred_interests: Optional[Sequence[str]] = None,
    ) -> list[UserMatch]:
        """Sufficiently compatible users, optionally narrowed by taste.

        Args:
            current_user: The user suggestions are for
            users: Candidate users
            min_score: Minimum overall score
            preferred_genres: Keep users listing at least one of these genres
            preferred_interests: Keep users listing at least one of these interests

        Returns:
            Matching users, best first
        """
        matches = [m for m in self.rank_users(current_user, users) if m.score >= min_score]

        if preferred_genres:
            wanted = set(preferred_genres)
            matches = [
                m for m in matches
                if m.user.profile and wanted & set(m.user.profile.favorite_genres)
            ]

        if preferred_interests:
            wanted = set(preferred_interests)
            matches = [
                m for m in matches
                if m.user.profile and wanted & set(m.user.profile.interests)
            ]

        return matches

    def similar_readers(
        self,
        current_user: User,
        users: Sequence[User],
        genre: Optional[str] = None,
        limit: int = 4,
    ) -> list[UserMatch]:
        """Best matches who list a genre among their favorites.

        Without a genre the top three matches are returned.
        """
        matches = self.rank_users(current_user, users)
        if not genre:
            return matches[:3]
        return [
            m for m in matches
            if m.user.profile and genre in m.user.profile.favorite_genres
        ][:limit]

    def recommended_users(
        self,
        current_user: User,
        users: Sequence[User],
        limit: int = 5,
    ) -> list[UserMatch]:
        """The ``limit`` most compatible other users."""
        return self.rank_users(current_user, users)[:limit]

    def personalized_recommendations(
        self,
        current_user: User,
        users: Sequence[User],
        medium_limit: int = 2,
    ) -> list[UserMatch]:
        """Every strong match plus a few good ones.

        Users scoring at least ``STRONG_MATCH_SCORE`` are all kept; of those
        between ``GOOD_MATCH_SCORE`` and the strong threshold only the best
        ``medium_limit`` are added.

        Returns:
            Matches, best first
        """
        matches = self.rank_users(current_user, users)
        strong = [m for m in matches if m.score >= STRONG_MATCH_SCORE]
        good = [m for m in matches if GOOD_MATCH_SCORE <= m.score < STRONG_MATCH_SCORE]
        return strong + good[:medium_limit]


def find_users(users: Sequence[User], query: str) -> list[User]:
    """Users whose display name or any interest contains the query.

    Args:
        users: Users to search
        query: Case-insensitive search text

    Returns:
        Matching users in their original order
    """
    needle = turkish_lower(query.strip())
    if not needle:
        return list(users)

    found = []
    for user in users:
        if needle in turkish_lower(user.display_name):
            found.append(user)
        elif user.profile and any(needle in turkish_lower(i) for i in user.profile.interests):
            found.append(user)
    return found
