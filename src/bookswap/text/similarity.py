"""Levenshtein-based string similarity.

Uses RapidFuzz's plain Levenshtein metric, where insertions, deletions and
substitutions all cost 1.
"""

from rapidfuzz.distance import Levenshtein

from .collation import turkish_lower


def levenshtein_distance(first: str, second: str) -> int:
    """Minimum number of single-character edits turning one string into another.

    Args:
        first: First string
        second: Second string

    Returns:
        Edit distance
    """
    return Levenshtein.distance(first, second)


def similarity_score(first: str, second: str) -> float:
    """Case-insensitive similarity between 0 and 1.

    Computed as ``1 - distance / max_len``; two empty strings are
    identical and score 1.0.

    Example:
        >>> similarity_score("Dune", "dune")
        1.0
        >>> round(similarity_score("kitten", "sitting"), 4)
        0.5714
    """
    first = turkish_lower(first)
    second = turkish_lower(second)
    if not first and not second:
        return 1.0
    return Levenshtein.normalized_similarity(first, second)
