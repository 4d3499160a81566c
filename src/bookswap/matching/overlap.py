"""Weighted set-overlap primitives used by the compatibility scorer.

Sums iterate in sorted order so that swapping the two sides never changes
floating point results.
"""

import math
from typing import Iterable, Mapping

from .weights import InterestCategory


def weighted_sum(labels: Iterable[str], weights: Mapping[str, float], default: float = 1.0) -> float:
    """Sum of table weights for labels, unlisted labels weigh ``default``."""
    return sum(weights.get(label, default) for label in sorted(labels))


def genre_overlap(
    first: set[str],
    second: set[str],
    weights: Mapping[str, float],
) -> tuple[float, set[str]]:
    """Weighted share of common genres.

    Args:
        first: Genres of one reader
        second: Genres of the other reader
        weights: Genre weight table

    Returns:
        (score clamped to 1.0, common genres)
    """
    common = first & second
    if not common:
        return 0.0, common
    score = weighted_sum(common, weights) / max(len(first), len(second))
    return min(score, 1.0), common


def category_overlap(
    first: set[str],
    second: set[str],
    categories: Mapping[str, InterestCategory],
) -> float:
    """Category-weighted interest overlap.

    For every category the common count and the larger side count are
    weighted by the category weight; the score is their ratio.
    """
    matched = 0.0
    possible = 0.0
    for category in categories.values():
        in_first = first & category.interests
        in_second = second & category.interests
        matched += len(in_first & in_second) * category.weight
        possible += max(len(in_first), len(in_second)) * category.weight
    if possible == 0:
        return 0.0
    return min(matched / possible, 1.0)


def influence_overlap(
    first: set[str],
    second: set[str],
    influence: Mapping[str, float],
    boost: float = 2.0,
) -> tuple[float, set[str]]:
    """Influence-weighted share of common authors, boosted and clamped.

    Returns:
        (score clamped to 1.0, common authors)
    """
    common = first & second
    if not common:
        return 0.0, common
    total = weighted_sum(first | second, influence)
    if total == 0:
        return 0.0, common
    score = weighted_sum(common, influence) / total * boost
    return min(score, 1.0), common


def count_similarity(first: int, second: int) -> float:
    """1 minus the normalized absolute difference of two counts."""
    return 1 - abs(first - second) / max(first, second, 1)


def length_similarity(first: str, second: str) -> float:
    """Closeness of two text lengths, 0 when either text is empty."""
    if not first or not second:
        return 0.0
    longest = max(len(first), len(second))
    return 1 - abs(len(first) - len(second)) / longest


def round_half_up(value: float, digits: int = 2) -> float:
    """Round with halves going up, unlike the built-in banker's rounding."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
