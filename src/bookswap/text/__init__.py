"""Text primitives: case folding, collation and fuzzy similarity."""

from .collation import collation_key, turkish_lower
from .similarity import levenshtein_distance, similarity_score

__all__ = [
    "collation_key",
    "turkish_lower",
    "levenshtein_distance",
    "similarity_score",
]
