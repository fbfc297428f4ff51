"""Distance primitives used to score restaurants against a query."""
from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def string_distance(a: str, b: str) -> int:
    """
    Edit distance between two strings.

    Counts the single code point insertions, deletions and substitutions
    needed to turn ``a`` into ``b``. Case-sensitive, no normalization.
    """
    return Levenshtein.distance(a, b)


def integer_distance(a: int, b: int) -> int:
    return abs(a - b)
