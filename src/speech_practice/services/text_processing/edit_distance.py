"""Character-level edit distance."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(source: str, target: str) -> int:
    """
    Minimum number of single-character insertions, deletions and substitutions
    needed to turn source into target.

    Empty inputs are valid: the distance is then the other string's length.
    """
    return Levenshtein.distance(source or "", target or "")
