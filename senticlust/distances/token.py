"""Token-based distances: word overlap, Jaccard, and cosine."""

import math
from collections import Counter

from .base import tokenize
from ..core.registry import get_registry


def default_distance(text1: str, text2: str) -> float:
    """
    Share of the combined vocabulary not common to both texts.

    Two texts without any tokens are maximally distant.
    """
    words1 = set(tokenize(text1))
    words2 = set(tokenize(text2))

    union = words1 | words2
    if not union:
        return 1.0

    intersection = words1 & words2
    return (len(union) - len(intersection)) / len(union)


def jaccard_distance(text1: str, text2: str) -> float:
    """One minus the Jaccard similarity of the token sets."""
    words1 = set(tokenize(text1))
    words2 = set(tokenize(text2))

    union = words1 | words2
    if not union:
        return 1.0

    return 1 - len(words1 & words2) / len(union)


def cosine_distance(text1: str, text2: str) -> float:
    """
    One minus the cosine similarity of word count vectors.

    Returns 1 when either text has no tokens.
    """
    counts1 = Counter(tokenize(text1))
    counts2 = Counter(tokenize(text2))

    vocabulary = list(dict.fromkeys(list(counts1) + list(counts2)))

    dot_product = sum(counts1[w] * counts2[w] for w in vocabulary)
    magnitude1 = math.sqrt(sum(c * c for c in counts1.values()))
    magnitude2 = math.sqrt(sum(c * c for c in counts2.values()))

    if magnitude1 == 0 or magnitude2 == 0:
        return 1.0

    similarity = dot_product / (magnitude1 * magnitude2)
    # clamp float round-off on identical count vectors
    return min(1.0, max(0.0, 1 - similarity))


get_registry("distances").register("default", factory=default_distance)
get_registry("distances").register("jaccard", factory=jaccard_distance)
get_registry("distances").register("cosine", factory=cosine_distance)
