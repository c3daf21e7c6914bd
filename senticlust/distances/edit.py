"""Character edit distance."""

from ..core.registry import get_registry


def levenshtein_distance(text1: str, text2: str) -> float:
    """
    Unit-cost Levenshtein distance normalized by the longer length.

    Two empty strings have distance 0.
    """
    len1, len2 = len(text1), len(text2)
    max_len = max(len1, len2)
    if max_len == 0:
        return 0.0

    previous = list(range(len2 + 1))
    for i in range(1, len1 + 1):
        current = [i] + [0] * len2
        for j in range(1, len2 + 1):
            if text1[i - 1] == text2[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = min(
                    previous[j - 1] + 1,
                    current[j - 1] + 1,
                    previous[j] + 1,
                )
        previous = current

    return previous[len2] / max_len


get_registry("distances").register("levenshtein", factory=levenshtein_distance)
