"""
Distance function lookup and distance matrix construction.

Every metric maps a pair of normalized strings to a float in [0, 1].
"""

from typing import Callable, List, Sequence, Union
import numpy as np

from ..core.registry import get_registry

DistanceFunction = Callable[[str, str], float]

DEFAULT_METRIC = "default"


def tokenize(text: str) -> List[str]:
    """Split on whitespace, dropping empty tokens. Case is preserved."""
    return text.split()


def get_distance_function(name: str) -> DistanceFunction:
    """
    Look up a distance function by name.

    Unknown names fall back to the default metric.
    """
    return get_registry("distances").resolve(name, DEFAULT_METRIC)


def pairwise_distances(
    texts: Sequence[str],
    metric: Union[str, DistanceFunction] = DEFAULT_METRIC
) -> np.ndarray:
    """
    Build the symmetric distance matrix over `texts`.

    Args:
        texts: Normalized texts in caller order.
        metric: Metric name or distance function.

    Returns:
        n x n float array with zero diagonal.
    """
    distance_fn = get_distance_function(metric) if isinstance(metric, str) else metric
    n = len(texts)
    matrix = np.zeros((n, n), dtype=float)

    for i in range(n):
        for j in range(i + 1, n):
            dist = distance_fn(texts[i], texts[j])
            matrix[i, j] = dist
            matrix[j, i] = dist

    return matrix


def condensed(matrix: np.ndarray) -> np.ndarray:
    """Flatten the upper triangle of a square matrix, row by row."""
    matrix = np.asarray(matrix, dtype=float)
    rows, cols = np.triu_indices(matrix.shape[0], k=1)
    return matrix[rows, cols]
