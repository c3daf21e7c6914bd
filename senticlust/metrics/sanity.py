"""Sanity checks for clustering and evaluation validity."""

from typing import Dict, List, Sequence
import numpy as np

from ..core.types import MergeRecord


def run_sanity_checks(
    distance_matrix: np.ndarray = None,
    dendrogram: Sequence[MergeRecord] = None,
    assignments: Sequence[int] = None,
    n_clusters: int = None,
    labels: Sequence[str] = None,
    predictions: Sequence[str] = None,
) -> Dict[str, bool]:
    """
    Run sanity checks on clustering and evaluation inputs.

    Catches common issues like:
    - Asymmetric or out-of-range distance matrices
    - Dendrograms that do not merge everything into one cluster
    - More flat clusters than requested
    - Evaluating without any labelled documents

    Args:
        distance_matrix: Square document distance matrix.
        dendrogram: Merge records from hierarchical clustering.
        assignments: Flat cluster id per document.
        n_clusters: Requested number of clusters.
        labels: Ground truth labels.
        predictions: Predicted labels.

    Returns:
        Dict of check names to pass/fail booleans.
    """
    checks = {}
    n = None

    if distance_matrix is not None:
        matrix = np.asarray(distance_matrix, dtype=float)
        n = matrix.shape[0]
        checks["matrix_square"] = matrix.ndim == 2 and matrix.shape[0] == matrix.shape[1]
        if checks["matrix_square"]:
            checks["matrix_symmetric"] = bool(np.array_equal(matrix, matrix.T))
            checks["matrix_zero_diagonal"] = bool(np.all(np.diag(matrix) == 0))
            checks["matrix_in_unit_range"] = bool(
                matrix.size == 0 or (matrix.min() >= 0 and matrix.max() <= 1)
            )
            checks["matrix_no_nan"] = not bool(np.any(np.isnan(matrix)))

    if dendrogram is not None:
        if n is not None:
            expected = n - 1 if n >= 2 else 0
            checks["dendrogram_complete"] = len(dendrogram) == expected
            if dendrogram:
                checks["dendrogram_root_covers_all"] = dendrogram[-1].count == n
        checks["dendrogram_no_nan"] = not any(
            np.isnan(record.distance) for record in dendrogram
        )

    if assignments is not None:
        ids: List[int] = list(assignments)
        if n is not None:
            checks["assignments_cover_documents"] = len(ids) == n
        checks["assignments_dense"] = sorted(set(ids)) == list(range(len(set(ids))))
        if n_clusters is not None:
            checks["cluster_count_within_request"] = len(set(ids)) <= n_clusters

    if labels is not None:
        checks["labels_not_empty"] = len(labels) > 0
        checks["labels_multiple_classes"] = len(set(labels)) > 1

    if predictions is not None and labels is not None:
        checks["predictions_match_labels"] = len(predictions) == len(labels)

    checks["all_passed"] = all(checks.values())

    return checks
