"""Clustering evaluation: label alignment, accuracy, confusion matrix, Rand Index."""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Sequence
import numpy as np
import pandas as pd


def _comb2(n: int) -> float:
    """Compute n choose 2 as a float."""
    if n < 2:
        return 0.0
    return float(n * (n - 1) / 2)


@dataclass
class ConfusionMatrix:
    """Counts of (true label, predicted label) pairs."""
    labels: List[str] = field(default_factory=list)
    matrix: np.ndarray = field(default_factory=lambda: np.zeros((0, 0), dtype=int))

    def to_frame(self) -> pd.DataFrame:
        """Rows are true labels, columns predicted labels."""
        return pd.DataFrame(self.matrix, index=self.labels, columns=self.labels)

    def to_list(self) -> List[List[int]]:
        return [[int(x) for x in row] for row in self.matrix]


def _mode(labels: Sequence[Hashable]):
    """Most frequent label; ties go to the label seen first."""
    counts: Dict[Hashable, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1

    best_label = None
    best_count = 0
    for label, count in counts.items():
        if count > best_count:
            best_count = count
            best_label = label
    return best_label


def align_labels(
    assignments: Sequence[int],
    labels: Sequence[str]
) -> Dict[int, str]:
    """
    Map each cluster to its most common ground-truth label.

    Args:
        assignments: Cluster id per document.
        labels: Ground-truth label per document.

    Returns:
        Dict {cluster_id: representative label}.
    """
    members: Dict[int, List[str]] = {}
    for cluster_id, label in zip(assignments, labels):
        members.setdefault(cluster_id, []).append(label)

    return {cluster_id: _mode(cluster_labels) for cluster_id, cluster_labels in members.items()}


def cluster_accuracy(assignments: Sequence[int], labels: Sequence[str]) -> float:
    """
    Fraction of documents whose label matches their cluster's representative.

    Mismatched lengths or empty input give 0.0.
    """
    if len(assignments) != len(labels) or len(labels) == 0:
        return 0.0

    representative = align_labels(assignments, labels)
    correct = sum(
        1 for cluster_id, label in zip(assignments, labels)
        if representative[cluster_id] == label
    )
    return correct / len(labels)


def confusion_matrix(
    y_true: Sequence[str],
    y_pred: Sequence[str]
) -> ConfusionMatrix:
    """
    Build a confusion matrix over the sorted distinct true labels.

    Predictions outside the true label set are not counted. Mismatched
    lengths give an empty matrix.
    """
    if len(y_true) != len(y_pred):
        return ConfusionMatrix()

    labels = sorted(set(y_true))
    index = {label: i for i, label in enumerate(labels)}
    matrix = np.zeros((len(labels), len(labels)), dtype=int)

    for true_label, pred_label in zip(y_true, y_pred):
        if pred_label in index:
            matrix[index[true_label], index[pred_label]] += 1

    return ConfusionMatrix(labels=labels, matrix=matrix)


def cluster_confusion_matrix(
    assignments: Sequence[int],
    labels: Sequence[str]
) -> ConfusionMatrix:
    """Confusion of ground truth against each cluster's representative label."""
    if len(assignments) != len(labels):
        return ConfusionMatrix()

    representative = align_labels(assignments, labels)
    predicted = [representative[cluster_id] for cluster_id in assignments]
    return confusion_matrix(labels, predicted)


def rand_index(assignments: Sequence[int], labels: Sequence[Hashable]) -> float:
    """
    Compute the Rand Index between a clustering and ground-truth labels.

    Counts document pairs on which both partitions agree (grouped together
    in both, or apart in both) over all C(n, 2) pairs.

    Args:
        assignments: Cluster id per document.
        labels: Ground-truth label per document.

    Returns:
        Rand Index in [0, 1]; 0.0 when n < 2 or the lengths differ.
    """
    n = len(assignments)
    if n != len(labels):
        return 0.0

    total = _comb2(n)
    if total == 0.0:
        return 0.0

    agreeing = 0
    for i in range(n):
        for j in range(i + 1, n):
            same_cluster = assignments[i] == assignments[j]
            same_label = labels[i] == labels[j]
            if same_cluster == same_label:
                agreeing += 1

    return agreeing / total


def compute_clustering_metrics(
    assignments: Sequence[int],
    labels: Sequence[str]
) -> Dict[str, Any]:
    """
    Compute clustering metrics.

    Args:
        assignments: Cluster id per labelled document.
        labels: Ground-truth label per labelled document.

    Returns:
        Dict with accuracy, Rand Index, confusion matrix and counts.
    """
    confusion = cluster_confusion_matrix(assignments, labels)

    return {
        "accuracy": cluster_accuracy(assignments, labels),
        "rand_index": rand_index(assignments, labels),
        "confusion_matrix": confusion.to_list(),
        "confusion_labels": confusion.labels,
        "n_clusters": len(set(assignments)),
        "n_documents": len(assignments),
    }
