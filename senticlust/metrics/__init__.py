"""Evaluation metrics for classification and clustering."""

from .clustering import (
    ConfusionMatrix,
    align_labels,
    cluster_accuracy,
    confusion_matrix,
    cluster_confusion_matrix,
    rand_index,
    compute_clustering_metrics,
)
from .classification import compute_classification_metrics
from .sanity import run_sanity_checks
