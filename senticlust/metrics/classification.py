"""Classification metrics for predicted sentiment labels."""

from typing import Any, Dict, Sequence
import numpy as np

from .clustering import confusion_matrix


def compute_classification_metrics(
    y_true: Sequence[str],
    y_pred: Sequence[str]
) -> Dict[str, Any]:
    """
    Compute classification metrics.

    Args:
        y_true: Ground truth labels.
        y_pred: Predicted labels.

    Returns:
        Dict with accuracy, macro precision/recall/f1, per-label scores
        and the confusion matrix. Mismatched or empty input gives zeros.
    """
    if len(y_true) != len(y_pred) or len(y_true) == 0:
        return {
            "accuracy": 0.0,
            "macro_precision": 0.0,
            "macro_recall": 0.0,
            "macro_f1": 0.0,
            "per_label": {},
            "confusion_matrix": [],
            "confusion_labels": [],
            "n_documents": 0,
        }

    y_true_arr = np.asarray(y_true, dtype=object)
    y_pred_arr = np.asarray(y_pred, dtype=object)

    accuracy = float(np.mean(y_true_arr == y_pred_arr))

    per_label = {}
    for label in sorted(set(y_true) | set(y_pred)):
        tp = int(np.sum((y_true_arr == label) & (y_pred_arr == label)))
        fp = int(np.sum((y_true_arr != label) & (y_pred_arr == label)))
        fn = int(np.sum((y_true_arr == label) & (y_pred_arr != label)))

        precision = tp / (tp + fp) if (tp + fp) > 0 else 0.0
        recall = tp / (tp + fn) if (tp + fn) > 0 else 0.0
        f1 = (2 * precision * recall / (precision + recall)) if (precision + recall) > 0 else 0.0

        per_label[label] = {
            "precision": float(precision),
            "recall": float(recall),
            "f1": float(f1),
            "support": tp + fn,
        }

    confusion = confusion_matrix(y_true, y_pred)

    return {
        "accuracy": accuracy,
        "macro_precision": float(np.mean([m["precision"] for m in per_label.values()])),
        "macro_recall": float(np.mean([m["recall"] for m in per_label.values()])),
        "macro_f1": float(np.mean([m["f1"] for m in per_label.values()])),
        "per_label": per_label,
        "confusion_matrix": confusion.to_list(),
        "confusion_labels": confusion.labels,
        "n_documents": len(y_true),
    }
