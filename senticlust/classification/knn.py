"""k-nearest-neighbour sentiment classification."""

from typing import Dict, List, Sequence, Tuple

from .base import BaseClassifier
from ..core.types import Document, KNNParams, Label
from ..core.registry import get_registry
from ..distances import get_distance_function

DEFAULT_LABEL = "neutral"
WEIGHT_EPSILON = 0.0001


def find_neighbors(
    query: str,
    reference: Sequence[Tuple[str, Label]],
    params: KNNParams
) -> List[Tuple[int, float, Label]]:
    """
    Find the nearest reference items to a query.

    Args:
        query: Normalized query text.
        reference: Sequence of (text, label) pairs.
        params: KNN parameters; `k` larger than the reference set uses all items.

    Returns:
        List of (reference_index, distance, label), closest first. Exact
        distance ties keep reference order.
    """
    if params.k < 1:
        raise ValueError(f"k must be a positive integer, got {params.k}")

    distance_fn = get_distance_function(params.distance)

    scored = [
        (idx, distance_fn(query, text), label)
        for idx, (text, label) in enumerate(reference)
    ]
    scored.sort(key=lambda item: item[1])

    return scored[:min(params.k, len(scored))]


def _vote_weight(distance: float, vote: str) -> float:
    if vote != "weighted":
        return 1.0
    if distance == 0:
        return 1.0
    return 1.0 / (distance + WEIGHT_EPSILON)


def knn_classify(
    query: str,
    reference: Sequence[Tuple[str, Label]],
    params: KNNParams
) -> Label:
    """
    Classify a query by voting among its nearest reference items.

    Majority voting counts labels; weighted voting sums inverse distances.
    Ties go to the label first encountered in distance order. An empty
    reference set yields DEFAULT_LABEL. Unknown vote types count as majority.

    Args:
        query: Normalized query text.
        reference: Sequence of (text, label) pairs.
        params: KNN parameters.

    Returns:
        Predicted label.
    """
    neighbors = find_neighbors(query, reference, params)

    scores: Dict[Label, float] = {}
    for _, distance, label in neighbors:
        scores[label] = scores.get(label, 0.0) + _vote_weight(distance, params.vote)

    best_score = -1.0
    predicted = DEFAULT_LABEL
    for label, score in scores.items():
        if score > best_score:
            best_score = score
            predicted = label

    return predicted


class KNNClassifier(BaseClassifier):
    """
    k-nearest-neighbour classifier over a labelled reference set.

    There is no training step; fit() keeps the labelled documents.
    """

    def __init__(
        self,
        k: int = 3,
        vote: str = "majority",
        distance: str = "default",
        **kwargs
    ):
        """
        Initialize KNN classifier.

        Args:
            k: Number of neighbours.
            vote: Voting scheme ("majority" or "weighted").
            distance: Distance metric name.
        """
        super().__init__("knn", **kwargs)
        self.knn_params = KNNParams(k=k, vote=vote, distance=distance)
        self.reference: List[Tuple[str, Label]] = []

    def fit(self, documents: Sequence[Document]) -> "KNNClassifier":
        self.reference = [
            (doc.normalized, doc.label) for doc in documents if doc.is_labeled
        ]
        self._is_fitted = True
        return self

    def predict_one(self, text: str) -> Label:
        return knn_classify(text, self.reference, self.knn_params)

    def neighbors(self, text: str) -> List[Tuple[int, float, Label]]:
        """Nearest reference items for `text`, closest first."""
        return find_neighbors(text, self.reference, self.knn_params)


get_registry("classifiers").register("knn", KNNClassifier)
