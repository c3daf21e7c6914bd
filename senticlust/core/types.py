"""Shared data types."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional
import numpy as np

Label = str
ClusterAssignment = List[int]


@dataclass
class Document:
    """
    A short text document.

    `cleaned` defaults to the raw text when no cleaning step was applied.
    Metrics consume `normalized`.
    """
    id: int
    text: str
    cleaned: Optional[str] = None
    label: Optional[Label] = None
    predicted_label: Optional[Label] = None

    def __post_init__(self):
        if self.cleaned is None:
            self.cleaned = self.text

    @property
    def normalized(self) -> str:
        """Cleaned text, or the raw text when cleaning left nothing."""
        return self.cleaned or self.text

    @property
    def is_labeled(self) -> bool:
        return self.label is not None


@dataclass(frozen=True)
class MergeRecord:
    """
    One merge in a dendrogram.

    `left` and `right` index the extended node space: 0..n-1 are documents,
    n + m is the cluster created by the m-th merge.
    """
    left: int
    right: int
    distance: float
    count: int


Dendrogram = List[MergeRecord]


@dataclass
class KNNParams:
    k: int = 3
    vote: str = "majority"
    distance: str = "default"


@dataclass
class ClusteringResult:
    """Output of one clustering run."""
    dendrogram: Dendrogram
    assignments: ClusterAssignment
    distance_matrix: np.ndarray = None
    method: str = "average"
    metric: str = "default"

    @property
    def n_clusters(self) -> int:
        return len(set(self.assignments))

    def dendrogram_rows(self) -> List[Dict[str, Any]]:
        return [asdict(record) for record in self.dendrogram]


@dataclass
class ExperimentResult:
    """Results of a classification and clustering experiment."""
    classification: Dict[str, Any] = field(default_factory=dict)
    clustering: Dict[str, Any] = field(default_factory=dict)
    sanity_checks: Dict[str, bool] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classification": self.classification,
            "clustering": self.clustering,
            "sanity_checks": self.sanity_checks,
            "metadata": self.metadata,
        }
