"""Base clusterer interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..core.types import ClusteringResult


class BaseClusterer(ABC):
    """
    Abstract base class for document clustering.

    Clusterers group normalized texts into flat clusters.
    """

    def __init__(self, name: str, **kwargs):
        self.name = name
        self.params = kwargs

    @abstractmethod
    def cluster(self, texts: Sequence[str]) -> ClusteringResult:
        """
        Cluster normalized texts.

        Args:
            texts: Normalized texts in caller order.

        Returns:
            ClusteringResult with dendrogram and assignments.
        """
        raise NotImplementedError
