"""Hierarchical Agglomerative Clustering."""

import math
from typing import List, Sequence

import numpy as np

from .base import BaseClusterer
from .extract import form_clusters
from ..core.types import ClusteringResult, Dendrogram, MergeRecord
from ..core.registry import get_registry
from ..distances import pairwise_distances

LINKAGE_METHODS = ("average", "complete", "ward")
FALLBACK_LINKAGE = "ward"


def average_linkage(d_ik, d_jk, d_ij, size_i, size_j, size_k) -> float:
    """Size-weighted mean of the two merged clusters' distances."""
    return (d_ik * size_i + d_jk * size_j) / (size_i + size_j)


def complete_linkage(d_ik, d_jk, d_ij, size_i, size_j, size_k) -> float:
    return max(d_ik, d_jk)


def ward_linkage(d_ik, d_jk, d_ij, size_i, size_j, size_k) -> float:
    """
    Lance-Williams update for Ward linkage.

    Applied to arbitrary dissimilarities the radicand can go negative;
    it is clamped at zero.
    """
    radicand = (
        (size_i + size_k) * d_ik * d_ik
        + (size_j + size_k) * d_jk * d_jk
        - size_k * d_ij * d_ij
    ) / (size_i + size_j + size_k)
    return math.sqrt(max(radicand, 0.0))


get_registry("linkages").register("average", factory=average_linkage)
get_registry("linkages").register("complete", factory=complete_linkage)
get_registry("linkages").register("ward", factory=ward_linkage)


def hierarchical_clustering(
    distance_matrix: np.ndarray,
    method: str = "average"
) -> Dendrogram:
    """
    Build a full dendrogram by repeatedly merging the two closest clusters.

    The working state is a copy of the matrix indexed by slot: a merged
    cluster keeps the slot of its left member and the right slot is retired.
    Pairs are scanned in ascending slot order and the first strict minimum
    wins, so identical input always yields the identical dendrogram.

    Args:
        distance_matrix: Symmetric n x n distances with zero diagonal.
        method: Linkage rule ("average", "complete", "ward"). Unknown names
            use the Ward update.

    Returns:
        n - 1 merge records in chronological order; empty when n < 2.
    """
    update = get_registry("linkages").resolve(method, FALLBACK_LINKAGE)

    distances = np.array(distance_matrix, dtype=float, copy=True)
    n = distances.shape[0] if distances.ndim == 2 else 0

    dendrogram: List[MergeRecord] = []
    if n < 2:
        return dendrogram

    active = list(range(n))
    sizes = [1] * n
    node_ids = list(range(n))

    while len(active) > 1:
        min_dist = float("inf")
        merge_pair = None

        for a in range(len(active)):
            for b in range(a + 1, len(active)):
                i, j = active[a], active[b]
                if distances[i, j] < min_dist:
                    min_dist = distances[i, j]
                    merge_pair = (i, j)

        if merge_pair is None:
            break

        i, j = merge_pair
        dendrogram.append(MergeRecord(
            left=node_ids[i],
            right=node_ids[j],
            distance=float(min_dist),
            count=sizes[i] + sizes[j],
        ))

        active.remove(j)

        for k in active:
            if k == i:
                continue
            new_dist = update(
                distances[i, k], distances[j, k], distances[i, j],
                sizes[i], sizes[j], sizes[k],
            )
            distances[i, k] = new_dist
            distances[k, i] = new_dist

        sizes[i] += sizes[j]
        node_ids[i] = n + len(dendrogram) - 1

    return dendrogram


class HACClusterer(BaseClusterer):
    """
    Hierarchical Agglomerative Clustering over normalized texts.

    Builds the distance matrix with the chosen metric, computes the full
    dendrogram, and cuts it into `n_clusters` flat clusters.
    """

    def __init__(
        self,
        method: str = "average",
        distance: str = "default",
        n_clusters: int = 3,
        cut: str = "subtree",
        **kwargs
    ):
        """
        Initialize HAC clusterer.

        Args:
            method: Linkage method (average, complete, ward).
            distance: Distance metric name.
            n_clusters: Requested number of flat clusters.
            cut: Dendrogram cut mode ("leaves" or "subtree").
        """
        super().__init__("hac", **kwargs)
        self.method = method
        self.distance = distance
        self.n_clusters = n_clusters
        self.cut = cut

    def cluster(self, texts: Sequence[str]) -> ClusteringResult:
        """Cluster texts and cut the dendrogram."""
        distance_matrix = pairwise_distances(texts, self.distance)
        dendrogram = hierarchical_clustering(distance_matrix, self.method)
        assignments = form_clusters(
            dendrogram, self.n_clusters, len(texts), mode=self.cut
        )

        return ClusteringResult(
            dendrogram=dendrogram,
            assignments=assignments,
            distance_matrix=distance_matrix,
            method=self.method,
            metric=self.distance,
        )


get_registry("clusterers").register("hac", HACClusterer)
