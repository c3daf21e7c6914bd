"""Tests for hierarchical clustering and dendrogram cutting."""

import math

import numpy as np
import pytest

from senticlust.core.types import MergeRecord
from senticlust.core.registry import get_registry
from senticlust.distances import pairwise_distances
from senticlust.clustering import (
    HACClusterer,
    hierarchical_clustering,
    form_clusters,
)
from senticlust.clustering.hac import ward_linkage

# d01=1, d02=4, d03=5, d12=2, d13=6, d23=3
FOUR_POINTS = np.array([
    [0.0, 1.0, 4.0, 5.0],
    [1.0, 0.0, 2.0, 6.0],
    [4.0, 2.0, 0.0, 3.0],
    [5.0, 6.0, 3.0, 0.0],
])

TWEETS = ["i love this", "i love this", "i hate this"]


def test_identical_documents_merge_first():
    matrix = pairwise_distances(TWEETS, "default")
    dendrogram = hierarchical_clustering(matrix, "average")

    assert dendrogram == [
        MergeRecord(left=0, right=1, distance=0.0, count=2),
        MergeRecord(left=3, right=2, distance=0.5, count=3),
    ]


def test_average_linkage():
    """Ties in the pair scan go to the first pair in ascending slot order."""
    dendrogram = hierarchical_clustering(FOUR_POINTS, "average")

    assert dendrogram[0] == MergeRecord(0, 1, 1.0, 2)
    # d(01, 2) = 3 ties with d(2, 3) = 3; slot 0 is scanned first
    assert dendrogram[1] == MergeRecord(4, 2, 3.0, 3)
    assert dendrogram[2].left == 5
    assert dendrogram[2].right == 3
    assert dendrogram[2].distance == pytest.approx(14 / 3)
    assert dendrogram[2].count == 4


def test_complete_linkage():
    dendrogram = hierarchical_clustering(FOUR_POINTS, "complete")

    assert dendrogram == [
        MergeRecord(0, 1, 1.0, 2),
        MergeRecord(2, 3, 3.0, 2),
        MergeRecord(4, 5, 6.0, 4),
    ]


def test_ward_linkage():
    dendrogram = hierarchical_clustering(FOUR_POINTS, "ward")

    assert dendrogram[0] == MergeRecord(0, 1, 1.0, 2)
    assert dendrogram[1] == MergeRecord(2, 3, 3.0, 2)
    assert (dendrogram[2].left, dendrogram[2].right, dendrogram[2].count) == (4, 5, 4)
    assert dendrogram[2].distance == pytest.approx(math.sqrt(35.5))


def test_ward_update_clamps_negative_radicand():
    assert ward_linkage(0.0, 0.0, 1.0, 1, 1, 1) == 0.0
    assert ward_linkage(3.0, 4.0, 0.0, 1, 1, 0) == pytest.approx(math.sqrt(12.5))


def test_unknown_method_uses_ward_update():
    assert hierarchical_clustering(FOUR_POINTS, "single") == hierarchical_clustering(FOUR_POINTS, "ward")


def test_input_matrix_not_modified():
    matrix = FOUR_POINTS.copy()
    hierarchical_clustering(matrix, "average")
    np.testing.assert_array_equal(matrix, FOUR_POINTS)


def test_too_few_documents():
    assert hierarchical_clustering(np.zeros((1, 1))) == []
    assert hierarchical_clustering(np.zeros((0, 0))) == []


@pytest.mark.parametrize("method", ["average", "complete", "ward"])
def test_dendrogram_size(method):
    texts = [
        "i love this", "love it so much", "i hate this", "worst day ever",
        "meh", "not sure about this", "best day ever", "so bad",
    ]
    matrix = pairwise_distances(texts, "jaccard")
    dendrogram = hierarchical_clustering(matrix, method)

    assert len(dendrogram) == len(texts) - 1
    assert dendrogram[-1].count == len(texts)
    assert hierarchical_clustering(matrix, method) == dendrogram

    cited = [r.left for r in dendrogram] + [r.right for r in dendrogram]
    assert sorted(cited) == list(range(2 * len(texts) - 2))


def test_average_distances_monotonic():
    texts = ["a b c", "a b d", "x y", "x y z", "q"]
    dendrogram = hierarchical_clustering(pairwise_distances(texts), "average")
    distances = [r.distance for r in dendrogram]
    assert distances == sorted(distances)


def test_form_clusters_leaves():
    """Only documents cited directly by the last k - 1 merges are moved."""
    dendrogram = hierarchical_clustering(FOUR_POINTS, "complete")

    # last merge joins two earlier merges: no document is cited directly
    assert form_clusters(dendrogram, 2, 4) == [0, 1, 2, 3]
    assert form_clusters(dendrogram, 3, 4) == [0, 1, 2, 2]


def test_form_clusters_subtree():
    dendrogram = hierarchical_clustering(FOUR_POINTS, "complete")

    assert form_clusters(dendrogram, 1, 4, mode="subtree") == [0, 0, 0, 0]
    assert form_clusters(dendrogram, 2, 4, mode="subtree") == [0, 0, 1, 1]
    assert form_clusters(dendrogram, 3, 4, mode="subtree") == [0, 0, 1, 2]
    assert form_clusters(dendrogram, 4, 4, mode="subtree") == [0, 1, 2, 3]


def test_form_clusters_scenario():
    dendrogram = hierarchical_clustering(pairwise_distances(TWEETS), "average")

    assert form_clusters(dendrogram, 2, 3) == [0, 1, 2]
    assert form_clusters(dendrogram, 2, 3, mode="subtree") == [0, 0, 1]


@pytest.mark.parametrize("k", [2, 3, 5, 8])
def test_subtree_cut_cluster_count(k):
    texts = ["a b", "a c", "b c", "x y", "x z", "y z", "q", "r"]
    dendrogram = hierarchical_clustering(pairwise_distances(texts), "average")
    assignments = form_clusters(dendrogram, k, len(texts), mode="subtree")

    assert len(assignments) == len(texts)
    assert len(set(assignments)) == k
    assert sorted(set(assignments)) == list(range(k))


def test_form_clusters_dense_first_seen_ids():
    dendrogram = [MergeRecord(2, 3, 0.1, 2), MergeRecord(0, 4, 0.2, 3), MergeRecord(5, 1, 0.3, 4)]
    assignments = form_clusters(dendrogram, 3, 4)
    assert assignments[0] == 0
    assert sorted(set(assignments)) == list(range(len(set(assignments))))


def test_form_clusters_edge_cases():
    assert form_clusters([], 2, 0) == []
    assert form_clusters([], 2, 1) == [0]
    assert form_clusters([], 2, 3) == [0, 1, 2]

    with pytest.raises(ValueError):
        form_clusters([], 2, 3, mode="flat")


def test_hac_clusterer():
    clusterer = get_registry("clusterers").create(
        "hac", method="average", distance="default", n_clusters=2, cut="subtree"
    )
    assert isinstance(clusterer, HACClusterer)

    result = clusterer.cluster(TWEETS)

    assert len(result.dendrogram) == 2
    assert result.assignments == [0, 0, 1]
    assert result.n_clusters == 2
    assert result.distance_matrix.shape == (3, 3)
    assert result.dendrogram_rows()[0] == {"left": 0, "right": 1, "distance": 0.0, "count": 2}


GROUPED = [
    "love love love", "love love", "love it",
    "hate hate hate", "hate hate", "hate it",
    "meh meh", "meh",
]


@pytest.mark.parametrize("k", range(2, len(GROUPED) + 1))
def test_default_clusterer_respects_requested_count(k):
    """The clusterer's default cut yields n assignments using at most k ids."""
    result = HACClusterer(method="average", n_clusters=k).cluster(GROUPED)

    assert len(result.assignments) == len(GROUPED)
    assert result.n_clusters <= k
    assert sorted(set(result.assignments)) == list(range(result.n_clusters))


def test_default_clusterer_recovers_groups():
    result = HACClusterer(method="average", n_clusters=3).cluster(GROUPED)
    assert result.assignments == [0, 0, 0, 1, 1, 1, 2, 2]


def test_leaves_cut_can_exceed_requested_count():
    """Top merges that only join earlier merges move no document."""
    dendrogram = hierarchical_clustering(pairwise_distances(GROUPED), "average")
    assignments = form_clusters(dendrogram, 3, len(GROUPED), mode="leaves")

    assert len(assignments) == len(GROUPED)
    assert len(set(assignments)) > 3
    assert len(set(form_clusters(dendrogram, 3, len(GROUPED), mode="subtree"))) == 3


def test_clusterer_defaults_to_subtree_cut():
    assert HACClusterer().cut == "subtree"
