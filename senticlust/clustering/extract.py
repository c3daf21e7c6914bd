"""Flat cluster extraction from a dendrogram."""

from typing import Dict, List, Sequence

from ..core.types import ClusterAssignment, MergeRecord

CUT_MODES = ("leaves", "subtree")


def _renumber(assignments: Sequence[int]) -> ClusterAssignment:
    """Map ids onto 0..k'-1 in first-seen order."""
    mapping: Dict[int, int] = {}
    for cluster_id in assignments:
        if cluster_id not in mapping:
            mapping[cluster_id] = len(mapping)
    return [mapping[cluster_id] for cluster_id in assignments]


def _cut_leaves(dendrogram: Sequence[MergeRecord], k: int, n: int) -> List[int]:
    assignments = list(range(n))
    start = len(dendrogram) - (k - 1)

    for position in range(max(start, 0), len(dendrogram)):
        merge = dendrogram[position]
        cluster_id = n + position
        if merge.left < n:
            assignments[merge.left] = cluster_id
        if merge.right < n:
            assignments[merge.right] = cluster_id

    return assignments


def _cut_subtree(dendrogram: Sequence[MergeRecord], k: int, n: int) -> List[int]:
    members: Dict[int, List[int]] = {i: [i] for i in range(n)}
    n_applied = max(len(dendrogram) - (k - 1), 0)

    for position in range(n_applied):
        merge = dendrogram[position]
        members[n + position] = members.pop(merge.left) + members.pop(merge.right)

    assignments = [0] * n
    for node, docs in members.items():
        for doc in docs:
            assignments[doc] = node
    return assignments


def form_clusters(
    dendrogram: Sequence[MergeRecord],
    k: int,
    n: int,
    mode: str = "leaves"
) -> ClusterAssignment:
    """
    Cut a dendrogram into flat clusters.

    In "leaves" mode the last k - 1 merges are undone by moving the
    documents they cite directly onto the merge's own node index. Children
    that are earlier merges are not expanded, so documents absorbed deeper
    in the tree keep their own id and the result can hold more or fewer
    than k clusters.

    In "subtree" mode every merge except the last k - 1 is applied and each
    document takes the id of the subtree containing it, which gives exactly
    k clusters for a complete dendrogram.

    Args:
        dendrogram: Merge records in chronological order.
        k: Requested cluster count, clamped into [1, n].
        n: Number of original documents.
        mode: "leaves" or "subtree".

    Returns:
        Cluster id per document, renumbered densely in first-seen order.
    """
    if mode not in CUT_MODES:
        raise ValueError(f"Unknown cut mode '{mode}'. Available: {list(CUT_MODES)}")

    if n <= 0:
        return []

    k = min(max(k, 1), n)

    if mode == "subtree":
        assignments = _cut_subtree(dendrogram, k, n)
    else:
        assignments = _cut_leaves(dendrogram, k, n)

    return _renumber(assignments)
