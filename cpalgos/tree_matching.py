"""Maximum matching in a tree."""

from collections.abc import Iterable

from cpalgos.tree_metrics import _adjacency, _bfs_order


def max_matching(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of pairwise disjoint edges of the tree."""
    adj = _adjacency(n, edges)
    order, parent = _bfs_order(adj, 0)
    free = [0] * n  # best matching below a node that leaves the node unmatched
    best = [0] * n
    for node in reversed(order):
        children = [c for c in adj[node] if c != parent[node]]
        unmatched = sum(best[c] for c in children)
        matched = max(
            (unmatched - best[c] + free[c] + 1 for c in children), default=0
        )
        free[node] = unmatched
        best[node] = max(matched, unmatched)
    return best[0]