"""Number of distinct colours in every subtree."""

from collections.abc import Iterable, Sequence

from cpalgos.fenwick_queries import distinct_value_queries
from cpalgos.tree_metrics import _adjacency


def _subtree_ranges(
    adj: Sequence[Sequence[int]],
) -> tuple[list[int], list[int], list[int]]:
    """Return the preorder from node 0, each node's preorder position and subtree size."""
    n = len(adj)
    parent = [-1] * n
    preorder: list[int] = []
    stack = [0]
    while stack:
        node = stack.pop()
        preorder.append(node)
        for child in reversed(adj[node]):
            if child != parent[node]:
                parent[child] = node
                stack.append(child)
    size = [1] * n
    for node in reversed(preorder[1:]):
        size[parent[node]] += size[node]
    start = [0] * n
    for position, node in enumerate(preorder):
        start[node] = position
    return preorder, start, size


def distinct_colors(
    colors: Sequence[int], edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Count the distinct colours in the subtree of every node, rooted at node 1.

    ``colors[i]`` is the colour of node ``i + 1``.
    """
    n = len(colors)
    adj = _adjacency(n, edges)
    preorder, start, size = _subtree_ranges(adj)
    tour = [colors[node] for node in preorder]
    ranges = [(start[v] + 1, start[v] + size[v]) for v in range(n)]
    return distinct_value_queries(tour, ranges)