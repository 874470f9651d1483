"""Subtree sums with point value changes."""

from collections.abc import Iterable, Sequence

from cpalgos.fenwick_queries import FenwickTree
from cpalgos.tree_metrics import _adjacency

CHANGE_VALUE = 1
QUERY_SUBTREE = 2


def subtree_queries(
    values: Sequence[int],
    edges: Iterable[tuple[int, int]],
    queries: Iterable[Sequence[int]],
) -> list[int]:
    """Answer ``(1, s, x)`` value changes and ``(2, s)`` subtree sums.

    Nodes are 1-based and the tree is rooted at node 1; ``values[i]`` is the
    value of node ``i + 1``.
    """
    current = list(values)
    n = len(current)
    adj = _adjacency(n, edges)

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

    tree = FenwickTree(n)
    for node, value in enumerate(current):
        tree.add(start[node], value)

    def check(node: int) -> int:
        if not 1 <= node <= n:
            raise IndexError("node out of range")
        return node - 1

    results = []
    for kind, *args in queries:
        if kind == CHANGE_VALUE:
            node, value = args
            index = check(node)
            tree.add(start[index], value - current[index])
            current[index] = value
        elif kind == QUERY_SUBTREE:
            (node,) = args
            index = check(node)
            first, last = start[index], start[index] + size[index] - 1
            results.append(tree.prefix_sum(last) - tree.prefix_sum(first - 1))
        else:
            raise ValueError(f"unknown query type: {kind!r}")
    return results