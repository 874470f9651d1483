"""Root-to-node path sums with point value changes."""

from collections.abc import Iterable, Sequence

from cpalgos.distinct_colors import _subtree_ranges
from cpalgos.range_update import RangeAddTree
from cpalgos.tree_metrics import _adjacency

UPDATE = 1
QUERY = 2


def path_queries(
    values: Sequence[int],
    edges: Iterable[tuple[int, int]],
    queries: Iterable[Sequence[int]],
) -> list[int]:
    """Answer ``(1, s, x)`` value changes and ``(2, s)`` root-to-``s`` path sums.

    Nodes are 1-based and the tree is rooted at node 1; ``values[i]`` is the
    value of node ``i + 1``.
    """
    current = list(values)
    n = len(current)
    adj = _adjacency(n, edges)
    _, start, size = _subtree_ranges(adj)
    tree = RangeAddTree([0] * n)
    for node, value in enumerate(current):
        tree.add(start[node], start[node] + size[node], value)

    def check(node: int) -> int:
        if not 1 <= node <= n:
            raise IndexError("node out of range")
        return node - 1

    results = []
    for kind, *args in queries:
        if kind == UPDATE:
            node, value = args
            index = check(node)
            tree.add(start[index], start[index] + size[index], value - current[index])
            current[index] = value
        elif kind == QUERY:
            (node,) = args
            results.append(tree.value_at(start[check(node)]))
        else:
            raise ValueError(f"unknown query type: {kind!r}")
    return results