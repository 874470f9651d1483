"""Whole-tree measurements: subordinates, distances and the centroid."""

from collections import deque
from collections.abc import Iterable, Sequence


def _bfs_order(adj: Sequence[Sequence[int]], root: int) -> tuple[list[int], list[int]]:
    """Return the breadth-first order from ``root`` and each node's parent (-1 for the root)."""
    parent = [-1] * len(adj)
    seen = [False] * len(adj)
    seen[root] = True
    order = [root]
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if not seen[nxt]:
                seen[nxt] = True
                parent[nxt] = node
                order.append(nxt)
                queue.append(nxt)
    return order, parent


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build zero-based adjacency lists for a tree on 1-based nodes ``1..n``."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adj: list[list[int]] = [[] for _ in range(n)]
    count = 0
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError("edge endpoint out of range")
        adj[a - 1].append(b - 1)
        adj[b - 1].append(a - 1)
        count += 1
    if count != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    order, _ = _bfs_order(adj, 0)
    if len(order) != n:
        raise ValueError("the edges do not connect every node")
    return adj


def _distances(adj: Sequence[Sequence[int]], source: int) -> list[int]:
    dist = [-1] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if dist[nxt] < 0:
                dist[nxt] = dist[node] + 1
                queue.append(nxt)
    return dist


def _subtree_sizes(order: Sequence[int], parent: Sequence[int]) -> list[int]:
    size = [1] * len(order)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    return size


def subordinates(bosses: Sequence[int]) -> list[int]:
    """Count the subordinates of every employee.

    ``bosses[i]`` is the 1-based boss of employee ``i + 2``; employee 1 is
    the head of the company.
    """
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n)]
    for employee, boss in enumerate(bosses, start=1):
        if not 1 <= boss <= n:
            raise IndexError("boss out of range")
        children[boss - 1].append(employee)
    order = [0]
    for node in order:
        order.extend(children[node])
    if len(order) != n:
        raise ValueError("the bosses do not form a tree under employee 1")
    counts = [0] * n
    for node in reversed(order):
        counts[node] = sum(counts[child] + 1 for child in children[node])
    return counts


def farthest_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for every node, the distance to the node farthest from it."""
    adj = _adjacency(n, edges)
    from_root = _distances(adj, 0)
    end_a = max(range(n), key=from_root.__getitem__)
    from_a = _distances(adj, end_a)
    end_b = max(range(n), key=from_a.__getitem__)
    from_b = _distances(adj, end_b)
    return [max(x, y) for x, y in zip(from_a, from_b)]


def distance_sums(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for every node, the sum of its distances to all other nodes."""
    adj = _adjacency(n, edges)
    order, parent = _bfs_order(adj, 0)
    size = _subtree_sizes(order, parent)
    below = [0] * n
    for node in reversed(order[1:]):
        below[parent[node]] += below[node] + size[node]
    sums = [0] * n
    sums[0] = below[0]
    for node in order[1:]:
        sums[node] = sums[parent[node]] + n - 2 * size[node]
    return sums


def find_centroid(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return a 1-based node whose removal leaves no part larger than ``n // 2``."""
    adj = _adjacency(n, edges)
    order, parent = _bfs_order(adj, 0)
    size = _subtree_sizes(order, parent)
    current, previous = 0, -1
    while True:
        best, best_size = -1, -1
        for nxt in adj[current]:
            if nxt != previous and size[nxt] > best_size:
                best, best_size = nxt, size[nxt]
        if best_size <= n // 2:
            return current + 1
        previous, current = current, best