"""Fenwick tree and the range queries answered with it."""

from collections import defaultdict
from collections.abc import Iterable, Sequence

UPDATE = 1
QUERY = 2


class FenwickTree:
    """Binary indexed tree over zero-based positions holding integer sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._tree = [0] * size

    def __len__(self) -> int:
        return len(self._tree)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        if not 0 <= index < len(self._tree):
            raise IndexError("index out of range")
        i = index + 1
        while i <= len(self._tree):
            self._tree[i - 1] += delta
            i += i & -i

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions ``0..index`` inclusive; ``-1`` gives 0."""
        if not -1 <= index < len(self._tree):
            raise IndexError("index out of range")
        total = 0
        i = index + 1
        while i > 0:
            total += self._tree[i - 1]
            i -= i & -i
        return total


def dynamic_range_sums(
    values: Iterable[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer ``(1, k, u)`` updates and ``(2, a, b)`` sum queries (1-based, inclusive)."""
    current = list(values)
    tree = FenwickTree(len(current))
    for i, value in enumerate(current):
        tree.add(i, value)
    results = []
    for kind, a, b in queries:
        if kind == UPDATE:
            tree.add(a - 1, b - current[a - 1])
            current[a - 1] = b
        elif kind == QUERY:
            results.append(tree.prefix_sum(b - 1) - tree.prefix_sum(a - 2))
        else:
            raise ValueError(f"unknown query type: {kind!r}")
    return results


def distinct_value_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Count distinct values in each 1-based inclusive range ``(a, b)``."""
    n = len(values)
    by_start: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    query_count = 0
    for query_index, (a, b) in enumerate(queries):
        if a < 1 or a > n or b > n:
            raise IndexError("query range out of bounds")
        by_start[a - 1].append((b - 1, query_index))
        query_count += 1

    answers = [0] * query_count
    tree = FenwickTree(n)
    last_index: dict[int, int] = {}
    for i in range(n - 1, -1, -1):
        value = values[i]
        if value in last_index:
            tree.add(last_index[value], -1)
        last_index[value] = i
        tree.add(i, 1)
        for end, query_index in by_start.get(i, ()):
            answers[query_index] = tree.prefix_sum(end)
    return answers