"""Counting salaries inside value ranges while salaries change."""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from cpalgos.fenwick_queries import FenwickTree

CHANGE = 1
COUNT = 2


class RangeCounter:
    """Counts held by compressed value index, with inclusive range totals."""

    def __init__(self, size: int, initial_counts: Mapping[int, int] | None = None) -> None:
        self._tree = FenwickTree(size)
        for index, count in (initial_counts or {}).items():
            self._tree.add(index, count)

    def __len__(self) -> int:
        return len(self._tree)

    def update(self, index: int, change: int) -> None:
        """Add ``change`` to the count at ``index``."""
        self._tree.add(index, change)

    def query(self, left: int, right: int) -> int:
        """Return the total count over indices ``left..right`` inclusive.

        An empty range (``left > right``) counts nothing.
        """
        if left > right:
            return 0
        if left < 0 or right >= len(self._tree):
            raise IndexError("range out of bounds")
        return self._tree.prefix_sum(right) - self._tree.prefix_sum(left - 1)


def compress(values: Iterable[int]) -> dict[int, int]:
    """Map each distinct value to its rank among the distinct values."""
    return {value: rank for rank, value in enumerate(sorted(set(values)))}


def salary_queries(
    salaries: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer ``(1, k, x)`` salary changes and ``(2, a, b)`` range counts.

    A change sets the salary of the 1-based employee ``k`` to ``x``. A count
    returns how many salaries lie between ``a`` and ``b`` inclusive, in
    whichever order the bounds are given.
    """
    current = list(salaries)
    requests = [tuple(q) for q in queries]

    archive = list(current)
    for kind, a, b in requests:
        if kind == CHANGE:
            archive.append(b)
        elif kind == COUNT:
            archive.extend((a, b))
        else:
            raise ValueError(f"unknown query type: {kind!r}")

    rank = compress(archive)
    counter = RangeCounter(len(rank), Counter(rank[s] for s in current))
    results = []
    for kind, a, b in requests:
        if kind == COUNT:
            low, high = sorted((rank[a], rank[b]))
            results.append(counter.query(low, high))
        else:
            if not 1 <= a <= len(current):
                raise IndexError("employee out of range")
            counter.update(rank[current[a - 1]], -1)
            counter.update(rank[b], 1)
            current[a - 1] = b
    return results


def brute_force_salary_queries(
    salaries: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer the same queries as :func:`salary_queries` by scanning.

    Count bounds are taken as given, so ``a > b`` counts nothing.
    """
    current = list(salaries)
    results = []
    for kind, a, b in queries:
        if kind == CHANGE:
            if not 1 <= a <= len(current):
                raise IndexError("employee out of range")
            current[a - 1] = b
        elif kind == COUNT:
            results.append(sum(1 for s in current if a <= s <= b))
        else:
            raise ValueError(f"unknown query type: {kind!r}")
    return results