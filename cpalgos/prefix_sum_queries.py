"""Maximum prefix sum of a subarray under point assignments."""

from collections.abc import Iterable, Sequence
from typing import NamedTuple

UPDATE = 1
QUERY = 2


class _Segment(NamedTuple):
    total: float
    best_prefix: float


_EMPTY = _Segment(0, float("-inf"))


def _combine(left: _Segment, right: _Segment) -> _Segment:
    return _Segment(
        left.total + right.total,
        max(left.best_prefix, left.total + right.best_prefix),
    )


class _PrefixTree:
    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._tree = [_EMPTY] * (2 * size)
        self._tree[size : size + self._n] = [_Segment(v, v) for v in values]
        for i in range(size - 1, 0, -1):
            self._tree[i] = _combine(self._tree[2 * i], self._tree[2 * i + 1])

    def assign(self, index: int, value: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError("index out of range")
        i = index + self._size
        self._tree[i] = _Segment(value, value)
        i //= 2
        while i:
            self._tree[i] = _combine(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def best_prefix(self, left: int, right: int) -> float:
        if left < 0 or right > self._n:
            raise IndexError("range out of bounds")
        if left >= right:
            raise ValueError("range is empty")
        lo, hi = left + self._size, right + self._size
        head, tail = _EMPTY, _EMPTY
        while lo < hi:
            if lo & 1:
                head = _combine(head, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                tail = _combine(self._tree[hi], tail)
            lo //= 2
            hi //= 2
        return _combine(head, tail).best_prefix


def prefix_sum_queries(
    values: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer ``(1, k, u)`` assignments and ``(2, a, b)`` queries (1-based).

    A query returns the largest sum of ``values[a-1:i]`` over ``a <= i <= b``,
    or 0 when every such sum is negative.
    """
    if not values:
        raise ValueError("values must not be empty")
    tree = _PrefixTree(values)
    results = []
    for kind, a, b in queries:
        if kind == UPDATE:
            tree.assign(a - 1, b)
        elif kind == QUERY:
            results.append(int(max(tree.best_prefix(a - 1, b), 0)))
        else:
            raise ValueError(f"unknown query type: {kind!r}")
    return results