"""Maximum subarray sum maintained under point assignments."""

from collections.abc import Iterable, Sequence
from typing import NamedTuple

_NEG_INF = float("-inf")


class _Segment(NamedTuple):
    prefix: float
    suffix: float
    total: float
    best: float


_EMPTY = _Segment(_NEG_INF, _NEG_INF, 0, _NEG_INF)


def _leaf(value: int) -> _Segment:
    return _Segment(value, value, value, value)


def _combine(left: _Segment, right: _Segment) -> _Segment:
    return _Segment(
        prefix=max(left.prefix, left.total + right.prefix),
        suffix=max(right.suffix, right.total + left.suffix),
        total=left.total + right.total,
        best=max(left.best, right.best, left.suffix + right.prefix),
    )


class MaxSubarrayTree:
    """Segment tree tracking the largest sum of a non-empty subarray."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._tree = [_EMPTY] * (2 * size)
        self._tree[size : size + self._n] = [_leaf(v) for v in items]
        for i in range(size - 1, 0, -1):
            self._tree[i] = _combine(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index`` (0-based)."""
        if not 0 <= index < self._n:
            raise IndexError("index out of range")
        i = index + self._size
        self._tree[i] = _leaf(value)
        i //= 2
        while i:
            self._tree[i] = _combine(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def best(self) -> int:
        """Return the largest sum of a non-empty subarray."""
        return int(self._tree[1].best)


def max_subarray_after_updates(
    values: Iterable[int], updates: Iterable[tuple[int, int]]
) -> list[int]:
    """Apply each 1-based ``(k, x)`` assignment and report the best subarray sum.

    The empty subarray counts, so a reported sum is never below 0.
    """
    tree = MaxSubarrayTree(values)
    results = []
    for k, x in updates:
        tree.update(k - 1, x)
        results.append(max(tree.best(), 0))
    return results