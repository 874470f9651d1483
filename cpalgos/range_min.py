"""Range minimum queries over a point-updatable segment tree."""

from collections.abc import Iterable, Sequence

UPDATE = 1
QUERY = 2
_CEILING = 1_000_000_007


class MinSegmentTree:
    """Segment tree answering minimum queries over half-open ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._tree = items[:1] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = min(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def update(self, position: int, value: int) -> None:
        """Set the value at ``position`` (0-based)."""
        if not 0 <= position < self._n:
            raise IndexError("position out of range")
        i = position + self._n
        self._tree[i] = value
        while i > 1:
            i //= 2
            self._tree[i] = min(self._tree[2 * i], self._tree[2 * i + 1])

    def query(self, left: int, right: int) -> int:
        """Return the minimum of positions ``left`` up to but not including ``right``."""
        if left < 0 or right > self._n:
            raise IndexError("range out of bounds")
        if left >= right:
            raise ValueError("range is empty")
        lo, hi = left + self._n, right + self._n
        best = self._tree[lo]
        while lo < hi:
            if lo & 1:
                best = min(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = min(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best


def static_range_min(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the minimum of each 1-based inclusive range ``(a, b)``."""
    tree = MinSegmentTree(values)
    return [tree.query(a - 1, b) for a, b in queries]


def dynamic_range_min(
    values: Iterable[int], requests: Iterable[Sequence[int]]
) -> list[int]:
    """Answer ``(1, k, u)`` assignments and ``(2, a, b)`` minimum queries (1-based)."""
    tree = MinSegmentTree(values)
    results = []
    for kind, a, b in requests:
        if kind == UPDATE:
            tree.update(a - 1, b)
        elif kind == QUERY:
            results.append(tree.query(a - 1, b))
        else:
            raise ValueError(f"unknown request type: {kind!r}")
    return results


def brute_force_range_min(
    values: Iterable[int], requests: Iterable[Sequence[int]]
) -> list[int]:
    """Answer the same requests as :func:`dynamic_range_min` by direct scanning.

    Minimums are capped at 1_000_000_007, which an empty range also yields.
    """
    current = list(values)
    results = []
    for kind, a, b in requests:
        if kind == UPDATE:
            if not 1 <= a <= len(current):
                raise IndexError("position out of range")
            current[a - 1] = b
        elif kind == QUERY:
            results.append(min(_CEILING, *current[a - 1 : b]))
        else:
            raise ValueError(f"unknown request type: {kind!r}")
    return results