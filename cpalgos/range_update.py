"""Range additions with point lookups."""

from collections.abc import Iterable, Sequence

from cpalgos.fenwick_queries import FenwickTree

INCREASE = 1
QUERY = 2


class RangeAddTree:
    """Sequence supporting "add to a range" and "read one value"."""

    def __init__(self, values: Iterable[int]) -> None:
        self._base = list(values)
        self._diff = FenwickTree(len(self._base))

    def __len__(self) -> int:
        return len(self._base)

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to positions ``left`` up to but not including ``right``."""
        size = len(self._base)
        if left < 0 or right > size:
            raise IndexError("range out of bounds")
        if left > right:
            raise ValueError("range start is after its end")
        if left == right:
            return
        self._diff.add(left, delta)
        if right < size:
            self._diff.add(right, -delta)

    def value_at(self, index: int) -> int:
        """Return the current value at ``index`` (0-based)."""
        if not 0 <= index < len(self._base):
            raise IndexError("index out of range")
        return self._base[index] + self._diff.prefix_sum(index)


def range_update_queries(
    values: Iterable[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer ``(1, a, b, u)`` range increases and ``(2, k)`` lookups (1-based)."""
    tree = RangeAddTree(values)
    results = []
    for kind, *args in queries:
        if kind == INCREASE:
            a, b, delta = args
            tree.add(a - 1, b, delta)
        elif kind == QUERY:
            (k,) = args
            results.append(tree.value_at(k - 1))
        else:
            raise ValueError(f"unknown query type: {kind!r}")
    return results