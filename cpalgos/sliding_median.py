"""Median of a sliding window over a sequence."""

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


class MedianStream:
    """A multiset that reports its lower median.

    The lower half keeps the median as its largest element and is never
    smaller than the upper half.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._small: SortedList = SortedList()
        self._big: SortedList = SortedList()
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._small) + len(self._big)

    def insert(self, value: int) -> None:
        """Add ``value``."""
        if self._small and value >= self._small[-1]:
            self._big.add(value)
        else:
            self._small.add(value)
        self._rebalance()

    def remove(self, value: int) -> None:
        """Remove one copy of ``value``; raise ValueError if it is absent."""
        if value in self._small:
            self._small.remove(value)
        elif value in self._big:
            self._big.remove(value)
        else:
            raise ValueError(f"{value!r} is not in the stream")
        self._rebalance()

    def median(self) -> int:
        """Return the lower median of the values held."""
        if not self._small:
            raise ValueError("the stream is empty")
        return self._small[-1]

    def _rebalance(self) -> None:
        while len(self._big) > len(self._small):
            self._small.add(self._big.pop(0))
        while len(self._small) > len(self._big) + 1:
            self._big.add(self._small.pop())


def sliding_medians(values: Sequence[int], k: int) -> list[int]:
    """Return the lower median of every window of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    window = MedianStream(values[:k])
    medians = [window.median()]
    for j in range(k, len(values)):
        window.insert(values[j])
        window.remove(values[j - k])
        medians.append(window.median())
    return medians