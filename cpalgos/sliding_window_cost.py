"""Cost of making every window of a sequence equal to its median."""

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


class SlidingMedianCost:
    """A multiset that reports the total distance of its values to their median.

    The lower half holds the median as its largest element, so for an even
    number of values the lower median is used.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._small: SortedList = SortedList()
        self._big: SortedList = SortedList()
        self._small_sum = 0
        self._big_sum = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._small) + len(self._big)

    def insert(self, value: int) -> None:
        """Add ``value``."""
        if not self._small or value < self._small[-1]:
            self._small.add(value)
            self._small_sum += value
        else:
            self._big.add(value)
            self._big_sum += value
        self._rebalance()

    def remove(self, value: int) -> None:
        """Remove one copy of ``value``; raise ValueError if it is absent."""
        if value in self._small:
            self._small.remove(value)
            self._small_sum -= value
        elif value in self._big:
            self._big.remove(value)
            self._big_sum -= value
        else:
            raise ValueError(f"{value!r} is not in the window")
        self._rebalance()

    def cost(self) -> int:
        """Return the sum of absolute differences between each value and the median."""
        if not self._small:
            raise ValueError("the window is empty")
        median = self._small[-1]
        lower = median * len(self._small) - self._small_sum
        upper = self._big_sum - median * len(self._big)
        return lower + upper

    def _rebalance(self) -> None:
        while len(self._small) > len(self._big) + 1:
            moved = self._small.pop()
            self._small_sum -= moved
            self._big.add(moved)
            self._big_sum += moved
        while len(self._big) > len(self._small):
            moved = self._big.pop(0)
            self._big_sum -= moved
            self._small.add(moved)
            self._small_sum += moved


def sliding_window_costs(values: Sequence[int], k: int) -> list[int]:
    """Return the median cost of every window of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    window = SlidingMedianCost(values[:k])
    costs = [window.cost()]
    for i in range(k, len(values)):
        window.remove(values[i - k])
        window.insert(values[i])
        costs.append(window.cost())
    return costs