"""Finding two, three or four positions whose values reach a target sum."""

from collections import defaultdict
from collections.abc import Sequence


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return two 1-based positions, smaller first, whose values sum to ``target``.

    Returns None when no such pair exists.
    """
    order = sorted((value, index) for index, value in enumerate(values))
    left, right = 0, len(order) - 1
    while left < right:
        total = order[left][0] + order[right][0]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            first, second = order[left][1] + 1, order[right][1] + 1
            return min(first, second), max(first, second)
    return None


def three_sum(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Return three 1-based positions whose values sum to ``target``, or None.

    The positions are given in the order of their values.
    """
    if len(values) < 3:
        return None
    order = sorted(enumerate(values), key=lambda pair: pair[1])
    for middle in range(len(order) - 2):
        wanted = target - order[middle][1]
        left, right = middle + 1, len(order) - 1
        while left < right:
            total = order[left][1] + order[right][1]
            if total < wanted:
                left += 1
            elif total > wanted:
                right -= 1
            else:
                return (
                    order[middle][0] + 1,
                    order[left][0] + 1,
                    order[right][0] + 1,
                )
    return None


def three_sum_by_pairs(
    values: Sequence[int], target: int
) -> tuple[int, int, int] | None:
    """Find three positions summing to ``target`` by looking up the third value.

    Meant for non-negative values: a pair already above the target is skipped.
    Returns 1-based positions ``(i, j, k)`` with ``j < i``, or None.
    """
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(values):
        positions[value].append(index)
    for i, first in enumerate(values):
        for j in range(i):
            remaining = target - (first + values[j])
            if remaining < 0 or remaining not in positions:
                continue
            for k in positions[remaining]:
                if k != i and k != j:
                    return i + 1, j + 1, k + 1
    return None


def four_sum(
    values: Sequence[int], target: int
) -> tuple[int, int, int, int] | None:
    """Return four distinct 1-based positions whose values sum to ``target``, or None."""
    pair_sums: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for i, first in enumerate(values):
        for j in range(i):
            pair_sums[first + values[j]].append((i, j))
    for i, first in enumerate(values):
        for j in range(i):
            rest = target - (first + values[j])
            for k, l in pair_sums.get(rest, ()):
                if k not in (i, j) and l not in (i, j):
                    return i + 1, j + 1, k + 1, l + 1
    return None