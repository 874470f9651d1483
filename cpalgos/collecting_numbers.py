"""Rounds needed to collect a permutation's numbers in increasing order."""

from collections.abc import Iterable, Sequence


def _positions(values: Sequence[int]) -> list[int]:
    n = len(values)
    if sorted(values) != list(range(1, n + 1)):
        raise ValueError("values must be a permutation of 1..n")
    where = [0] * (n + 1)
    for index, value in enumerate(values):
        where[value] = index
    return where


def count_rounds(values: Sequence[int]) -> int:
    """Return the number of left-to-right passes that collect 1, 2, ..., n in order."""
    where = _positions(values)
    return 1 + sum(1 for v in range(1, len(values)) if where[v + 1] < where[v])


def rounds_after_swaps(
    values: Sequence[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Swap the 1-based positions in each pair and report the rounds after each swap."""
    current = list(values)
    n = len(current)
    where = _positions(current)
    rounds = count_rounds(current)

    def breaks(a: int, b: int) -> int:
        count = 0
        if a == 1 or where[a] < where[a - 1]:
            count += 1
        if b == 1 or where[b] < where[b - 1]:
            count += 1
        if a != n and a + 1 != b and where[a + 1] < where[a]:
            count += 1
        if b != n and b + 1 != a and where[b + 1] < where[b]:
            count += 1
        return count

    results = []
    for first, second in swaps:
        if not (1 <= first <= n and 1 <= second <= n):
            raise IndexError("swap position out of range")
        i, j = first - 1, second - 1
        a, b = current[i], current[j]
        before = breaks(a, b)
        current[i], current[j] = b, a
        where[a], where[b] = j, i
        rounds += breaks(a, b) - before
        results.append(rounds)
    return results