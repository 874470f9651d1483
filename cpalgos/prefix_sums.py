"""Range queries answered from precomputed prefix sums."""

from collections.abc import Iterable, Sequence
from itertools import accumulate
from operator import xor

_XOR_MASK = (1 << 31) - 1


def _check_range(first: int, last: int, size: int) -> None:
    if first < 1 or last > size:
        raise IndexError("query range out of bounds")
    if first > last:
        raise ValueError("query range is empty")


def static_range_sums(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the sum of each 1-based inclusive range ``(a, b)`` of ``values``."""
    prefix = [0, *accumulate(values)]
    size = len(prefix) - 1
    results = []
    for a, b in queries:
        _check_range(a, b, size)
        results.append(prefix[b] - prefix[a - 1])
    return results


def forest_queries(
    grid: Sequence[str], queries: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Count the trees (``*``) in each rectangle of ``grid``.

    A query ``(r1, c1, r2, c2)`` names the 1-based inclusive corners of the
    rectangle as row and column pairs.
    """
    rows = list(grid)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")

    prefix = [[0] * (width + 1)]
    for row in rows:
        above = prefix[-1]
        line = [0]
        running = 0
        for column, cell in enumerate(row, start=1):
            running += cell == "*"
            line.append(above[column] + running)
        prefix.append(line)

    results = []
    for r1, c1, r2, c2 in queries:
        _check_range(r1, r2, len(rows))
        _check_range(c1, c2, width)
        results.append(
            prefix[r2][c2]
            - prefix[r1 - 1][c2]
            - prefix[r2][c1 - 1]
            + prefix[r1 - 1][c1 - 1]
        )
    return results


def range_xor_queries(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the XOR of each 1-based inclusive range, over the low 31 bits."""
    prefix = [0, *accumulate(values, xor)]
    size = len(prefix) - 1
    results = []
    for a, b in queries:
        _check_range(a, b, size)
        results.append((prefix[b] ^ prefix[a - 1]) & _XOR_MASK)
    return results