"""Which ranges contain, or are contained in, other ranges."""

from collections.abc import Sequence

from cpalgos.fenwick_queries import FenwickTree


def nested_ranges_check(
    ranges: Sequence[tuple[int, int]],
) -> tuple[list[bool], list[bool]]:
    """Tell for each ``(start, end)`` range whether it contains another, and whether another contains it."""
    items = list(ranges)
    n = len(items)
    order = sorted(range(n), key=lambda i: (items[i][0], -items[i][1]))
    contains = [False] * n
    contained = [False] * n

    max_end = None
    for i in order:
        end = items[i][1]
        if max_end is not None and end <= max_end:
            contained[i] = True
        max_end = end if max_end is None else max(max_end, end)

    min_end = None
    for i in reversed(order):
        end = items[i][1]
        if min_end is not None and end >= min_end:
            contains[i] = True
        min_end = end if min_end is None else min(min_end, end)
    return contains, contained


def nested_ranges_count(
    ranges: Sequence[tuple[int, int]],
) -> tuple[list[int], list[int]]:
    """Count for each ``(start, end)`` range how many others it contains and how many contain it."""
    items = list(ranges)
    n = len(items)
    coordinates = sorted({point for pair in items for point in pair})
    rank = {value: index for index, value in enumerate(coordinates)}

    contains = [0] * n
    tree = FenwickTree(len(coordinates))
    by_end = sorted(range(n), key=lambda i: (items[i][1], -items[i][0]))
    for position, i in enumerate(by_end):
        start_rank = rank[items[i][0]]
        contains[i] = position - tree.prefix_sum(start_rank - 1)
        tree.add(start_rank, 1)

    contained = [0] * n
    tree = FenwickTree(len(coordinates))
    by_start = sorted(range(n), key=lambda i: (items[i][0], -items[i][1]))
    for position, i in enumerate(by_start):
        end_rank = rank[items[i][1]]
        contained[i] = position - tree.prefix_sum(end_rank - 1)
        tree.add(end_rank, 1)
    return contains, contained