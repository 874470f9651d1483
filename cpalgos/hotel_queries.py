"""Assigning groups to the first hotel with enough free rooms."""

from collections.abc import Iterable

_NO_ROOMS = float("-inf")


def assign_rooms(rooms: Iterable[int], groups: Iterable[int]) -> list[int]:
    """Place each group in the first hotel with enough free rooms.

    Returns the 1-based hotel number for every group, or 0 when no hotel can
    take it. A hotel's free rooms shrink by the size of each group it takes.
    """
    free = list(rooms)
    n = len(free)
    size = 1
    while size < n:
        size *= 2
    tree: list[float] = [_NO_ROOMS] * (2 * size)
    tree[size : size + n] = free
    for i in range(size - 1, 0, -1):
        tree[i] = max(tree[2 * i], tree[2 * i + 1])

    assignments = []
    for group in groups:
        if tree[1] < group:
            assignments.append(0)
            continue
        node = 1
        while node < size:
            node = 2 * node if tree[2 * node] >= group else 2 * node + 1
        tree[node] -= group
        assignments.append(node - size + 1)
        node //= 2
        while node:
            tree[node] = max(tree[2 * node], tree[2 * node + 1])
            node //= 2
    return assignments