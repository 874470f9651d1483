"""Greedy matching of applicants to apartments and balanced array division."""

from collections import deque
from collections.abc import Iterable, Sequence


def match_apartments(
    applicants: Iterable[int], apartments: Iterable[int], max_diff: int
) -> int:
    """Return how many applicants get an apartment within ``max_diff`` of their wish."""
    wanted = deque(sorted((size - max_diff, size + max_diff) for size in applicants))
    sizes = deque(sorted(apartments))
    matched = 0
    while wanted and sizes:
        low, high = wanted[0]
        size = sizes[0]
        if low <= size <= high:
            wanted.popleft()
            sizes.popleft()
            matched += 1
        elif low > size:
            sizes.popleft()
        else:
            wanted.popleft()
    return matched


def can_partition(limit: int, parts: int, values: Iterable[int]) -> bool:
    """Tell whether ``values`` splits into at most ``parts`` runs each summing to at most ``limit``."""
    cuts = 0
    running = 0
    for value in values:
        if running + value > limit:
            cuts += 1
            running = 0
        running += value
    return cuts + 1 <= parts and running <= limit


def min_max_partition(values: Sequence[int], parts: int) -> int:
    """Return the smallest possible largest run sum when splitting ``values`` into ``parts`` runs."""
    if not values:
        raise ValueError("values must not be empty")
    if parts < 1:
        raise ValueError("parts must be at least 1")
    low, high = max(values), sum(values)
    best = high
    while low <= high:
        middle = (low + high) // 2
        if can_partition(middle, parts, values):
            best = middle
            high = middle - 1
        else:
            low = middle + 1
    return best