"""Counting and optimising over contiguous subarrays."""

from collections import Counter
from collections.abc import Iterable, Sequence


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    current = 0
    for index, value in enumerate(values):
        current = current + value if index and current > 0 else value
        best = current if best is None else max(best, current)
    if best is None:
        raise ValueError("values must not be empty")
    return best


def count_subarrays_with_sum(values: Iterable[int], target: int) -> int:
    """Return how many contiguous subarrays sum to ``target``."""
    seen = Counter({0: 1})
    prefix = 0
    total = 0
    for value in values:
        prefix += value
        total += seen[prefix - target]
        seen[prefix] += 1
    return total


def count_divisible_subarrays(values: Sequence[int]) -> int:
    """Return how many contiguous subarrays have a sum divisible by ``len(values)``."""
    n = len(values)
    seen = Counter({0: 1})
    prefix = 0
    total = 0
    for value in values:
        prefix = (prefix + value) % n
        total += seen[prefix]
        seen[prefix] += 1
    return total


def count_subarrays_with_distinct(values: Sequence[int], k: int) -> int:
    """Return how many contiguous subarrays hold at most ``k`` distinct values."""
    freq: Counter[int] = Counter()
    left = 0
    total = 0
    for right, value in enumerate(values):
        freq[value] += 1
        while len(freq) > k:
            dropped = values[left]
            freq[dropped] -= 1
            if not freq[dropped]:
                del freq[dropped]
            left += 1
        total += right - left + 1
    return total


def nearest_smaller_values(values: Sequence[int]) -> list[int]:
    """For each position, return the 1-based position of the nearest smaller value to its left, or 0."""
    stack: list[int] = []
    result = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return result