"""Z-function and the string algorithms built on it."""

from collections.abc import Sequence
from typing import Any


def z_array(s: Sequence[Any]) -> list[int]:
    """Return the Z-array of ``s``; ``z[0]`` is the length of ``s``."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    left = right = 0  # [left, right) is the rightmost window matching a prefix
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def borders(s: str) -> list[int]:
    """Return the lengths of all proper borders of ``s`` in increasing order."""
    z = z_array(s)
    n = len(s)
    return [n - i for i in range(n - 1, 0, -1) if z[i] == n - i]


def count_occurrences(text: str, pattern: str) -> int:
    """Count the (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    combined: list[Any] = [*pattern, None, *text]
    z = z_array(combined)
    m = len(pattern)
    return sum(1 for value in z[m:] if value == m)


def periods(s: str) -> list[int]:
    """Return every period length of ``s`` in increasing order."""
    z = z_array(s)
    n = len(s)
    return [
        p
        for p in range(1, n + 1)
        if all(z[k] >= min(p, n - k) for k in range(0, n, p))
    ]