"""Polynomial rolling-hash string algorithms."""

_PERIOD_MOD = 1_000_000_007
_MATCH_MOD = 1_000_000_000_007
_BASE = 26
_EXACT_CHECK_LIMIT = 1000


def _period_value(c: str) -> int:
    return ord(c) - ord("a") + 1


def _match_value(c: str) -> int:
    return ord(c) - ord("a")


def hash_periods(s: str) -> list[int]:
    """Return the period lengths of ``s`` found by comparing prefix hashes."""
    n = len(s)
    prefix = [0]
    for c in s:
        prefix.append((prefix[-1] * _BASE + _period_value(c)) % _PERIOD_MOD)
    whole = prefix[-1]

    known: set[int] = set()
    result = []
    for p in range(1, n + 1):
        if p in known:
            result.append(p)
            continue
        base = prefix[p]
        shift = pow(_BASE, p, _PERIOD_MOD)
        repeated = base
        for copies in range(1, n // p):
            if repeated != prefix[copies * p]:
                break
            repeated = (repeated * shift + base) % _PERIOD_MOD
        else:
            partial = n % p
            candidate = (
                pow(_BASE, partial, _PERIOD_MOD) * repeated + prefix[partial]
            ) % _PERIOD_MOD
            if candidate == whole:
                result.append(p)
                known.update(range(p, n + 1, p))
    return result


def hash_count_occurrences(text: str, pattern: str) -> int:
    """Count occurrences of ``pattern`` in ``text`` with a rolling hash.

    For texts longer than 1000 characters a hash match is trusted without
    comparing the characters.
    """
    n, m = len(text), len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    if m > n:
        return 0

    def window_hash(chars: str) -> int:
        h = 0
        for c in chars:
            h = (h * _BASE + _match_value(c)) % _MATCH_MOD
        return h

    expected = window_hash(pattern)
    current = window_hash(text[:m])
    high = pow(_BASE, m - 1, _MATCH_MOD)
    trust_hash = n > _EXACT_CHECK_LIMIT

    count = 0
    for start in range(n - m + 1):
        if start:
            current = (
                (current - high * _match_value(text[start - 1])) * _BASE
                + _match_value(text[start + m - 1])
            ) % _MATCH_MOD
        if current == expected and (trust_hash or text.startswith(pattern, start)):
            count += 1
    return count