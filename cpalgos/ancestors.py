"""Jumping up a rooted tree with binary lifting."""

from collections.abc import Iterable, Sequence


class AncestorTable:
    """Ancestor lookups for a tree given by each employee's boss.

    ``bosses[i]`` is the 1-based parent of node ``i + 2``; node 1 is the root.
    """

    def __init__(self, bosses: Sequence[int]) -> None:
        self._n = len(bosses) + 1
        parent = [0, 0]
        for boss in bosses:
            if not 1 <= boss <= self._n:
                raise IndexError("boss out of range")
            parent.append(boss)
        self._up = [parent]
        for _ in range(1, max(1, self._n.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[previous[v]] for v in range(self._n + 1)])

    def __len__(self) -> int:
        return self._n

    def jump(self, node: int, steps: int) -> int | None:
        """Return the ancestor ``steps`` levels above ``node``, or None past the root."""
        if not 1 <= node <= self._n:
            raise IndexError("node out of range")
        if steps < 0:
            raise ValueError("steps must not be negative")
        if steps >> len(self._up):
            return None
        for power, table in enumerate(self._up):
            if steps >> power & 1:
                node = table[node]
        return node or None


def company_queries(
    bosses: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer ``(x, k)``: the boss ``k`` levels above employee ``x``, or -1."""
    table = AncestorTable(bosses)
    results = []
    for node, steps in queries:
        ancestor = table.jump(node, steps)
        results.append(-1 if ancestor is None else ancestor)
    return results