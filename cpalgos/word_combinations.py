"""Counting the ways to build a string from a dictionary of words."""

from collections.abc import Iterable, Iterator

MOD = 1_000_000_007


class Trie:
    """A prefix tree of words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._terminal: list[bool] = [False]
        self._size = 0
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = 0
        for ch in word:
            nxt = self._children[node].get(ch)
            if nxt is None:
                nxt = len(self._children)
                self._children[node][ch] = nxt
                self._children.append({})
                self._terminal.append(False)
            node = nxt
        if not self._terminal[node]:
            self._terminal[node] = True
            self._size += 1

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = 0
        for ch in word:
            nxt = self._children[node].get(ch)
            if nxt is None:
                return False
            node = nxt
        return self._terminal[node]

    def __len__(self) -> int:
        return self._size

    def _match_ends(self, text: str, start: int) -> Iterator[int]:
        """Yield each end index ``e`` such that ``text[start:e]`` is a word."""
        node = 0
        for i in range(start, len(text)):
            nxt = self._children[node].get(text[i])
            if nxt is None:
                return
            node = nxt
            if self._terminal[node]:
                yield i + 1


def count_word_combinations(target: str, words: Iterable[str]) -> int:
    """Count the ways to write ``target`` as a concatenation of ``words``, modulo 1e9+7."""
    trie = Trie(words)
    n = len(target)
    ways = [0] * (n + 1)
    ways[n] = 1
    for i in range(n - 1, -1, -1):
        ways[i] = sum(ways[end] for end in trie._match_ends(target, i)) % MOD
    return ways[0]