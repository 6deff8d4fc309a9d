"""Data structure design problems."""

from __future__ import annotations

import heapq


class Trie:
    """Prefix tree of words."""

    def __init__(self) -> None:
        self.is_word = False
        self.children: dict[str, Trie] = {}

    def insert(self, word: str) -> None:
        node = self
        for ch in word:
            node = node.children.setdefault(ch, Trie())
        node.is_word = True

    def _walk(self, text: str) -> Trie | None:
        node = self
        for ch in text:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        return self._walk(prefix) is not None


class WordDictionary:
    """Word store whose searches may use ``.`` to match any one character.

    A search also succeeds when it ends on a node that has no children.
    """

    def __init__(self) -> None:
        self.children: dict[str, WordDictionary] = {}
        self.is_word = False

    def add_word(self, word: str) -> None:
        node = self
        for ch in word:
            node = node.children.setdefault(ch, WordDictionary())
        node.is_word = True

    def search(self, word: str) -> bool:
        node = self
        for i, ch in enumerate(word):
            if ch == ".":
                rest = word[i + 1 :]
                return any([child.search(rest) for child in node.children.values()])
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return not node.children or node.is_word


class MedianFinder:
    """Running median of a stream of integers, kept in two heaps."""

    def __init__(self) -> None:
        self._small: list[int] = []  # negated values, max-heap of the lower half
        self._large: list[int] = []

    def add_num(self, num: int) -> None:
        if self._large and num > self._large[0]:
            heapq.heappush(self._large, num)
        else:
            heapq.heappush(self._small, -num)
        if len(self._small) > len(self._large) + 1:
            heapq.heappush(self._large, -heapq.heappop(self._small))
        if len(self._large) > len(self._small) + 1:
            heapq.heappush(self._small, -heapq.heappop(self._large))

    def find_median(self) -> float:
        if not self._small and not self._large:
            raise ValueError("no numbers have been added")
        if len(self._small) > len(self._large):
            return float(-self._small[0])
        if len(self._large) > len(self._small):
            return float(self._large[0])
        return (-self._small[0] + self._large[0]) / 2