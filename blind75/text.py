"""String problems."""

from __future__ import annotations

import string
from collections import Counter
from typing import Sequence

_ALNUM = frozenset(string.ascii_lowercase + string.digits)
_LOWER = frozenset(string.ascii_lowercase)


def is_palindrome(s: str) -> bool:
    """True if ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    kept = [ch for ch in s.lower() if ch in _ALNUM]
    return kept == kept[::-1]


def word_break(s: str, word_dict: Sequence[str]) -> bool:
    """True if ``s`` can be split into a sequence of dictionary words."""
    breakable = [False] * len(s) + [True]
    for i in reversed(range(len(s))):
        breakable[i] = any(
            s.startswith(word, i) and breakable[i + len(word)]
            for word in word_dict
            if word
        )
    return breakable[0]


def is_anagram(s: str, t: str) -> bool:
    """True if ``t`` is a rearrangement of ``s``; both must be lowercase ASCII."""
    s_bytes, t_bytes = s.encode(), t.encode()
    if len(s_bytes) != len(t_bytes):
        return False
    if any(ch not in _LOWER for ch in s + t):
        raise ValueError("is_anagram accepts lowercase letters a-z only")
    return Counter(s) == Counter(t)


def is_anagram_counter(s: str, t: str) -> bool:
    """True if ``s`` and ``t`` hold the same characters with the same counts."""
    return Counter(s) == Counter(t)


class Codec:
    """Encodes a list of strings as ``<byte length>|<text>`` records."""

    def encode(self, strs: Sequence[str]) -> str:
        return "".join(f"{len(word.encode())}|{word}" for word in strs)

    def decode(self, data: str) -> list[str]:
        raw = data.encode()
        words: list[str] = []
        pos = 0
        while pos < len(raw):
            bar = raw.find(b"|", pos)
            if bar == -1:
                raise ValueError(f"missing length separator at byte {pos}")
            digits = raw[pos:bar]
            if digits and not digits.isdigit():
                raise ValueError(f"malformed length prefix {digits!r}")
            start = bar + 1
            end = start + (int(digits) if digits else 0)
            if end > len(raw):
                raise ValueError("record runs past the end of the data")
            words.append(raw[start:end].decode())
            pos = end
        return words


def _upper_index(ch: str) -> int:
    if not "A" <= ch <= "Z":
        raise ValueError(f"{ch!r} is not an uppercase letter A-Z")
    return ord(ch) - ord("A")


def character_replacement(s: str, k: int) -> int:
    """Longest run of one letter obtainable by replacing at most ``k`` letters."""
    freq = [0] * 26
    best = left = top_count = 0
    for right, ch in enumerate(s):
        idx = _upper_index(ch)
        freq[idx] += 1
        top_count = max(top_count, freq[idx])
        while right - left + 1 - top_count > k:
            freq[_upper_index(s[left])] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def _count_around(s: str, left: int, right: int) -> int:
    count = 0
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
        count += 1
    return count


def count_substrings(s: str) -> int:
    """Number of palindromic substrings of ``s``."""
    return sum(
        _count_around(s, i, i) + _count_around(s, i, i + 1) for i in range(len(s))
    )


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    if not text1 or not text2:
        return 0
    previous = [0] * (len(text2) + 1)
    for ch1 in text1:
        current = [0]
        for j, ch2 in enumerate(text2, start=1):
            if ch1 == ch2:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def alien_order(words: Sequence[str]) -> str:
    """A letter order consistent with the sorted ``words``, or ``""`` if none exists."""
    if not words:
        raise ValueError("alien_order needs at least one word")
    for word in words:
        if any(ch not in _LOWER for ch in word):
            raise ValueError(f"{word!r} holds letters outside a-z")

    letters = sorted(_LOWER)
    edges: dict[str, set[str]] = {ch: set() for ch in letters}
    seen: set[str] = set()
    for word, following in zip(words, words[1:]):
        seen.update(word)
        for j, c1 in enumerate(word):
            if j >= len(following):
                return ""
            c2 = following[j]
            if c1 == c2:
                continue
            if c1 in edges[c2]:
                return ""
            edges[c1].add(c2)
            break
    seen.update(words[-1])

    in_degree = Counter(target for targets in edges.values() for target in targets)
    queue = [ch for ch in letters if in_degree[ch] == 0 and ch in seen]
    order: list[str] = []
    while queue:
        current = queue.pop(0)
        order.append(current)
        for ch in letters:
            if ch in edges[current]:
                in_degree[ch] -= 1
                if in_degree[ch] == 0 and ch in seen:
                    queue.append(ch)
    if len(order) < len(seen):
        return ""
    return "".join(order)