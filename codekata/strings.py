"""String puzzles: common prefixes, regular expression matching and unique substrings."""

from __future__ import annotations

from itertools import takewhile
from typing import Sequence


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string; empty input gives ''."""
    if not strs:
        return ""
    prefix = strs[0]
    for other in strs[1:]:
        shared = takewhile(lambda pair: pair[0] == pair[1], zip(prefix, other))
        prefix = prefix[: sum(1 for _ in shared)]
    return prefix


def is_match(s: str, p: str) -> bool:
    """Return True if pattern ``p`` matches the whole of ``s``.

    The pattern supports '.' for any character and '*' for zero or more of
    the preceding element.
    """
    if p.startswith("*"):
        raise ValueError("pattern cannot start with '*'")
    width = len(p) + 1
    previous = [False] * width
    previous[0] = True
    for j in range(2, width):
        if p[j - 1] == "*":
            previous[j] = previous[j - 2]

    for char in s:
        row = [False] * width
        for j in range(1, width):
            token = p[j - 1]
            if token == "." or token == char:
                row[j] = previous[j - 1]
            elif token == "*":
                row[j] = row[j - 2] or (previous[j] and p[j - 2] in (char, "."))
        previous = row
    return previous[-1]


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for end, char in enumerate(s):
        if char in last_seen:
            start = max(start, last_seen[char] + 1)
        last_seen[char] = end
        best = max(best, end - start + 1)
    return best