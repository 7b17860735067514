"""String problems: anagrams, subsequences and rotations."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Iterable


def is_anagram(s: str, t: str) -> bool:
    """Return whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_subsequence(s: str, t: str) -> bool:
    """Return whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, keeping input order within groups."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def is_rotation(s: str, goal: str) -> bool:
    """Return whether ``goal`` is ``s`` rotated by some number of places."""
    return len(s) == len(goal) and goal in s + s