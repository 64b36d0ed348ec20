"""String algorithms."""

from __future__ import annotations

from collections import Counter


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether one word can become the other by swapping positions and
    exchanging all occurrences of two letters."""
    if len(word1) != len(word2):
        return False
    freq1 = Counter(word1)
    freq2 = Counter(word2)
    if freq1.keys() != freq2.keys():
        return False
    return sorted(freq1.values()) == sorted(freq2.values())


def remove_stars(s: str) -> str:
    """Remove each ``*`` together with the closest kept character to its left."""
    kept: list[str] = []
    for char in s:
        if char != "*":
            kept.append(char)
        elif kept:
            kept.pop()
        else:
            raise ValueError("a star has no character to its left to remove")
    return "".join(kept)