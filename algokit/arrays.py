"""Algorithms over integer sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    right = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        right -= value
        if left == right:
            return index
        left += value
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target, lo=first) - 1)


def unique_occurrences(arr: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(arr).values()
    return len(counts) == len(set(counts))


def find_difference(nums1: Iterable[int], nums2: Iterable[int]) -> list[list[int]]:
    """Return the distinct values only in ``nums1`` and those only in ``nums2``."""
    first = dict.fromkeys(nums1)
    second = dict.fromkeys(nums2)
    return [
        [value for value in first if value not in second],
        [value for value in second if value not in first],
    ]