"""Merge sort and quicksort, and a command that sorts random numbers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

MAX_ELEMENTS = 1000
VALUE_LIMIT = 1000


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with ``items`` in ascending order (stable)."""
    seq = list(items)
    if len(seq) <= 1:
        return seq
    mid = (len(seq) + 1) // 2
    return _merge(merge_sort(seq[:mid]), merge_sort(seq[mid:]))


def _merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with ``items`` in ascending order (Hoare partitioning)."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        split = _partition(values, lo, hi)
        pending.append((split + 1, hi))
        pending.append((lo, split))
    return values


def _partition(values: list[T], lo: int, hi: int) -> int:
    pivot = values[lo]
    i, j = lo - 1, hi + 1
    while True:
        i += 1
        while values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]


def main(argv: list[str] | None = None) -> int:
    """Sort a run of random numbers below 1000 and print them."""
    parser = argparse.ArgumentParser(
        prog="algokit-sort", description="Sort random numbers and print them."
    )
    parser.add_argument("--algorithm", choices=("merge", "quick"), default="merge")
    parser.add_argument("--count", type=int, help="number of elements (asked for if omitted)")
    parser.add_argument("--seed", type=int, help="seed for the random numbers")
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        answer = input("Enter the number of elements :  ")
        try:
            count = int(answer)
        except ValueError:
            parser.error(f"not a number of elements: {answer!r}")
    if not 0 <= count <= MAX_ELEMENTS:
        parser.error(f"the number of elements must be between 0 and {MAX_ELEMENTS}")

    rng = random.Random(args.seed)
    values = [rng.randrange(VALUE_LIMIT) for _ in range(count)]
    sort = merge_sort if args.algorithm == "merge" else quick_sort
    print(" ".join(str(value) for value in sort(values)))
    return 0