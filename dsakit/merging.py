"""Merging two sorted arrays."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two non-decreasing sequences into one, taking ties from ``first`` first."""
    return list(heapq.merge(first, second))


def _next_gap(gap: int) -> int:
    return 0 if gap <= 1 else (gap + 1) // 2


def merge_by_gap(first: Sequence[int], second: Sequence[int]) -> tuple[list[int], list[int]]:
    """Merge two sorted arrays with the shrinking-gap method.

    Returns the smallest ``len(first)`` values and the remaining values, each sorted,
    without allocating a merged buffer beyond the two arrays.
    """
    combined = [*first, *second]
    gap = _next_gap(len(combined))
    while gap > 0:
        for i in range(len(combined) - gap):
            if combined[i] > combined[i + gap]:
                combined[i], combined[i + gap] = combined[i + gap], combined[i]
        gap = _next_gap(gap)
    split = len(first)
    return combined[:split], combined[split:]