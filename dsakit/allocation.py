"""Book allocation: split page counts into contiguous shares minimising the largest share."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache
from itertools import accumulate


def _check(pages: Sequence[int], students: int) -> None:
    if not pages:
        raise ValueError("pages must not be empty")
    if students < 1:
        raise ValueError(f"students must be at least 1, got {students}")


def is_feasible(pages: Sequence[int], students: int, limit: int) -> bool:
    """Tell whether the books fit ``students`` contiguous shares of at most ``limit`` pages each."""
    needed = 1
    share = 0
    for count in pages:
        if share + count <= limit:
            share += count
        else:
            needed += 1
            share = count
    return needed <= students


def allocate_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible largest share, found by binary search over the answer."""
    _check(pages, students)
    if students > len(pages):
        raise ValueError("there are more students than books")
    low, high = max(pages), sum(pages)
    best = high
    while low <= high:
        mid = low + (high - low) // 2
        if is_feasible(pages, students, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def allocate_pages_brute(pages: Sequence[int], students: int) -> int:
    """Smallest possible largest share, found by trying every split point recursively."""
    _check(pages, students)
    prefix = [0, *accumulate(pages)]

    @cache
    def best(count: int, remaining: int) -> int:
        if remaining == 1:
            return prefix[count]
        if count == 1:
            return pages[0]
        return min(
            max(prefix[count] - prefix[split], best(split, remaining - 1))
            for split in range(1, count)
        )

    return best(len(pages), students)