"""Everyday array problems: extremes, rotations, pair searches and selection."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _require_items(values: Sequence[int], what: str = "values") -> None:
    if not values:
        raise ValueError(f"{what} must not be empty")


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest element."""
    ordered = sorted(values)
    _require_items(ordered)
    return ordered[0], ordered[-1]


def largest(values: Iterable[int]) -> int:
    """Return the largest element."""
    items = list(values)
    _require_items(items)
    return max(items)


def second_largest(values: Iterable[int]) -> int | None:
    """Return the largest element strictly below the maximum, or None if every element is equal."""
    items = list(values)
    _require_items(items)
    top = max(items)
    below = [value for value in items if value != top]
    return max(below) if below else None


def rotate_left_by_one(values: Sequence[int]) -> list[int]:
    """Return a copy with the first element moved to the end."""
    items = list(values)
    return items[1:] + items[:1]


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return a copy rotated ``k`` positions to the right."""
    items = list(values)
    if not items:
        return []
    shift = k % len(items)
    if shift == 0:
        return items
    return items[-shift:] + items[:-shift]


def median_of_two(first: Iterable[int], second: Iterable[int]) -> float:
    """Return the median of the union of two arrays."""
    merged = sorted([*first, *second])
    _require_items(merged, "the combined arrays")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle] + merged[middle - 1]) / 2


def count_good_pairs(values: Iterable[int]) -> int:
    """Count index pairs i < j holding equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(values).values())


def three_sum(values: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct sorted triplet whose elements sum to zero."""
    items = sorted(values)
    size = len(items)
    found: list[tuple[int, int, int]] = []
    for i, anchor in enumerate(items):
        if i and anchor == items[i - 1]:
            continue
        low, high = i + 1, size - 1
        while low < high:
            total = anchor + items[low] + items[high]
            if total < 0:
                low += 1
            elif total > 0:
                high -= 1
            else:
                found.append((anchor, items[low], items[high]))
                low += 1
                high -= 1
                while low < high and items[low] == items[low - 1]:
                    low += 1
                while low < high and items[high] == items[high + 1]:
                    high -= 1
    return found


def n_choose_r(n: int, r: int) -> int:
    """Binomial coefficient computed by the multiplicative formula."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_element(row: int, col: int) -> int:
    """Return the element at a 1-based (row, col) position of Pascal's triangle."""
    if row < 1 or col < 1 or col > row:
        raise ValueError(f"position ({row}, {col}) is outside Pascal's triangle")
    return n_choose_r(row - 1, col - 1)


def two_repeated(values: Iterable[int]) -> tuple[int, int]:
    """Return the two repeated values, the one whose second occurrence comes first leading."""
    items = list(values)
    repeated = sorted(value for value, count in Counter(items).items() if count > 1)
    if len(repeated) != 2:
        raise ValueError("exactly two values must be repeated")
    seen: set[int] = set()
    for value in items:
        if value in seen and value in repeated:
            other = repeated[1] if value == repeated[0] else repeated[0]
            return value, other
        seen.add(value)
    raise AssertionError("unreachable: a repeated value always recurs")


def two_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return (later index, earlier index) of two values adding to ``target``, or None."""
    positions: dict[int, int] = {}
    for index, value in enumerate(values):
        partner = target - value
        if partner in positions:
            return index, positions[partner]
        positions[value] = index
    return None


def is_anagram(first: str, second: str) -> bool:
    """Tell whether two strings hold the same characters with the same counts."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def _kth_check(items: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")


def kth_largest(values: Iterable[int], k: int) -> int:
    """Return the k-th largest element (1-based)."""
    ordered = sorted(values)
    _kth_check(ordered, k)
    return ordered[len(ordered) - k]


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest element (1-based)."""
    ordered = sorted(values)
    _kth_check(ordered, k)
    return ordered[k - 1]


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in a sorted sequence, or None when absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def is_symmetric(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether a matrix equals its transpose; non-square matrices are not symmetric."""
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        return False
    return all(row == list(column) for row, column in zip(rows, zip(*rows)))


def majority_element(values: Iterable[int]) -> int | None:
    """Return the element occurring more than half the time, or None."""
    items = list(values)
    candidate = None
    count = 0
    for value in items:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if items and items.count(candidate) > len(items) // 2:
        return candidate
    return None


def peak_index(values: Sequence[int]) -> int:
    """Return the index of the peak of a mountain array by binary search."""
    _require_items(values)
    start, end = 0, len(values) - 1
    while start < end:
        middle = start + (end - start) // 2
        if values[middle] > values[middle + 1]:
            end = middle
        else:
            start = middle + 1
    return start