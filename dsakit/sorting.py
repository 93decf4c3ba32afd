"""Comparison and distribution sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order elements."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
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


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[int], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's final index."""
    pivot = items[high]
    boundary = low
    for i in range(low, high):
        if items[i] < pivot:
            items[boundary], items[i] = items[i], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def shell_sort(values: Iterable[int]) -> list[int]:
    """Gapped insertion sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers by counting occurrences over the span from minimum to maximum."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    counts = [0] * (max(items) - low + 1)
    for value in items:
        counts[value - low] += 1
    result: list[int] = []
    for offset, count in enumerate(counts):
        result.extend([low + offset] * count)
    return result


_BUCKET_WIDTH = 10


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Distribute integers into buckets ten values wide, sort each and concatenate."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    buckets: list[list[int]] = [[] for _ in range((high - low + 1) // _BUCKET_WIDTH + 1)]
    for value in items:
        buckets[(value - low) // _BUCKET_WIDTH].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(items)
    exponent = 1
    while largest // exponent > 0:
        digits: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            digits[(value // exponent) % 10].append(value)
        items = [value for bucket in digits for value in bucket]
        exponent *= 10
    return items