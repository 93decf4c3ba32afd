"""Subarray sums, rain-water trapping and candy distribution."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    items = iter(values)
    try:
        current = total = next(items)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in items:
        current = max(value, current + value)
        total = max(total, current)
    return total


def max_subarray_sum_or_zero(values: Iterable[int]) -> int:
    """Largest contiguous subarray sum, clamped so that it is never below zero."""
    best = 0
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Length of the longest contiguous run summing to ``k``; values must be non-negative."""
    left = 0
    window = 0
    longest = 0
    for right, value in enumerate(values):
        window += value
        while left <= right and window > k:
            window -= values[left]
            left += 1
        if window == k:
            longest = max(longest, right - left + 1)
    return longest


def trap_rain_water(heights: Sequence[int]) -> int:
    """Water trapped by an elevation map, by the two-pointer method."""
    if not heights:
        return 0
    left, right = 0, len(heights) - 1
    left_max, right_max = heights[0], 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def trap_rain_water_prefix(heights: Sequence[int]) -> int:
    """Water trapped by an elevation map, from prefix and suffix maxima."""
    if not heights:
        return 0
    left_max = accumulate(heights, max)
    right_max = reversed(list(accumulate(reversed(heights), max)))
    return sum(min(lm, rm) - h for lm, rm, h in zip(left_max, right_max, heights))


def min_candies(ratings: Sequence[int]) -> int:
    """Fewest candies so each child gets one and higher-rated neighbours get more."""
    if not ratings:
        return 0
    left = [1]
    for previous, current in pairwise(ratings):
        left.append(left[-1] + 1 if current > previous else 1)
    right = [1]
    for current, following in pairwise(reversed(ratings)):
        right.append(right[-1] + 1 if following > current else 1)
    right.reverse()
    return sum(max(a, b) for a, b in zip(left, right))


def _triangle(n: int) -> int:
    return n * (n + 1) // 2


def min_candies_by_slopes(ratings: Sequence[int]) -> int:
    """Same answer as :func:`min_candies`, counting rising and falling slopes in constant space."""
    if len(ratings) <= 1:
        return len(ratings)
    up = down = candies = previous_slope = 0
    for before, after in pairwise(ratings):
        slope = (after > before) - (after < before)
        if (previous_slope < 0 and slope >= 0) or (previous_slope > 0 and slope == 0):
            candies += _triangle(up) + _triangle(down) + max(up, down)
            up = down = 0
        if slope > 0:
            up += 1
        elif slope < 0:
            down += 1
        else:
            candies += 1
        previous_slope = slope
    return candies + _triangle(up) + _triangle(down) + max(up, down) + 1