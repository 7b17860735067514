"""Array problems: hashing, voting, in-place rearrangement and scans."""

from __future__ import annotations

from collections import defaultdict
from functools import reduce
from operator import xor
from typing import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``[i, j]`` (``i < j``) of two values summing to ``target``.

    An empty list is returned when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    cheapest = prices[0]
    for price in prices[1:]:
        cheapest = min(cheapest, price)
        best = max(best, price - cheapest)
    return best


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def count_good_pairs(nums: Sequence[int]) -> int:
    """Count index pairs ``i < j`` with ``nums[i] == nums[j]``."""
    seen: defaultdict[int, int] = defaultdict(int)
    pairs = 0
    for value in nums:
        pairs += seen[value]
        seen[value] += 1
    return pairs


def majority_element(nums: Sequence[int]) -> int:
    """Return the element occurring more than ``len(nums) // 2`` times (Boyer-Moore vote)."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    votes = 1
    for value in nums[1:]:
        votes += 1 if value == candidate else -1
        if votes == 0:
            candidate = value
            votes = 1
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return every element occurring more than ``len(nums) // 3`` times."""
    first: int | None = None
    second: int | None = None
    first_votes = second_votes = 0
    for value in nums:
        if first is not None and value == first:
            first_votes += 1
        elif second is not None and value == second:
            second_votes += 1
        elif first_votes == 0:
            first, first_votes = value, 1
        elif second_votes == 0:
            second, second_votes = value, 1
        else:
            first_votes -= 1
            second_votes -= 1

    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1

    threshold = len(nums) // 3
    result = []
    if first is not None and first_count > threshold:
        result.append(first)
    if second is not None and second_count > threshold:
        result.append(second)
    return result


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def interchangeable_rectangles(rectangles: Sequence[Sequence[int]]) -> int:
    """Count pairs of rectangles whose width-to-height ratios are equal."""
    seen: defaultdict[float, int] = defaultdict(int)
    pairs = 0
    for width, height in rectangles:
        ratio = width / height
        pairs += seen[ratio]
        seen[ratio] += 1
    return pairs


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[read], nums[write] = nums[write], nums[read]
            write += 1


def trap(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``heights`` holds."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if left_max < heights[left]:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if right_max < heights[right]:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1