"""Binary-search problems over sorted lists, sorted matrices and answer ranges."""

from __future__ import annotations

from typing import Sequence


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of an ascending list rotated at an unknown pivot.

    Raises ``ValueError`` for an empty list, or when no rotation point can be
    found, as happens with repeated values.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    if n == 1 or nums[0] < nums[-1]:
        return nums[0]

    left, right = 0, n - 1
    while left <= right:
        mid = (left + right) // 2
        if mid < n - 1 and nums[mid] > nums[mid + 1]:
            return nums[mid + 1]
        if mid > 0 and nums[mid - 1] > nums[mid]:
            return nums[mid]
        if nums[mid] >= nums[0]:
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError("nums is not a rotated sorted array")


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows, read one after another, are in ascending order."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    left, right = 0, len(matrix) * cols - 1
    while left <= right:
        mid = (left + right) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if target > value:
            left = mid + 1
        else:
            right = mid - 1
    return False


def search_staircase(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are each sorted ascending.

    Walks from the bottom-left corner, moving up or right, in O(rows + cols).
    """
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    row, col = len(matrix) - 1, 0
    while col < cols and row >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            row -= 1
        else:
            col += 1
    return False


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the ascending list ``nums``, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        value = nums[mid]
        if value == target:
            return mid
        if target > value:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest whole eating speed that finishes all ``piles`` within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    left, right = 1, max(piles)
    while left < right:
        speed = (left + right) // 2
        hours = sum(-(-pile // speed) for pile in piles)
        if hours <= h:
            right = speed
        else:
            left = speed + 1
    return right