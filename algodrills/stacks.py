"""Monotonic-stack and bracket-matching problems."""

from __future__ import annotations

from itertools import chain
from typing import Sequence

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def is_valid_parentheses(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed by its matching kind in order.

    Any non-opening character seen while nothing is open makes the string
    invalid; other characters are otherwise ignored.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        opener = _CLOSERS.get(ch)
        if opener is None:
            continue
        if stack[-1] != opener:
            return False
        stack.pop()
    return not stack


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first larger value to its right in ``nums2``.

    -1 stands for "none", including values that do not occur in ``nums2``.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in nums2:
        while stack and value > stack[-1]:
            greater[stack.pop()] = value
        stack.append(value)
    greater.update(dict.fromkeys(stack, -1))
    return [greater.get(value, -1) for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Return the next larger value for each position, wrapping around; -1 if none."""
    result = [-1] * len(nums)
    stack: list[int] = []
    for index, value in chain(enumerate(nums), enumerate(nums)):
        while stack and value > nums[stack[-1]]:
            result[stack.pop()] = value
        stack.append(index)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, how many days until a warmer one; 0 if never."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for index, temperature in enumerate(temperatures):
        while stack and temperature > temperatures[stack[-1]]:
            previous = stack.pop()
            result[previous] = index - previous
        stack.append(index)
    return result