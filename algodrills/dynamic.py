"""Dynamic-programming problems: sequences, robbery and grid paths."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import Sequence


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0`` and ``fib(1) == 1``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n < 1:
        raise ValueError("n must be at least 1")
    current, following = 1, 2
    for _ in range(n - 1):
        current, following = following, current + following
    return current


def rob(nums: Sequence[int]) -> int:
    """Return the largest total from houses where no two chosen ones are adjacent."""
    skipped, best = 0, 0
    for value in nums:
        skipped, best = best, max(best, skipped + value)
    return best


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths across ``grid`` avoiding cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    ways = [0] * len(grid[0])
    ways[0] = 1
    for row in grid:
        for col, cell in enumerate(row):
            if cell == 1:
                ways[col] = 0
            elif col > 0:
                ways[col] += ways[col - 1]
    return ways[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path from top-left to bottom-right."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    above: list[float] = [0] + [math.inf] * (len(grid[0]) - 1)
    for row in grid:
        current: list[float] = []
        left: float = math.inf
        for cell, up in zip(row, above):
            left = cell + min(up, left)
            current.append(left)
        above = current
    return int(above[-1])