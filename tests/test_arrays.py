import math
import random

import pytest

from algodrills.arrays import (
    count_good_pairs,
    interchangeable_rectangles,
    majority_element,
    majority_elements,
    max_profit,
    max_subarray,
    missing_number,
    move_zeroes,
    rotate,
    single_number,
    sort_colors,
    trap,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-5, 8, 1, -2], -7)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([1, 2, 4], 100) == []


def test_max_profit_ascending():
    prices = [1, 3, 4, 8, 10]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_descending_is_zero():
    assert max_profit([9, 7, 5, 2]) == 0


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


def test_single_number():
    unique = 42
    nums = [5, 5, -3, -3, 17, 17, unique]
    random.Random(1).shuffle(nums)
    assert single_number(nums) == unique


def test_count_good_pairs_distinct():
    assert count_good_pairs([1, 2, 3, 4]) == 0


@pytest.mark.parametrize("k", [1, 2, 5, 9])
def test_count_good_pairs_all_equal(k):
    assert count_good_pairs([7] * k) == math.comb(k, 2)


def test_count_good_pairs_new_value_adds_nothing():
    nums = [1, 2, 3, 1, 1, 3]
    assert count_good_pairs(nums + [99]) == count_good_pairs(nums)


def test_majority_element():
    assert majority_element([3, 2, 3]) == 3
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


def test_majority_elements_single():
    assert majority_elements([3, 2, 3]) == [3]


def test_majority_elements_two():
    assert sorted(majority_elements([1, 2])) == [1, 2]


def test_majority_elements_none():
    assert majority_elements([1, 2, 3]) == []


def test_majority_elements_threshold_invariant():
    nums = [1, 1, 1, 3, 3, 2, 2, 2]
    result = majority_elements(nums)
    assert sorted(result) == [1, 2]
    assert all(nums.count(v) > len(nums) // 3 for v in result)


@pytest.mark.parametrize("k", [0, 1, 3, 7, 10])
def test_rotate_position_invariant(k):
    original = list(range(7))
    nums = list(original)
    rotate(nums, k)
    n = len(original)
    assert all(nums[(i + k) % n] == original[i] for i in range(n))


def test_rotate_round_trip():
    original = [4, 8, 15, 16, 23, 42]
    nums = list(original)
    rotate(nums, 2)
    rotate(nums, len(nums) - 2)
    assert nums == original


def test_interchangeable_rectangles_same_ratio():
    rects = [[4, 8], [3, 6], [10, 20], [15, 30]]
    assert interchangeable_rectangles(rects) == math.comb(len(rects), 2)


def test_interchangeable_rectangles_distinct():
    assert interchangeable_rectangles([[4, 5], [7, 8]]) == 0


def test_interchangeable_rectangles_zero_height():
    with pytest.raises(ZeroDivisionError):
        interchangeable_rectangles([[1, 0]])


@pytest.mark.parametrize("missing", [0, 3, 9])
def test_missing_number(missing):
    nums = [v for v in range(10) if v != missing]
    random.Random(missing).shuffle(nums)
    assert missing_number(nums) == missing


def test_move_zeroes_preserves_order():
    original = [0, 1, 0, 3, 12, 0, -4]
    nums = list(original)
    move_zeroes(nums)
    nonzero = [v for v in original if v != 0]
    assert nums[: len(nonzero)] == nonzero
    assert nums[len(nonzero):] == [0] * original.count(0)


def test_trap_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_monotone_holds_nothing():
    assert trap([1, 2, 3, 4, 5]) == 0
    assert trap([]) == 0


def test_trap_mirror_symmetry():
    heights = [4, 2, 0, 3, 2, 5, 1, 3]
    assert trap(heights) == trap(heights[::-1])


def test_max_subarray_all_positive():
    nums = [3, 1, 4, 1, 5]
    assert max_subarray(nums) == sum(nums)


def test_max_subarray_all_negative():
    nums = [-8, -3, -6, -2, -5]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


@pytest.mark.parametrize(
    "nums", [[2, 0, 2, 1, 1, 0], [2, 0, 1], [0], [2, 2, 1, 0, 0, 1, 2, 0]]
)
def test_sort_colors(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected