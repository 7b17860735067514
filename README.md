# algodrills

Small, dependency-free implementations of well-known algorithm exercises.
Each one is a plain function that takes Python lists, strings or integers
and returns a plain Python value.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `algodrills.arrays` | `two_sum`, `max_profit`, `single_number`, `count_good_pairs`, `majority_element`, `majority_elements`, `rotate`, `interchangeable_rectangles`, `missing_number`, `move_zeroes`, `trap`, `max_subarray`, `sort_colors` |
| `algodrills.numeric` | `water_bottles`, `divide`, `power`, `int_sqrt`, `is_palindrome` |
| `algodrills.textops` | `is_anagram`, `is_subsequence`, `group_anagrams`, `is_rotation` |
| `algodrills.searching` | `find_min`, `search_matrix`, `search_staircase`, `binary_search`, `min_eating_speed` |
| `algodrills.stacks` | `is_valid_parentheses`, `next_greater_element`, `next_greater_elements`, `daily_temperatures` |
| `algodrills.dynamic` | `fib`, `climb_stairs`, `rob`, `unique_paths`, `unique_paths_with_obstacles`, `min_path_sum` |

## Examples

```python
from algodrills.arrays import two_sum, trap
from algodrills.searching import binary_search, min_eating_speed
from algodrills.stacks import daily_temperatures
from algodrills.dynamic import unique_paths

two_sum([2, 7, 11, 15], 9)                          # [0, 1]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])          # 6
binary_search([-1, 0, 3, 5, 9, 12], 9)              # 4
min_eating_speed([3, 6, 7, 11], 8)                  # 4
daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73])  # [1, 1, 4, 2, 1, 1, 0, 0]
unique_paths(3, 7)                                  # 28
```

## Behaviour worth knowing

- `rotate`, `move_zeroes` and `sort_colors` rearrange the list they are given
  in place and return `None`, so work on a copy if the original order matters.
- `two_sum` returns an empty list when no pair exists; `binary_search` returns
  `-1` for a missing target; `next_greater_element`, `next_greater_elements`
  use `-1` for "no larger value".
- `divide` truncates toward zero and returns `2**31 - 1` for
  `divide(-2**31, -1)`; dividing by zero raises `ZeroDivisionError`.
- `ValueError` is raised for inputs that have no answer: an empty list passed
  to `max_profit`, `majority_element`, `max_subarray`, `find_min` or
  `min_eating_speed`; an empty grid passed to `unique_paths_with_obstacles` or
  `min_path_sum`; non-positive sizes for `unique_paths`; a negative `n` for
  `fib`, `n < 1` for `climb_stairs`; a negative `x` for `int_sqrt`;
  `num_exchange < 2` for `water_bottles`; and a list that is not a rotated
  ascending list (for example one with repeats) for `find_min`.

## What it does not do

The package is a library only: it has no command-line interface, and it
reads and writes no files.