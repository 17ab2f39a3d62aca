# algokit

A small library of classic algorithms in plain Python with no third-party
dependencies. It covers integer arrays, binary search, singly linked lists,
grids and dynamic programming, and shortest paths on weighted graphs.

## Installation

```
pip install .
```

With the test dependencies as well:

```
pip install ".[test]"
```

## Modules

- `algokit.arrays`: `two_sum`, `remove_duplicates`, `next_permutation`,
  `max_subarray`, `subsets`, `max_profit`, `single_number`, `majority_element`,
  `majority_elements`, `rotate`, `missing_number`, `move_zeroes`,
  `find_max_consecutive_ones`, `single_non_duplicate`, `subarray_sum` and
  `rearrange_array`.
- `algokit.searching`: `search_rotated`, `search_rotated_with_duplicates`,
  `search_range`, `search_insert`, `search_matrix`, `search_sorted_matrix`,
  `find_min`, `find_peak_element`, `find_peak_grid` and `find_kth_positive`.
- `algokit.answer_search`: functions that binary-search over the range of
  possible answers: `split_array`, `min_eating_speed`, `ship_within_days`,
  `smallest_divisor`, `min_days` and `minimum_time`.
- `algokit.linkedlist`: the `ListNode` class (a dataclass with `val` and
  `next`; nodes compare by identity), the helpers `from_values` and
  `to_values`, and the operations `reverse_list`, `merge_two_lists`,
  `sort_list`, `remove_nth_from_end`, `delete_duplicates`,
  `delete_all_duplicates`, `has_cycle`, `detect_cycle`,
  `get_intersection_node`, `is_palindrome`, `odd_even_list`, `middle_node` and
  `delete_middle`.
- `algokit.grids`: `unique_paths`, `unique_paths_with_obstacles`,
  `min_path_sum`, `climb_stairs`, `set_zeroes`, `solve_surrounded` and
  `rob_circular`.
- `algokit.graphs`: `network_delay_time`, Dijkstra's algorithm over directed
  edges `(source, target, delay)` on nodes `1..n`; it returns -1 when some
  node cannot be reached.

## Examples

```python
from algokit.arrays import two_sum, max_subarray
from algokit.searching import search_range
from algokit.linkedlist import from_values, to_values, sort_list

two_sum([2, 7, 11, 15], 9)                       # (0, 1)
max_subarray([-2, 1, -3, 4, -1, 2, 1])           # 6
search_range([5, 7, 7, 8, 8, 10], 8)             # (3, 4)
to_values(sort_list(from_values([4, 2, 1, 3])))  # [1, 2, 3, 4]
```

Index pairs such as the results of `two_sum`, `search_range` and
`find_peak_grid` are returned as tuples.

## Changing inputs in place

`next_permutation`, `rotate`, `move_zeroes`, `set_zeroes` and
`solve_surrounded` modify the list or grid they are given and return `None`.
`remove_duplicates` writes the distinct values to the front of its list and
returns their count. The linked-list operations relink the nodes they are
given rather than copying them; `is_palindrome` leaves the second half of the
list reversed.

## Errors

Where an answer cannot exist, functions raise `ValueError`: for example
`two_sum` when no pair sums to the target, `remove_nth_from_end` when `n` is
out of range, `delete_middle` on an empty list, `rearrange_array` when the
signs are not balanced, `climb_stairs` for a negative `n`, and functions such
as `max_subarray`, `find_min`, `min_eating_speed` or `min_path_sum` when given
an empty sequence or grid. Other functions report a missing answer with a
sentinel value such as -1, as their docstrings state.

## Running the tests

```
pytest
```