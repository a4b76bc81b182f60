# practicealgos

Plain-Python solutions to classic algorithm exercises, grouped by topic. The
package uses only the standard library.

## Modules

- `practicealgos.arrays`: `max_profit`, `max_profit_multi`, `move_zeroes`,
  `plus_one`, `two_sum`, `two_sum_sorted`, `max_area`, `majority_element`,
  `pivot_index`, `sorted_squares`, `merge_sorted`, `product_except_self`,
  `trap`, `three_sum`, `pascal_triangle`, `remove_duplicates`,
  `min_operations`, `maximum_unique_subarray`, `longest_consecutive`,
  `max_product_pair`, `number_of_steps`
- `practicealgos.intervals`: `SummaryRanges` (`add_num`, `get_intervals`) and
  `merge_intervals`
- `practicealgos.trees`: `TreeNode`, `build_tree` (level-order values, `None`
  for a missing child), `lowest_common_ancestor`, `right_side_view`,
  `level_order`, `is_sum_tree`, `is_dead_end`, `prune_tree`, `good_nodes`,
  `check_mirror_tree`
- `practicealgos.linked_lists`: `ListNode`, `RandomNode`, `from_values`,
  `get_intersection_node`, `has_cycle`, `copy_random_list`
- `practicealgos.graphs`: `GraphNode`, `find_center`, `valid_path`,
  `find_judge`, `clone_graph`, `min_knight_steps`
- `practicealgos.grids`: `flood_fill`, `num_islands`, `max_area_of_island`,
  `word_exists`, `pacific_atlantic`, `NumMatrix` (`sum_region`),
  `surround_regions`, `is_valid_sudoku`, `maximum_path`
- `practicealgos.heaps`: `KthLargest` (`add`), `last_stone_weight`,
  `k_closest`, `top_k_frequent`
- `practicealgos.strings`: `is_palindrome`, `length_of_longest_substring`,
  `remove_palindrome_sub`, `max_word_length_product`, `character_replacement`,
  `generate_parenthesis`, `check_inclusion`, `eval_rpn`
- `practicealgos.knapsack`: `is_subset_sum`, `can_partition`, `perfect_sum`
  (modulo 10**9 + 7), `min_difference`, `find_target_sum_ways`,
  `count_coin_ways`, `min_coins`, `cut_rod`
- `practicealgos.dp`: `climb_stairs`, `rob`, `rob_circular`,
  `min_cost_climbing_stairs`, `minimum_total`, `min_delete_distance`,
  `longest_common_subsequence`, `longest_common_substring`

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Examples

```python
from practicealgos.arrays import max_profit, two_sum
from practicealgos.intervals import SummaryRanges, merge_intervals
from practicealgos.trees import build_tree, level_order
from practicealgos.dp import longest_common_subsequence

max_profit([7, 1, 5, 3, 6, 4])              # 5
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]
two_sum([1, 2], 10)                         # [-1, -1]

ranges = SummaryRanges()
for value in (1, 3, 7, 2, 6):
    ranges.add_num(value)
ranges.get_intervals()                      # [[1, 3], [6, 7]]

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)                           # [[3], [9, 20], [15, 7]]

longest_common_subsequence("abcde", "ace")  # 3
```

## Conventions

- Some functions change their arguments in place: `move_zeroes`,
  `merge_sorted`, `remove_duplicates`, `flood_fill` (which also returns the
  image), `surround_regions` and `prune_tree`. `word_exists` marks board cells
  while searching and restores them before returning.
- Where an answer may not exist, functions return a sentinel, as their
  docstrings state: `two_sum` gives `[-1, -1]`, `two_sum_sorted` gives `[]`
  (its indices are one-based), and `pivot_index`, `min_operations`,
  `find_judge`, `min_knight_steps` and `min_coins` give `-1`.
- `k_closest` lists the chosen points farthest first; `top_k_frequent` lists
  the chosen values least frequent first.
- Inputs that cannot be handled raise `ValueError`, for example an empty
  price list for `max_profit`, negative values in the knapsack functions, or
  an operator without operands in `eval_rpn`.

## What it does not do

This is a library only. It has no command-line interface, reads no input
files and keeps no state beyond the objects you create.