# cpalgos

A library of classic algorithm solutions: string algorithms, range queries,
sorting and searching, and tree problems. Each problem is a plain function
that takes Python values and returns Python values. The reusable data
structures are also available on their own: Fenwick trees, segment trees, a
trie, sliding medians and an ancestor table.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

Strings
- `cpalgos.zfunction`: `z_array`, `borders`, `count_occurrences`, `periods`
- `cpalgos.string_hashing`: `hash_periods`, `hash_count_occurrences`. The
  occurrence count trusts a hash match without comparing characters when the
  text is longer than 1000 characters.
- `cpalgos.word_combinations`: `Trie`, `count_word_combinations`. The count is
  taken modulo 1_000_000_007.

Range queries
- `cpalgos.prefix_sums`: `static_range_sums`, `forest_queries`, `range_xor_queries`
- `cpalgos.fenwick_queries`: `FenwickTree`, `dynamic_range_sums`, `distinct_value_queries`
- `cpalgos.range_min`: `MinSegmentTree`, `static_range_min`, `dynamic_range_min`,
  `brute_force_range_min`
- `cpalgos.range_update`: `RangeAddTree`, `range_update_queries`
- `cpalgos.hotel_queries`: `assign_rooms`
- `cpalgos.prefix_sum_queries`: `prefix_sum_queries`
- `cpalgos.subarray_sum_queries`: `MaxSubarrayTree`, `max_subarray_after_updates`
- `cpalgos.salary_queries`: `RangeCounter`, `compress`, `salary_queries`,
  `brute_force_salary_queries`

Sorting and searching
- `cpalgos.pair_sums`: `two_sum`, `three_sum`, `three_sum_by_pairs`, `four_sum`.
  Each returns a tuple of 1-based positions, or `None` when there is no answer.
- `cpalgos.allocation`: `match_apartments`, `can_partition`, `min_max_partition`
- `cpalgos.collecting_numbers`: `count_rounds`, `rounds_after_swaps`
- `cpalgos.greedy`: `ferris_wheel`, `missing_coin_sum`, `movie_festival`,
  `stick_lengths`, `tasks_and_deadlines`, `towers`, `factory_machines`
- `cpalgos.ordered_sets`: `concert_tickets`, `traffic_lights`, `distinct_numbers`,
  `playlist`, `restaurant_customers`, `room_allocation`
- `cpalgos.josephus`: `removal_order`, `last_removed`
- `cpalgos.subarrays`: `max_subarray_sum`, `count_subarrays_with_sum`,
  `count_divisible_subarrays`, `count_subarrays_with_distinct`, `nearest_smaller_values`
- `cpalgos.nested_ranges`: `nested_ranges_check`, `nested_ranges_count`
- `cpalgos.sliding_median`: `MedianStream`, `sliding_medians`
- `cpalgos.sliding_window_cost`: `SlidingMedianCost`, `sliding_window_costs`

Trees
- `cpalgos.tree_metrics`: `subordinates`, `farthest_distances`, `distance_sums`,
  `find_centroid`
- `cpalgos.tree_matching`: `max_matching`
- `cpalgos.subtree_queries`: `subtree_queries`
- `cpalgos.ancestors`: `AncestorTable`, `company_queries`
- `cpalgos.distinct_colors`: `distinct_colors`
- `cpalgos.path_queries`: `path_queries`

Tree functions take the node count and a list of `(a, b)` edges on nodes
`1..n`, or a list of bosses where `bosses[i]` is the parent of node `i + 2`.
They raise `ValueError` or `IndexError` when the input is not a tree.

## Example

```python
from cpalgos.zfunction import z_array, count_occurrences
from cpalgos.josephus import removal_order

z_array("abaabab")                          # [7, 0, 1, 3, 0, 2, 0]
count_occurrences("saippuakauppias", "pp")  # 2
removal_order(7)                            # [2, 4, 6, 1, 5, 3, 7]
```

Positions in queries follow the usual problem conventions: array positions and
tree nodes are numbered from 1 unless a function's docstring says otherwise.
Invalid positions raise `IndexError`, and unknown query types raise `ValueError`.

## What it does not do

- There is no command-line program. Nothing reads problem input from standard
  input or prints answers; call the functions from Python.
- There are no lowest-common-ancestor queries. The package cannot report the
  common boss of two employees, the distance between two arbitrary nodes, or
  how many given paths pass through each node. `AncestorTable` only jumps a
  fixed number of levels up from one node.