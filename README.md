# algosuite

A collection of classic algorithms written in plain Python, with no
third-party dependencies. Every function takes ordinary Python sequences
and returns new values; inputs are never modified.

## Modules

### `algosuite.dynamic`

- `longest_common_subsequence(text1, text2)`: the length of the longest
  common subsequence of two strings.
- `max_job_profit(start_times, end_times, profits)`: the best total profit
  from non-overlapping jobs (a job may start when another ends). Raises
  `ValueError` if the three sequences differ in length.
- `min_cut_cost(length, cuts)`: the minimum total cost of cutting a stick at
  every position, where each cut costs the length of the piece being cut.
- `longest_increasing_subsequence(nums)`: the length of the longest strictly
  increasing subsequence.
- `coin_change(coins, amount)`: the fewest coins summing to `amount`, or `-1`
  if that is impossible. Raises `ValueError` for a negative amount or a
  coin that is not positive.
- `can_partition(nums)`: whether the numbers split into two subsets of equal
  sum. Raises `ValueError` for negative numbers.
- `min_path_sum(grid)`: the smallest sum along a path from the top-left to
  the bottom-right cell, moving only down or right. Raises `ValueError` for
  an empty grid.
- `edit_distance(word1, word2)`: the Levenshtein distance between two words.

### `algosuite.backtracking`

- `combination_sum(candidates, target)`: every combination summing to
  `target`, with candidates reusable; raises `ValueError` if a candidate is
  not positive.
- `combination_sum_unique(candidates, target)`: the distinct combinations
  summing to `target`, each candidate used at most once, in sorted order.
- `subsets_with_duplicates(nums)`: all distinct subsets, each sorted.

### `algosuite.grids`

- `rotting_time(grid)`: minutes until no fresh orange is left (cells `0`
  empty, `1` fresh, `2` rotten), or `-1` if some never rot.
- `highest_peak(is_water)`: heights where water cells (`1`) are 0 and
  neighbouring cells differ by at most 1, with the peak as high as possible.
- `count_islands(grid)`: the number of four-connected groups of `"1"` cells.
- `distance_to_zero(mat)`: each cell's distance to the nearest `0` cell.
- `flood_fill(image, row, col, color)`: a recoloured copy of the image;
  raises `IndexError` if the start lies outside the image.

All grid functions raise `ValueError` for an empty grid.

### `algosuite.graphs`

- `ladder_length(begin_word, end_word, word_list)`: the number of words in
  the shortest one-letter-at-a-time transformation, or `0` if none exists.
- `can_finish(num_courses, prerequisites)`: whether the dependency graph has
  no cycle.
- `count_provinces(is_connected)`: the number of connected components of an
  adjacency matrix.
- `is_bipartite(graph)`: whether an adjacency-list graph can be two-coloured.
- `eventual_safe_nodes(graph)`: nodes, ascending, from which every path ends
  at a terminal node.
- `bellman_ford(vertex_count, edges, source)`: shortest distances over
  `(u, v, weight)` edges. Unreachable vertices get `UNREACHABLE`
  (100,000,000). Raises `NegativeCycleError` (a `ValueError`) when a
  negative cycle can be reached, and `IndexError` for a source out of range.

### `algosuite.trees`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `preorder_traversal(root)`: node values in root, left, right order.

## Example

```python
from algosuite.dynamic import coin_change, edit_distance
from algosuite.graphs import NegativeCycleError, bellman_ford
from algosuite.trees import TreeNode, preorder_traversal

edit_distance("horse", "ros")          # 3
coin_change([1, 2, 5], 11)             # 3

try:
    distances = bellman_ford(3, [(0, 1, 4), (1, 2, -1)], 0)   # [0, 4, 3]
except NegativeCycleError:
    distances = None

root = TreeNode(1, right=TreeNode(2, left=TreeNode(3)))
preorder_traversal(root)               # [1, 2, 3]
```

## What it does not do

This is a library only: it has no command-line program, and it does not
read or write files. Call the functions from your own code.

## Running the tests

```
pip install -e .[test]
pytest
```