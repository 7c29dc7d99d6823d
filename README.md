# drillbook

A collection of classic algorithm exercises. Each is a small, tested Python
function or class. Many exercises come in two versions, usually a brute-force
one and an efficient one, so you can compare the approaches. The package has
no dependencies beyond the standard library.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest, to run the test suite
```

## Modules

### Concurrency: `drillbook.concurrency`

- `BoundedQueue(capacity)`: a thread-safe FIFO that holds at most `capacity` items.
  `put` blocks while the queue is full. `get` blocks while it is empty.
  `try_get` never blocks and raises `queue.Empty` when there is nothing to take.
  `close` wakes every waiting thread.
- `TaskQueue()`: an unbounded thread-safe FIFO of callables with `put`, `get` and `close`.
- `QueueClosed`: raised in two cases. The first is putting into a closed queue.
  The second is getting from a queue that is closed and has no items left.
  Items already queued are still handed out after `close`.
- `ThreadPool(workers)`: starts a fixed number of worker threads.
  `submit(fn, *args, **kwargs)` returns a `concurrent.futures.Future`.
  `shutdown` stops new work, lets queued tasks finish and joins the workers.
  Calling `submit` after shutdown raises `RuntimeError`.
  The pool is also a context manager that shuts down on exit.

### Graphs

- `drillbook.clone_graph`:
  - `Node(val, neighbors)`: nodes compare and hash by identity.
  - `build_graph(adjacency)`: builds a graph from 1-based neighbour lists. Node `i` gets value `i`.
  - `clone_graph(root)`: returns a deep copy of the graph.
  - `graphs_equal(a, b)`: true only when `b` is a separate deep copy of the graph reachable from `a`.
- `drillbook.course_schedule`:
  - `can_finish_bfs` and `can_finish_dfs`: check whether all courses can be finished.
    The BFS version uses Kahn's algorithm and the DFS version detects cycles.
  - `find_order_bfs`: returns a course order, or `[]` when there is a cycle.
  - `find_order_dfs`: returns the reverse DFS post-order and does not detect cycles.
  - Both `find_order_*` functions return `[]` when there are no courses or no prerequisites.
  - `eventual_safe_nodes(graph)`: returns the safe nodes in ascending order.
- `drillbook.trees`:
  - `valid_tree_dfs` and `valid_tree_bfs`: check whether `n` nodes and `edges` form a tree.
  - `minimum_height_trees(n, edges)`: prunes leaves to find the tree's centres.
    It raises `ValueError` when the edges leave nothing to prune.
- `drillbook.bipartite`: `is_bipartite_dfs` and `is_bipartite_bfs` check whether a graph can be two-coloured.
- `drillbook.grids`:
  - `count_islands_dfs` and `count_islands_bfs`: work on grids of `"1"` and `"0"`.
  - `oranges_rotting(grid)`: returns minutes until no fresh orange is left, or `-1`.
    The input grid is not changed.

### Sliding windows

- `drillbook.fixed_windows`:
  - `max_average_prefix` and `max_average_window`: the largest average of `k` consecutive numbers.
  - `max_vowels`: the most vowels in any `k` consecutive characters.
  - All three raise `ValueError` when `k` does not fit the input.
- `drillbook.string_windows`:
  - `find_anagrams(s, p)`: the start of every anagram of `p` in `s`.
  - `check_inclusion(s1, s2)`: whether some permutation of `s1` occurs in `s2`.
  - `longest_unique_substring(s)`: the length of the longest substring with no repeated character.
  - `concatenated_word_windows(s, words)`: checks only windows starting at multiples of the word length.
    It never checks the last such window, the one ending at the end of `s`.
- `drillbook.min_window`: `min_window_brute`, `min_window` and `min_window_ascii` find the shortest
  substring of `s` that contains `t`'s characters with their counts.
  `min_window_ascii` raises `ValueError` for non-ASCII text.
- `drillbook.subarray_windows`:
  - `min_subarray_len_brute` and `min_subarray_len`: the shortest run whose sum reaches a target.
    `min_subarray_len` requires a positive target.
  - `subarrays_with_k_distinct`: counts runs with exactly `k` distinct values.

### Subarrays

- `drillbook.stocks`:
  - `max_profit_two(prices)`: the best profit from at most two transactions.
  - `max_profit_k(prices, k)`: returns the last of `k` chained buy/sell states.
    With `k == 1` this is the best single-transaction profit.
- `drillbook.enumeration`: generators `combinations`, `permutations` (swap order), `subarrays` and `suffixes`.
- `drillbook.counting`:
  - `prefix_sums(nums)`: the running totals of `nums`.
  - `nice_subarrays`: counts runs with exactly `k` odd numbers.
  - `longest_subarray_sum`: the longest run summing to `k`.
  - `subarray_sum_count`: counts runs summing to `k`.
  - Each of the last three has a `_brute` variant.
- `drillbook.kadane`:
  - `max_subarray` and `max_product`: raise `ValueError` on empty input.
    Their brute-force variants never return less than 0 and 1 respectively.
  - Also `max_absolute_sum`, `max_circular_sum` and `longest_positive_product`.
- `drillbook.arrays`:
  - `window_sums(prefix, size)`: window sums from prefix sums.
  - `max_satisfied` and `max_satisfied_brute`: the grumpy bookstore owner exercise.
  - `trap(height)`: trapped rain water.
- `drillbook.three_subarrays`:
  - `Span` is a run of values with inclusive `start`/`end`, and has `overlaps`.
  - `spans(nums)`: lists every run.
  - `max_three_subarrays(nums, k)`: returns the starts of three disjoint `k`-long runs with the largest total.
  - `max_three_sum_brute(nums, k)`: tries three disjoint runs of any length and ignores `k`.

## Examples

```python
from drillbook.grids import count_islands_bfs
from drillbook.string_windows import find_anagrams
from drillbook.concurrency import ThreadPool

count_islands_bfs([list("11110"), list("11010"), list("11000"), list("00000")])  # 1
find_anagrams("cbaebabacd", "abc")  # [0, 6]

with ThreadPool(4) as pool:
    future = pool.submit(pow, 2, 10)
    print(future.result())  # 1024
```

## What it does not do

This is a library of functions only. It installs no command-line program.

## Running the tests

```
pytest
```