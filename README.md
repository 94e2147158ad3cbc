# dsakit

Classic data structures and algorithms in plain Python, with no dependencies
beyond the standard library.

## Installation

```
pip install dsakit
```

## Modules

- `dsakit.arrays`: `two_sum`, `linear_search`, `binary_search`,
  `max_subarray_sum` (Kadane), `largest_subarray_sum_brute`,
  `largest_subarray_sum_prefix`, `subarrays` (a generator),
  `reverse_array` (in place), `create_2d_array`, `apply_tax`.
  The subarray-sum functions never return less than 0. The searches return -1
  when the key is missing. `two_sum` returns `[(-1, -1)]` when no pair adds up
  to the target.
- `dsakit.bits`: `get_ith_bit`, `set_ith_bit`, `clear_ith_bit`,
  `update_ith_bit`, `clear_last_i_bits`, `clear_bits_in_range`,
  `replace_bits`, `count_bits`, `count_bits_hack`, `convert_to_binary`,
  `fast_expo`, `is_odd`, `is_power_of_two`. Every function returns a new
  integer and does not change the one passed in.
- `dsakit.recursion`: `factorial`, `fib`, `power`, `fast_power`,
  `bubble_sort_recursive`, `bubble_sort_stepwise` (both sort in place),
  `first_occurrence`, `last_occurrence`, `is_sorted` (strictly increasing),
  `spell`, `increasing`, `decreasing`. A negative `n` raises `ValueError`.
- `dsakit.backtracking`: `is_safe`, `solve_sudoku` (returns a new grid, or
  `None` when there is no solution), `can_place`, `n_queen_solutions`
  (a generator of 0/1 boards), `count_n_queens`, `first_n_queen`,
  `filter_bits`, `subsets_by_bits`.
- `dsakit.graphs`: `Graph` (`add_edge`, `neighbours`, `format_adj_list`,
  `bfs`, `dfs`), `CityGraph` for named nodes with directed edges by default,
  and `WeightedGraph` (`shortest_distances`, `dijkstra`). Unreachable nodes are
  at distance `math.inf`.
- `dsakit.hashtable.Hashtable`: string keys, chained buckets, growth to
  `2 * size + 1` buckets once the load factor passes 0.7. `search` returns
  `None` for a missing key. `table[key]` raises `KeyError` for one, and
  `table[key] = value` inserts or replaces. `insert` always adds a new entry;
  the newest entry for a key is the one found.
- `dsakit.heap.MinHeap`: `push`, `top`, `pop`, `empty`, `len()`.
- `dsakit.linked_list.LinkedList`: `push_front`, `push_back`, `insert`,
  `search`, `recursive_search`, `pop_front`, iteration and `len()`.
- `dsakit.circular_queue.CircularQueue`: a fixed-capacity ring buffer. Pushing
  onto a full queue and popping an empty one are ignored.
- `dsakit.stacks`: `LinkedStack`, `ListStack`, `QueueStack` (two queues),
  and `insert_at_bottom` and `reverse_stack`, which work on any of them.
- `dsakit.trie.Trie`: `insert` and whole-word `search`.
- `dsakit.vector.Vector`: a dynamic array that doubles its capacity when full.
- `dsakit.ranking`: `find_index`, `sort_fruits_by_price`, `total_marks`,
  `sort_students_by_total`.
- `dsakit.shop`: `Product`, `Item`, `Cart`, `CatalogProduct`, `CATALOG`,
  `choose_product`, `checkout` (returns the change or raises `CheckoutError`),
  and the `main` entry point of the shop command.

Operations on an empty structure raise `IndexError`. The exceptions are the
pops that are documented above as being ignored.

## Examples

```python
from dsakit.arrays import two_sum, max_subarray_sum
from dsakit.graphs import WeightedGraph
from dsakit.hashtable import Hashtable

two_sum([2, 7, 11, 13], 9)                          # [(2, 7)]
max_subarray_sum([-2, 3, 4, -1, 5, -12, 6, 1, 3])   # 11

g = WeightedGraph(5)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 4)
g.add_edge(0, 3, 7)
g.add_edge(3, 2, 2)
g.add_edge(3, 4, 3)
g.dijkstra(0, 4)                                    # 7

prices = Hashtable()
prices["Mango"] = 100
prices["Mango"]                                     # 100
```

## Shopping cart

This command starts an interactive shop that reads from standard input:

```
dsakit-shop
```

At each prompt you enter one of these:

- `a` lists the catalogue. Then type the first letter of a product to add it.
- `v` shows the cart and its total.
- Any other input goes to checkout. Checkout is skipped while the cart is
  empty. Otherwise you are asked for a cash amount. If it covers the total, the
  change is printed and the program exits with status 0.

The program exits with status 1 when the input ends.

## What it does not do

- The cart is kept in memory only. It is neither saved nor restored.
- The catalogue is the fixed `CATALOG` list.
- No product is ever removed from the cart.
- Graph, board and table contents come back as strings or lists for you to
  print. The library itself prints nothing.

## Running the tests

```
pip install dsakit[test]
pytest
```