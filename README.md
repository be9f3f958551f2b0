# taskbook

A collection of classic algorithm problems, each solved as an ordinary
Python function or small class. Inputs are Python lists, tuples, strings
and integers; results are returned, never printed. There are no
third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `taskbook.heaps` | `MergeableQueues`, `run_queue_commands`, `total_salary`, `is_min_heap`, `heap_sort`, `running_medians` |
| `taskbook.searching` | `max_min_distance` |
| `taskbook.formula` | `atom_counts`, `format_counts`, `condense_formula` |
| `taskbook.ratios` | `pairwise_ratios`, `pairs_with_kth_ratio` |
| `taskbook.queues` | `run_queue`, `run_stack` |
| `taskbook.sorting` | `anti_quicksort`, `insertion_sort`, `quicksort`, `count_inversions`, `radix_sort`, `covered_length`, `rectangle_area` |
| `taskbook.bst` | `BinarySearchTree`, `run_tree_commands` |
| `taskbook.order_stats` | `OrderStatisticTree`, `run_kth_commands` |
| `taskbook.traversals` | `is_preorder`, `is_inorder`, `is_postorder`, `traversals_consistent` |
| `taskbook.rainwater` | `trapped_water` |
| `taskbook.mst` | `PowerPlan`, `mst_weight`, `euclidean_mst`, `euclidean_mst_cost`, `power_grid` |
| `taskbook.dijkstra` | `matrix_distance`, `shortest_path`, `shortest_distance` |
| `taskbook.bellman_ford` | `Reach`, `longest_path`, `distances_with_cycles`, `arbitrage_possible` |
| `taskbook.eccentricity` | `eccentricities`, `diameter_and_radius` |
| `taskbook.reachability` | `reachable_floors` |
| `taskbook.scc` | `component_labels`, `same_component` |
| `taskbook.twosat` | `Condition`, `parse_condition`, `satisfiable` |
| `taskbook.traversal` | `vertices_at_distance`, `count_components`, `has_cycle`, `classify_hydra`, `topological_labels` |
| `taskbook.basement` | `widest_height_range` |
| `taskbook.grid_path` | `shortest_flight` |

## Conventions

- Vertices in graph functions are numbered from 1; edges are tuples such
  as `(u, v)` or `(u, v, weight)`. Functions that return one value per
  vertex (`component_labels`, `topological_labels`, `distances_with_cycles`)
  return a list indexed from 0.
- Where a target cannot be reached, functions return `None`
  (`matrix_distance`, `shortest_path`, `shortest_distance`,
  `widest_height_range`, `shortest_flight`). The Bellman-Ford functions
  return a `Reach` member instead: `Reach.UNREACHABLE` or
  `Reach.UNBOUNDED`.
- Bad input such as a vertex number out of range raises `ValueError`;
  taking from an empty container in `run_queue` or `run_stack` raises
  `IndexError`.

## Examples

```python
from taskbook.heaps import heap_sort, is_min_heap
from taskbook.sorting import count_inversions
from taskbook.rainwater import trapped_water

heap_sort([3, 1, 2])            # [1, 2, 3]
is_min_heap([1, 2, 3])          # True
count_inversions([2, 3, 1])     # 2
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
```

A binary search tree that answers membership and neighbour queries:

```python
from taskbook.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (5, 3, 8):
    tree.insert(value)

tree.contains(3)       # True
tree.successor(5)      # 8
tree.predecessor(5)    # 3
list(tree.in_order())  # [3, 5, 8]
```

Shortest paths on an undirected weighted graph:

```python
from taskbook.dijkstra import shortest_distance

edges = [(1, 2, 4), (2, 3, 1), (1, 3, 7)]
shortest_distance(3, edges, 1, 3)  # 5
```

## Command runners

A few functions interpret lines of text commands and return what those
commands produce, as a list:

- `taskbook.heaps.run_queue_commands` understands `create`, `merge a b`,
  `insert q x`, `decrease-key q old new` and `extract-min q`; an empty
  queue yields `"*"`.
- `taskbook.queues.run_queue` and `run_stack` take `"+ x"` and `"-"`.
- `taskbook.bst.run_tree_commands` takes `0 x` (insert), `1 x` (delete),
  `2 x` (`"true"`/`"false"`), `3 x` (successor) and `4 x` (predecessor,
  or `"none"`).
- `taskbook.order_stats.run_kth_commands` takes `1 x` (insert),
  `-1 x` (delete) and `0 k` (k-th largest).

## What it does not do

The package has no command-line program: nothing reads standard input
or writes to standard output. Parse your input into Python values (or
pass lines of text to the command runners above) and handle the returned
results yourself.

## Running the tests

Install the `test` extra and run pytest from the project root.