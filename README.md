# dsakit

Classic data structures and algorithms in plain Python, with no
third-party dependencies. Every module is a small, self-contained library
to import from your own code.

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

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `median`, `insert_at`, `delete_at`, `binary_search`, `find_positions`, `average`, `number_formats` (returns a `NumberFormats` tuple) |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, and the in-place helpers `heapify` and `partition` |
| `dsakit.graphs` | `bfs`, `dfs`, `build_adjacency`, `dijkstra`, `DisjointSet`, `kruskal_mst`, `prim_mst` |
| `dsakit.stacks` | bounded `Stack` with `StackOverflowError` / `StackUnderflowError`, `precedence`, `infix_to_postfix` |
| `dsakit.queues` | `LinearQueue`, `CircularQueue`, `LinkedQueue` with `QueueFullError` / `QueueEmptyError` |
| `dsakit.bst` | `TreeNode`, `insert`, `delete`, `search`, `find_min`, `inorder` |
| `dsakit.linked_lists` | `Node`, `SinglyLinkedList`, `CircularLinkedList` |
| `dsakit.problems` | `remove_stars`, `search_matrix`, `min_swaps`, `longest_common_prefix`, `count_even_digit_numbers`, `prefix_common_array`, `dedupe_sorted` |

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.graphs import dijkstra
from dsakit.stacks import infix_to_postfix
from dsakit.bst import insert, inorder

merge_sort([6, 2, 8, 5, 3, 7, 4, 1])
# [1, 2, 3, 4, 5, 6, 7, 8]

dijkstra(5, [(0, 1, 4), (0, 2, 8), (1, 4, 6), (2, 3, 2), (3, 4, 10)], 0)
# [0, 4, 8, 10, 10]

infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i")
# 'abcd^e-fgh*+^*+i-'

root = None
for key in (50, 30, 70, 20, 40, 60, 80):
    root = insert(root, key)
list(inorder(root))
# [20, 30, 40, 50, 60, 70, 80]
```

## Behaviour worth knowing

- The sorting functions take any iterable and return a new sorted list;
  `heapify` and `partition` work in place on a list.
- `binary_search` returns the index of the target or `None`;
  `find_positions` returns one-based positions.
- `dijkstra` reports unreachable vertices as `math.inf`; `prim_mst`
  returns `(parent, vertex, weight)` edges and raises `ValueError` for a
  disconnected graph.
- `infix_to_postfix` treats `^` as left-associative and raises
  `ValueError` on an unmatched `)`.
- `SinglyLinkedList` and `CircularLinkedList` use one-based positions for
  `insert` and `delete`.

The bounded containers raise exceptions when they are full or empty, so a
failed operation cannot go unnoticed:

```python
from dsakit.stacks import Stack, StackUnderflowError

stack = Stack(5)
stack.push(10)
stack.pop()        # 10
try:
    stack.pop()
except StackUnderflowError:
    ...
```

`LinearQueue` does not reuse freed slots: once `capacity` items have been
enqueued it stays full until it is drained completely. `CircularQueue`
reuses slots as items leave.

## What it does not do

dsakit is a library only. It has no command-line tool, reads no input
and prints nothing; call its functions from your own code.