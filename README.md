# dskit

A compact collection of the classic data structures and algorithms, written
in plain Python with no third-party dependencies. Fixed-capacity containers
refuse to overflow, empty containers refuse to underflow, and out-of-range
positions are rejected. These conditions raise the exceptions in
`dskit.errors`:

- `CapacityError` — an item was added to a full container
- `UnderflowError` (an `IndexError`) — an item was taken from an empty container
- `InvalidPositionError` (an `IndexError`) — a position is out of range

Algorithms return their results (lists, tuples, snapshots of each step)
rather than printing them.

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

| Module | Contents |
| --- | --- |
| `dskit.errors` | `CapacityError`, `UnderflowError`, `InvalidPositionError` |
| `dskit.basics` | `calc_sum`, `find_max`, `has_duplicate`, `sequential_search`, `random_array`, `average`, `add`, `sub`, `addnum`, `multiplication_table` |
| `dskit.matrix` | dense `transpose` / `format_matrix`, sparse `SparseElement`, `transpose_sparse`, `format_sparse` |
| `dskit.polynomial` | dense `Polynomial`, sparse `Term` and `SparsePolynomial`, both with `evaluate`, `+` and `format` |
| `dskit.stack` | `ArrayStack` (fixed capacity), `DynamicArrayStack` (capacity doubles when full), `LinkedStack` |
| `dskit.stack_apps` | `check_matching` (returns a `Matching` value), `eval_postfix`, `precedence`, `infix_to_postfix`, `reverse_string`, `factorial_iter`, `factorial`, `factorial_trace`, `hanoi_tower` (yields moves) |
| `dskit.queues` | `CircularQueue`, `CircularDeque`, `LinkedQueue`, `CircularLinkedQueue`, `LinkedDeque` |
| `dskit.queue_apps` | queue-based `fibonacci`; depth-first maze search with `explore_maze` and `escape_maze` over a grid of strings (`MAZE`, `MAZE_START` give a sample) |
| `dskit.lists` | `ArrayList`, `LinkedList`, `DoublyLinkedList` |
| `dskit.waiting_list` | `Waiting` and `WaitingList`: reserve, find, cancel, delay and service parties |
| `dskit.tree` | `TreeNode`; `preorder`, `inorder`, `postorder`, `levelorder`; `count_nodes`, `count_leaves`, `height`, `mirror`, `node_level` |
| `dskit.bst` | `search_bst`, `insert_bst`, `delete_bst`, `sort_by_bst` |
| `dskit.dictionary` | `Entry`, `EnglishDictionary` and the interactive `main` |
| `dskit.avl` | `insert_avl`, `search_avl`, `calc_height`, `calc_balance`, the four rotations, `format_preorder` |
| `dskit.heap` | `MaxHeap`, comparator-driven `PriorityHeap`, `is_max_heap` |
| `dskit.graph` | `AdjacencyMatrixGraph` and `AdjacencyListGraph`, each with `degree`, `dfs` and `bfs` |
| `dskit.mst` | `DisjointSet`, `kruskal` (returns `EdgeDecision` records) and `prim` |
| `dskit.shortest_path` | `dijkstra` and `floyd`, returning the snapshot of each step |
| `dskit.sorting` | selection, insertion, bubble, merge, quick and radix sort; `insertion_sort_by` with `ascend`, `descend` and the `Point2D` comparators `x_ascend`, `y_descend`, `z_ascend` |
| `dskit.searching` | `sequential_search`, `sequential_search_transpose`, `binary_search`, `binary_search_iter`, `interpolation_search` |
| `dskit.hashing` | `ChainedHashTable` and `LinearProbingHashTable` of integer keys |

Note that `CircularQueue` and the heaps keep one array slot unused: a
`CircularQueue(8)` holds at most 7 items, a `MaxHeap(100)` at most 99.

## A few examples

Stacks:

```python
from dskit.stack import ArrayStack

stack = ArrayStack(100)
for value in (0, 1, 1, 2, 3, 5, 8):
    stack.push(value)

while not stack.is_empty():
    print(stack.pop(), end=" ")    # 8 5 3 2 1 1 0
```

Stack applications:

```python
from dskit.stack_apps import Matching, check_matching, eval_postfix, infix_to_postfix

print(check_matching("{A[(i+1)]=0;}") is Matching.OK)   # True
print(eval_postfix("8 2 / 3- 3 2 * +"))                 # 7.0
print(infix_to_postfix("8 / 2 - 3 + (3 * 2)"))
```

Queues and deques:

```python
from dskit.queues import CircularQueue, LinkedDeque

queue = CircularQueue(8)
for i in range(1, 7):
    queue.enqueue(i)
queue.dequeue()
print(list(queue))                 # [2, 3, 4, 5, 6]

deque = LinkedDeque()
deque.add_front(1)
deque.add_rear(2)
print(deque.get_front(), deque.get_rear())   # 1 2
```

Search trees:

```python
from dskit.bst import sort_by_bst
from dskit.avl import insert_avl, format_preorder

print(sort_by_bst([35, 18, 7, 26, 12, 3, 68, 22, 30, 99]))

root = None
for key in range(1, 10):
    root = insert_avl(root, key)
print(format_preorder(root))
```

Sorting and searching:

```python
from dskit.sorting import merge_sort
from dskit.searching import binary_search

values = [6, 3, 7, 4, 9, 1, 5]
merge_sort(values, 0, len(values) - 1)
print(values)                      # [1, 3, 4, 5, 6, 7, 9]

table = [8, 11, 12, 15, 16, 19, 20, 23, 25, 28, 29, 31, 33, 35, 38, 40]
print(binary_search(table, 28, 0, len(table) - 1))   # 9
```

Hashing:

```python
from dskit.hashing import LinearProbingHashTable

table = LinearProbingHashTable(13)
for key in (45, 27, 88, 9, 71, 60, 46, 38, 24):
    table.insert(key)
print(table.search(46))
print(table.slots())
```

## The dictionary command

The package installs one command, an interactive English dictionary kept in a
binary search tree:

```
dskit-dictionary
```

At the prompt, type one of:

- `i` — insert a word, then its meaning
- `d` — delete a word
- `s` — search for a word and print its meaning
- `p` — print the whole tree as nested `(left word:meaning right)` groups
- `q` — quit (end of input also quits)

The same dictionary can be used from code:

```python
from dskit.dictionary import EnglishDictionary

words = EnglishDictionary()
words.insert("apple", "a round fruit")
words.insert("book", "a set of printed pages")
print(len(words))                  # 2
print(words.search("book").meaning)
print(words.display())
```

`insert` raises `ValueError` for a word already present; `search` and
`delete` raise `KeyError` for a missing word.

## What it does not do

- The dictionary lives only in memory: nothing is saved between runs of
  `dskit-dictionary`.
- `dskit-dictionary` is the only command. The other modules are libraries
  with no command-line front end, and the maze search returns the cells it
  visits rather than animating them on screen.