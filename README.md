# dskit

Classic data structures and algorithms in plain Python, with no dependencies beyond the standard library.

## Contents

- `dskit.bounded_queue`: `BoundedQueue(size)` is a FIFO queue that holds at most `size` items. The size is capped at `MAX_SIZE` (50). `add` raises `QueueFullError` when the queue is full, and `delete` raises `QueueEmptyError` when it is empty.
- `dskit.slist`: `SinglyLinkedList` supports the following:
  - `add_head`, `add_tail` and `add_after`;
  - `delete_head`, `delete_tail` and `delete`;
  - `lookup`, which returns an index or -1;
  - `min`, `max`, in-place `reverse`, `union` and `intersection`;
  - the unique-only inserts `add_head_unique`, `add_tail_unique` and `add_after_unique`, each of which returns whether it added the item.

  Failures raise `EmptyListError` or `ElementNotFoundError`.
- `dskit.stack`: `Stack` is a LIFO stack with `push`, `pop` and `peek`. `pop` and `peek` raise `StackEmptyError` on an empty stack.
- `dskit.adapters`:
  - `RotatingQueueStack` is a stack on one bounded queue.
  - `TwoQueueStack` is a stack on a bounded queue plus an auxiliary queue.
  - `StackQueue` is a queue on a stack, with `add`, `delete` and `search`.
  - `stack_contains(stack, item)` searches a `Stack` and leaves it in its original order.
- `dskit.expressions`: `is_balanced(text)` checks `()`, `[]` and `{}`. `evaluate_postfix(expression)` evaluates space-separated integer postfix expressions with `+ - * /`. Division truncates toward zero. Malformed input raises `PostfixError`.
- `dskit.dlist`: `DoublyLinkedList` supports the following:
  - `add_head` and `add_tail`;
  - `add_before`, which inserts before the last occurrence of a value;
  - `add_after`, which inserts after the first occurrence of a value;
  - `delete_head`, `delete_tail` and `delete_before`;
  - `search`, which returns an index or -1.
- `dskit.bst`: `BinarySearchTree` of distinct values. It provides:
  - `add`, `search`, `delete`, `min` and `max`, each returning a `Node` except `delete`;
  - the traversals `in_order`, `pre_order`, `post_order`, `level_order` and `descending`;
  - `height` and `count_leaves`.

  Errors are `DuplicateKeyError`, `KeyNotFoundError` and `EmptyTreeError`.
- `dskit.hashtable`: `StringHashSet(size)` is a chained hash set of strings, each at most `MAX_KEY_BYTES` (49) bytes in UTF-8. It has `add`, `discard`, `in` and `len`. The module also provides `hash_code`, a signed 32-bit shift-and-add hash, and `bucket_index`.
- `dskit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` and `quick_sort`. Each returns a new sorted list.
- `dskit.heap`: `MaxHeap` with `add`, `pop`, `peek`, `height` and `is_full`. `pop` and `peek` raise `HeapEmptyError` when the heap is empty.
- `dskit.scheduler`: `Scheduler(Policy.FIFO)` or `Scheduler(Policy.SJF)` queues `Process(pid, arrival_time, execution_time)` jobs. It holds at most 50 of them. `result()` returns a `SchedulerResult` with the total waiting time, the total turnaround time and the order in which the processes ran.
- `dskit.graph`: `Graph(size)` is a directed adjacency-list graph. It has `add_edge`, plus `dfs` and `bfs`, which return lists of vertices. `read_graph(stream)` builds a graph from text.

## Installation

```
pip install .
```

## Examples

```python
from dskit.bst import BinarySearchTree
from dskit.expressions import evaluate_postfix, is_balanced
from dskit.scheduler import Policy, Process, Scheduler
from dskit.sorting import merge_sort

tree = BinarySearchTree()
for value in (10, 20, 5, 0, 15, 25):
    tree.add(value)
print(tree.in_order())   # [0, 5, 10, 15, 20, 25]
print(tree.height())     # 3

print(is_balanced("({})"))                        # True
print(evaluate_postfix("6 5 2 3 + 8 * + 3 + *"))  # 288

print(merge_sort([11, 2, 33, 4, 25]))  # [2, 4, 11, 25, 33]

jobs = Scheduler(Policy.FIFO)
jobs.add(Process(100, 0, 5))
jobs.add(Process(101, 1, 3))
print(jobs.result().waiting_time)  # 4
```

## Graph traversal from the command line

```
dskit-graph [input] [--start VERTEX]
```

The command reads whitespace-separated integers from the file `input`. If `input` is omitted or given as `-`, it reads standard input. The first integer is the number of vertices. The integers after it are the neighbours of vertex 0, then those of vertex 1, and so on. Each vertex's list ends with `9999`.

The command prints the depth-first and breadth-first orders from `--start`, which defaults to vertex 0. For example, the input `3  1 2 9999  2 9999  9999` prints:

```
DFS: 0,1,2
BFS: 0,1,2
```

## Running the tests

```
pip install .[test]
pytest
```