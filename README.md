# algokit

A small collection of classic algorithms and data structures in plain Python,
with no dependencies outside the standard library.

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

- `algokit.numbers`: `divisor_sum(n)` (sum of all divisors of `n`),
  `sum_of_divisors(n)` (sum of `divisor_sum(i)` for `i` from 1 to `n`) and
  `reverse_digits(n)` (reverses decimal digits and keeps the sign, so `120`
  becomes `21`).
- `algokit.sorting`: `bubble_sort`, `recursive_bubble_sort`, `insertion_sort`,
  `recursive_insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`.
  Each takes any iterable and returns a new sorted list; the input is left
  unchanged.
- `algokit.search`: `binary_search`, `find_rotation`, `search_rotated`,
  `single_non_duplicate`, `first_occurrence`, `last_occurrence`,
  `first_and_last_position`, `search_insert`, `lower_bound`, `upper_bound`,
  `find_peak_element`. Functions that look up a position return `-1` when
  there is none. `single_non_duplicate` and `find_peak_element` raise
  `ValueError` on an empty sequence.
- `algokit.answers`: binary search over the answer space, with
  `aggressive_cows`, `min_eating_rate`, `median_of_two`, `allocate_books`,
  `kth_element` (1-based `k`, `IndexError` when out of range) and
  `smallest_divisor`. `allocate_books` returns `-1` when there are more
  students than books.
- `algokit.linked_lists`: `ListNode`, `SinglyLinkedList`, `DoublyLinkedList`
  (also iterable backwards with `reversed`) and `CircularLinkedList`, plus
  `is_circular` and `has_cycle` for raw node chains. Positions passed to
  `delete_at` are 1-based and raise `IndexError` when out of range;
  `CircularLinkedList.insert_after` and `delete` raise `ValueError` when the
  value is not found.
- `algokit.binary_tree`: `TreeNode`, `build_tree` from a pre-order listing
  where `-1` (or `None`) marks an empty child, and the traversals
  `level_order` (yields one list per level), `in_order`, `pre_order` and
  `post_order` (generators of values).
- `algokit.bounded_queue`: `BoundedQueue(max_size=16)`, a fixed-capacity FIFO
  queue that raises `QueueFull` and `QueueEmpty`.
- `algokit.bounded_stack`: `BoundedStack(size)`, a fixed-capacity LIFO stack
  that raises `StackOverflow` and `StackUnderflow`.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.search import binary_search
from algokit.binary_tree import build_tree, level_order, in_order

merge_sort([2, 4, 1, 5, 3])           # [1, 2, 3, 4, 5]
binary_search([1, 3, 4, 5, 6, 7], 4)  # 2

root = build_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
list(level_order(root))               # [[1], [3, 5], [7, 11, 17]]
list(in_order(root))                  # [7, 3, 11, 1, 17, 5]
```

```python
from algokit.bounded_stack import BoundedStack
from algokit.bounded_queue import BoundedQueue

stack = BoundedStack(2)
stack.push(22)
stack.push(43)
stack.pop()    # 43
stack.peek()   # 22

queue = BoundedQueue(6)
queue.push(4)
queue.push(14)
queue.pop()    # 4
len(queue)     # 1
```

## What it does not do

This is a library only: it has no command-line tool. `build_tree` takes a
ready-made listing of values and does not prompt for input, and nothing in
the package prints results; every function returns its answer instead.