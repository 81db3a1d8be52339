# dstructs

A compact collection of the classic data structures and algorithms that an
introductory course covers, written in plain Python with no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dstructs.basics` | `sum_to`, `average` (truncated toward zero), `StudentRecord` and `class_average`, `difference_of_squares`, `scaled_sequence`, `counted_sum`, `time_call`, `factorial` and `factorial_step_count`, `hanoi` |
| `dstructs.arrays` | `insert_element` and `delete_element` on fixed-length arrays, `decrement_all`, `decrement_matrix`, NUL-aware `string_length`, `string_copy`, `string_concat`, `string_compare`, `transpose`, `matrix_add`, `matrix_multiply`, and `sparse_transpose` over `SparseTerm` triples |
| `dstructs.linked_list` | `Node`, `LinkedList` (insert, delete, predecessor, concatenate, invert), `CircularList`, `DNode`, `DoublyLinkedList`, `HeaderDoublyList` |
| `dstructs.polynomial` | `Polynomial` built from `Term`s in descending exponent order, with `+`, `str()` and `clear()` |
| `dstructs.stack_queue` | `ArrayStack`, `ArrayQueue`, `CircularQueue`, `LinkedStack`, each with `render()` for a text picture, and `StackFullError`, `StackEmptyError`, `QueueFullError`, `QueueEmptyError` |
| `dstructs.trees` | `TreeNode`, `build_tree` from a preorder string with `0` for empty subtrees, `inorder`, `preorder`, `postorder`, `iterative_inorder`, `ThreadedNode` and `ThreadedTree`, `MaxHeap` with `HeapEmptyError` and `HeapFullError`, `BinarySearchTree` |
| `dstructs.graphs` | `shortest_paths` (single source), `floyd_shortest_paths` (all pairs), `topological_sort` with `CycleError`, `depth_first`, `breadth_first` |
| `dstructs.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `insertion_sort_steps`, `merge_lists`, `merge_ranges`, `merge_pass`, `merge_sort_iterative`, `merge_sort_recursive`, `quick_sort`, `shell_sort`, `heap_sort`, `lsd_radix_sort` |
| `dstructs.searching` | `Record`, `sequential_search`, `binary_search`, `interpolation_search`, `fibonacci_numbers`, `fibonacci_search`, and `optimal_bst` returning `OptimalBST` tables with `render()` |

## Examples

```python
from dstructs.basics import sum_to, hanoi
from dstructs.linked_list import LinkedList
from dstructs.polynomial import Polynomial, Term
from dstructs.sorting import quick_sort
from dstructs.trees import BinarySearchTree

sum_to(100)                                   # 5050
hanoi(2, "A", "B", "C")                       # [('A', 'B'), ('A', 'C'), ('B', 'C')]

lst = LinkedList([26, 18, 15])
lst.invert()
list(lst)                                     # [15, 18, 26]

f = Polynomial([Term(5, 1000), Term(7, 387), Term(10, 0)])
g = Polynomial([Term(10, 400), Term(6, 387), Term(3, 2), Term(1, 0)])
print(f + g)                                  # 5x^1000+10x^400+13x^387+3x^2+11

quick_sort([30, 24, 27, 16, 29, 33, 25, 18, 32, 35])

tree = BinarySearchTree([25, 15, 30, 12, 17, 12, 16, 27])
tree.inorder()                                # [12, 15, 16, 17, 25, 27, 30]
```

The sorting functions take any iterable and return a new sorted list; the
input is left alone. The search functions return the index of the matching
record, or `None` when there is none. `shortest_paths` returns `None` for
vertices that cannot be reached from the source.

## Errors

Operations that cannot proceed raise exceptions: a full `ArrayStack` raises
`StackFullError`, an empty `MaxHeap` raises `HeapEmptyError`, a graph with a
cycle makes `topological_sort` raise `CycleError`, `factorial` of a negative
number and `hanoi` with fewer than one disc raise `ValueError`, and
`insert_element` or `delete_element` outside the array raise `IndexError`.

## What it does not do

This is a library only. It has no command-line program and no interactive
menu for pushing, popping or queueing values; the `render()` methods produce
the text pictures, and printing or reading input is left to the caller.