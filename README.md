# algodrills

A small library of classic algorithm and data-structure exercises as plain,
importable Python: recursion and number drills, sorting, dynamic programming,
sliding windows, graph walks, rooted-tree precomputation, a chained hash table,
a binary search tree and several kinds of linked list.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.basics` | `binary_to_decimal`, `factorial`, `fibonacci`, `power`, `is_palindrome` |
| `algodrills.sorting` | `merge_sort`, `quick_sort` |
| `algodrills.dp` | `knapsack_recursive`, `knapsack_memo`, `knapsack_table`, `longest_increasing_subsequence` |
| `algodrills.window` | `first_negatives`, `is_prime`, `smallest_prime_with_remainder` |
| `algodrills.tricks` | `Ticker`, `count_up`, `if_else_lines` |
| `algodrills.graphs` | `Graph` with `bfs`, `bfs_forest`, `dfs`, `has_cycle`, `connected_components` |
| `algodrills.trees` | `subtree_stats`, `tree_shape`, with results in `SubtreeStats` and `TreeShape` |
| `algodrills.hashing` | `hash_key`, `ChainedHashTable` |
| `algodrills.bst` | `BinarySearchTree` |
| `algodrills.linkedlist` | `Node`, `LinkedList` |
| `algodrills.listops` | `concatenate`, `merge_sorted` |
| `algodrills.doubly` | `DoublyLinkedList` |
| `algodrills.circular` | `CircularList` |
| `algodrills.arith` | `Term`, `digits_of`, `add_long_numbers`, `add_polynomials`, `format_polynomial` |
| `algodrills.staff` | `Employee`, `StaffRoster` |

## Notes on behaviour

- `fibonacci(n)` returns `n` itself for `n <= 1`; `power(x, n)` squares
  repeatedly and inverts `x` for negative `n`.
- `is_palindrome` compares only ASCII letters, ignoring case.
- `merge_sort` and `quick_sort` return new lists and leave their input alone.
- `longest_increasing_subsequence` counts strictly increasing runs and gives 0
  for no items.
- `smallest_prime_with_remainder` returns `None` when no prime below ten
  billion fits.
- `ChainedHashTable` keeps each bucket sorted and keeps duplicate keys;
  `BinarySearchTree` holds unique keys and yields them in ascending order.
- `LinkedList.insert` counts positions from 0, while `LinkedList.delete`
  counts from 1. `reverse_k_group` leaves a short tail group as it is.
- `digits_of` gives digits least significant first; `add_long_numbers` takes
  digits that way and returns the sum most significant digit first.
- `StaffRoster.report` lists members with more than 10 years of experience,
  or `Nothing to display!` when the roster is empty.

## Examples

```python
from algodrills.sorting import merge_sort
from algodrills.dp import knapsack_table
from algodrills.window import first_negatives

merge_sort([1, 7, 2, 4, 6, 3, 8, 5])
# [1, 2, 3, 4, 5, 6, 7, 8]

knapsack_table([2, 3, 4, 5], [3, 4, 5, 6], 8)
# 10

first_negatives([12, -1, -7, 8, -15, 30, 16, 28], 3)
# [-1, -1, -7, -15, -15, 0]
```

```python
from algodrills.graphs import Graph

g = Graph([(0, 1), (0, 2), (1, 3), (2, 4)])
g.connected_components(range(5))
# [[0, 1, 3, 2, 4]]
```

```python
from algodrills.linkedlist import LinkedList

items = LinkedList([1, 2, 3, 4, 5])
items.reverse_k_group(2)
list(items)
# [2, 1, 4, 3, 5]
```

Errors are raised as ordinary Python exceptions, such as `ValueError` for bad
input and `IndexError` for positions outside a list.

## What it does not do

This is a library only. It has no command-line program and no interactive
menus: every operation is a function or method to call from Python code.