# algodrills

Small, self-contained implementations of classic algorithm exercises.
It uses only the standard library.

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

### `algodrills.linked_list`

`Node` is a singly linked list node with `data` and `next`. Nodes compare by
identity. `from_values` builds a list from an iterable and returns its head.
`to_values` returns the data of every node, and `length` counts the nodes.
Both raise `ValueError` if the list has a cycle.

The operations work in place and return the head where it applies:

- `is_circular` tells whether the list loops back to its head. An empty list
  counts as circular. A loop that starts at any node other than the head does not.
- `find_middle` returns the middle node. For an even count it is the second of the two.
- `remove_sorted_duplicates` drops adjacent nodes with equal data.
- `remove_unsorted_duplicates` keeps the first node for each value.
- `sort_zero_one_two` sorts a list of 0s, 1s and 2s by counting.
- `reverse_in_groups(head, k)` reverses every full run of `k` nodes and leaves
  a shorter tail as it is. If `k` is 0 the list is unchanged. A negative `k`
  raises `ValueError`.
- `detect_and_remove_loop` breaks a loop if there is one. It returns whether
  it found one.
- `reverse` reverses the whole list.

### `algodrills.sorting`

`merge_sort` and `quick_sort` return a new ascending list. The input is not
changed.

`partition(values, start, end)` partitions `values[start:end + 1]` in place
around its first item and returns the pivot's final index. It raises
`IndexError` for a range out of bounds.

### `algodrills.searching`

`binary_search(values, target)` returns an index of `target` in an ascending
sequence, or -1 if it is not there.

### `algodrills.stacks`

A stack is a Python list whose top is the last item.

- `delete_middle` removes and returns the item `len // 2` places from the top.
  It raises `IndexError` on an empty stack.
- `insert_at_bottom` puts an item beneath all the others.
- `reverse_stack` reverses the stack in place.
- `next_smaller_elements` gives, for each item, the first later item strictly
  smaller than it. Where there is none it gives -1.

### `algodrills.arithmetic`

- `digit_array_sum(a, b)` adds two numbers given as digit lists, most
  significant digit first.
- `modular_exponentiation(x, n, m)` computes `x ** n % m` by repeated squaring.
  It returns 1 when `n` is 0.

### `algodrills.grids`

`wave_order(matrix)` reads a matrix column by column. It goes down the even
columns and up the odd ones.

### `algodrills.text`

- `is_palindrome` compares the ASCII letters and digits of a string both ways.
  It ignores case.
- `subsequences` returns every non-empty subsequence of a string. Each character
  is excluded before it is included, working from left to right.

## Example

```python
from algodrills.linked_list import from_values, to_values, reverse_in_groups
from algodrills.sorting import merge_sort
from algodrills.stacks import next_smaller_elements
from algodrills.text import subsequences

head = reverse_in_groups(from_values([1, 2, 3, 4, 5]), 2)
print(to_values(head))                          # [2, 1, 4, 3, 5]
print(merge_sort([6, 3, 9, 5, 2, 8]))           # [2, 3, 5, 6, 8, 9]
print(next_smaller_elements([4, 5, 2, 10, 8]))  # [2, 2, -1, 8, -1]
print(subsequences("abc"))  # ['c', 'b', 'bc', 'a', 'ac', 'ab', 'abc']
```

## What it does not do

This is a library only. It has no command-line interface. To use the functions,
import them from Python.