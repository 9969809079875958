# examdrills

Solutions to a set of classic programming exam problems, written as small,
tested Python functions. The problems cover string handling, integer
puzzles, singly linked and ring lists, binary trees and sorting. The
package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To install the test dependencies too:

```
pip install ".[test]"
```

## Modules

### `examdrills.binary_tree`

- `TreeNode`: a node with `value`, `left` and `right`.
- `build_tree(values)`: builds a tree from a level-order (heap-ordered)
  list and returns the root. An entry equal to `114514` (`NULL_NUMBER`) or
  `None` marks a missing node. An empty list raises `ValueError`.
- `format_tree(root)`: renders the tree level by level, each entry followed
  by a space, `*` marking a missing node and each level ending in a newline;
  it stops at the first level with no real node.
- `print_tree(root)`: writes `format_tree` output to standard output.

### `examdrills.linked_list`

- `ListNode`: a node with `value` and `next`.
- `list_get(values)`: builds a `None`-terminated list and returns its head.
- `list_ring_get(values)`: builds a circular list and returns
  `(head, length)`.
- `iter_list(node)`: yields values until the end of the list or until it
  comes back to the start.
- `format_list(node)`: the values separated by single spaces.
- `print_list(node)`: writes `format_list` output to standard output.

Building from an empty sequence raises `ValueError`.

### `examdrills.strings`

- `reverse_string(text)`: the text reversed.
- `sorted_unique_chars(text)`: distinct characters in code order, spaces
  removed.
- `merged_unique_chars(first, second)`: distinct characters of both strings
  in code order.
- `reverse_output(text)`: prints the text reversed, with no newline.
- `strlong(string)`: length up to the first NUL character.
- `unique(string)`: keeps only the first occurrence of each character, so
  `unique("abacaeedabcdcd")` is `"abced"`.

### `examdrills.list_problems`

- `find_min(head, length)`: the smallest value among the first `length`
  nodes, walking a ring or terminated list. Raises `ValueError` when the list
  is shorter than `length` or `length` is negative.
- `reverse_list(head)`: reverses the links in one pass and returns the new
  head.

### `examdrills.tree_problems`

- `compare_trees(first, second)`: `True` when both trees have the same
  shape and values.
- `bst_build(values)`: inserts the values in order into a binary search tree
  (values not greater than a node go left) and returns the root.
- `number_of_leaves(root)`: counts nodes with no children.
- `level_order(root)`: the values in breadth-first order, as a list.

### `examdrills.students`

- `Student(no, score)` and `CourseStudent(sno, cno, score)`: frozen records.
- `sort_students(students)`: a linked list of the records ordered by score,
  lowest first; `None` when there are none.
- `sort_course_students(students)`: a linked list ordered by ascending course
  number, then descending score; `None` when there are none.

### `examdrills.numbers`

- `LinkedStack`: a stack of linked nodes with `push`, `pop` (raises
  `IndexError` when empty) and `is_empty`.
- `reverse_int(n)`: decimal digits reversed, sign kept.
- `find_sequences(total)`: all runs of five positive integers summing to
  `total`, each a multiple (at least double) of the one before.
- `get_number()`: the number with remainders 1, 1, 7 on successive division
  by 8 and 4, 15 by 17, whose final quotients are `a` and `2 * a`.
- `symmetric_numbers(limit)`: every number from 0 to `limit` equal to its
  digit reversal.
- `prime_factors(target)`: prime factors in ascending order; numbers below 2
  give an empty list, negative numbers raise `ValueError`.
- `find_number()`: searches 343 to 2400 for a number whose base-7 and
  base-9 digit readings match; returns -1 if none does.
- `get_in_list(position)`: the term at `position` (from 1) of the sequence
  that starts 2, 3 and continues with the digits of the product of the last
  two terms.
- `to_octal(n)`: octal digits of `n` as a string, built through a
  `LinkedStack`; zero gives an empty string.

### `examdrills.sorting`

- `quick_sort(values)`: a new ascending list, sorted by quicksort with the
  first element of each range as pivot.

## Examples

```python
from examdrills.numbers import reverse_int, get_number, to_octal
from examdrills.linked_list import list_get, format_list
from examdrills.list_problems import reverse_list
from examdrills.binary_tree import build_tree
from examdrills.tree_problems import level_order

reverse_int(483)          # 384
get_number()              # 1993
to_octal(64)              # "100"

head = list_get([1, 2, 3, 4, 5, 6, 7])
format_list(reverse_list(head))   # "7 6 5 4 3 2 1"

tree = build_tree([1, 2, 3, 4, 114514, 114514, 7, 8, 114514, 114514, 9])
level_order(tree)         # [1, 2, 3, 4, 7, 8]
```

## What it does not do

The package is a library only. It installs no command and reads nothing
from the keyboard: every function takes its input as arguments and returns
its result, apart from `print_tree`, `print_list` and `reverse_output`,
which write to standard output.

## Running the tests

```
pytest
```