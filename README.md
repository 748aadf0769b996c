# codekata

A small collection of solutions to classic programming puzzles. They are plain
Python functions with no dependencies.

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

### `codekata.numbers`

- `is_palindrome(x)`: whether an integer's decimal digits read the same backwards. Negative numbers never do. A number whose reversal would leave the signed 32-bit range counts as not a palindrome.
- `roman_to_int(s)`: the value of a Roman numeral such as `"MCMXCIV"`. Characters that are not Roman digits count as zero.
- `my_atoi(s)`: parse a leading integer the way C's `atoi` does. It skips leading spaces, reads one optional sign, then reads digits and ignores whatever follows them. The result is clamped to the 32-bit signed range. Text without digits gives `0`.
- `INT_MAX`, `INT_MIN`: the 32-bit signed bounds used above.

### `codekata.strings`

- `longest_common_prefix(strs)`: the longest prefix that every string shares. An empty sequence gives `""`.
- `is_match(s, p)`: whether the pattern matches the whole string. In the pattern, `.` matches any character and `*` matches zero or more of the element before it. A pattern that starts with `*` raises `ValueError`.
- `length_of_longest_substring(s)`: the length of the longest substring without a repeated character.

### `codekata.arrays`

- `search_insert(nums, target)`: the index of `target` in a sorted sequence, or the index where it would be inserted.
- `two_sum(nums, target)`: the first pair of indices `(i, j)` whose values add up to `target`. Raises `ValueError` if there is no such pair.
- `trap(height)`: how much water an elevation map holds between its bars.
- `sort_colors(nums)`: sorts a list of 0s, 1s and 2s in place in a single pass.

### `codekata.linked_list`

- `ListNode`: a node of a singly linked list, with fields `val` and `next`.
  - `ListNode.from_values(values)` builds a list. An empty input gives `None`.
  - `to_list()` returns the values as a list.
  - Iterating over a node yields the values from that node to the end.
- `add_two_numbers(l1, l2)`: adds two numbers stored as lists of digits, least significant digit first.
- `reverse_k_group(head, k)`: reverses the list in groups of `k` nodes. A trailing group shorter than `k` keeps its order. A `k` below 1 raises `ValueError`.

### `codekata.sudoku`

Boards are 9×9 lists of one-character strings: `"1"` to `"9"` for filled cells and `"."` (`EMPTY`) for empty ones.

- `solve_sudoku(board)`: fills the empty cells in place by backtracking. Returns `True` when it finds a solution. Otherwise it returns `False` and leaves the board as it was.
- `can_place(board, row, col, digit)`: whether the digit is absent from the cell's row, column and 3×3 box.
- `is_valid_sudoku(board)`: whether no row, column or box repeats a filled digit.
- `format_board(board)`: the board as text, nine lines of space-separated cells.

## Example

```python
from codekata.arrays import trap
from codekata.linked_list import ListNode, reverse_k_group
from codekata.strings import is_match

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])          # 6
is_match("aab", "c*a*b")                               # True
reverse_k_group(ListNode.from_values([1, 2, 3, 4, 5]), 2).to_list()
# [2, 1, 4, 3, 5]
```

## What it does not do

This is a library only. There is no command-line program. Nothing reads puzzles from files or standard input. To use the functions, import them and call them.