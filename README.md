# algonotes

Worked solutions to classic algorithm exercises, written as plain Python functions with no third-party dependencies. Each module groups the exercises by the kind of data they work on.

## Installation

```
pip install .
```

To install the test tools as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algonotes.arrays`

| Function | What it does |
| --- | --- |
| `two_sum(nums, target)` | Returns a tuple `(i, j)` with `i < j` and `nums[i] + nums[j] == target`; raises `ValueError` when there is no such pair. |
| `median_of_sorted(nums1, nums2)` | Returns the median of two sorted sequences as a float; raises `ValueError` when both are empty. |
| `max_area(heights)` | Returns the most water a pair of vertical lines can hold. |
| `remove_duplicates(nums)` | Moves the distinct values of a sorted list to its front, in place, and returns how many there are. |
| `search_rotated(nums, target)` | Returns the index of `target` in a rotated sorted sequence, or -1. |
| `search_insert(nums, target)` | Returns the index of `target` in a sorted sequence, or the index where it would be inserted. |
| `max_subarray(nums)` | Returns the largest sum of a non-empty contiguous run; raises `ValueError` on empty input. |
| `can_jump(nums)` | Tells whether the last index can be reached from the first. |
| `sort_colors(nums)` | Sorts a list in place. |

### `algonotes.numbers`

| Function | What it does |
| --- | --- |
| `reverse_integer(x)` | Reverses the decimal digits of `x`, keeping its sign; returns 0 if the result is outside the 32-bit signed range. |
| `is_palindrome_number(x)` | Tells whether an integer reads the same both ways; negative numbers never do. |
| `power(x, n)` | Raises `x` to an integer power by repeated squaring; negative `n` gives the reciprocal. |
| `permutation_sequence(n, k)` | Returns the k-th (counted from 1) lexicographic permutation of the digits `1..n`; a `k` past the last permutation gives the first. |
| `climb_stairs(n)` | Counts the ways to climb `n` stairs in steps of 1 or 2. |
| `fib(n)` | Returns the n-th Fibonacci number (`fib(0) == 0`); raises `ValueError` for negative `n`. |
| `sum_of_multiples(n)` | Sums the numbers in `1..n` that are divisible by 3, 5 or 7. |

The module also defines `INT_MIN` and `INT_MAX`, the bounds of a 32-bit signed integer.

### `algonotes.strings`

| Function | What it does |
| --- | --- |
| `longest_unique_substring_length(s)` | Returns the length of the longest run with no repeated character. |
| `longest_palindrome(s)` | Returns the longest palindromic substring, the leftmost among those of equal length. |
| `zigzag_convert(s, num_rows)` | Writes `s` in a zigzag over `num_rows` rows and reads it back row by row; raises `ValueError` if `num_rows < 1`. |
| `atoi(s)` | Parses a leading integer after leading spaces and an optional sign, stopping at the first non-digit and clamping to the 32-bit signed range; text with no digits gives 0. |
| `longest_common_prefix(strs)` | Returns the prefix shared by every string. |
| `add_binary(a, b)` | Adds two binary numerals and returns the sum as a binary string; raises `ValueError` if either holds anything but `0` and `1`. |
| `repeated_string_match(a, b)` | Returns the fewest copies of `a` whose concatenation contains `b`, or -1; raises `ValueError` if `a` is empty. |

### `algonotes.linked_list`

`ListNode` is a singly linked list node with `val` and `next`; iterating over a node yields the values from it to the end of the list.

| Function | What it does |
| --- | --- |
| `from_values(values)` | Builds a list from an iterable; empty input gives `None`. |
| `to_values(head)` | Returns the values of a list as a Python list; `None` gives `[]`. |
| `remove_nth_from_end(head, n)` | Unlinks the n-th node from the end and returns the new head; a list shorter than `n` is returned unchanged, and `n < 1` raises `ValueError`. |
| `merge_k_lists(lists)` | Merges any number of lists into a new list sorted ascending. |
| `swap_pairs(head)` | Swaps every two adjacent nodes in place and returns the new head. |

### `algonotes.matrices`

`spiral_order(matrix)` returns the elements of a matrix clockwise from the top-left corner. `spiral_matrix(n)` builds an `n` by `n` matrix filled clockwise with `1..n*n`, or an empty list when `n <= 0`.

### `algonotes.queens`

`solve_n_queens(n)` returns every way to place `n` non-attacking queens on an `n` by `n` board, each board given as rows of `"Q"` and `"."`, in lexicographic order of the queens' columns. Negative `n` raises `ValueError`.

## Example

```python
from algonotes.arrays import two_sum
from algonotes.strings import longest_palindrome
from algonotes.linked_list import from_values, swap_pairs, to_values
from algonotes.queens import solve_n_queens

two_sum([2, 7, 11, 15], 9)                        # (0, 1)
longest_palindrome("cbbd")                        # "bb"
to_values(swap_pairs(from_values([1, 2, 3, 4])))  # [2, 1, 4, 3]
len(solve_n_queens(8))                            # 92
```

## What it does not do

The package is a library only: it installs no command-line program, and the functions are meant to be imported and called from Python.