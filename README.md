# algodrills

A collection of classic algorithm drills written as small, dependency-free
Python functions. The package covers array tricks, number-system conversions,
binary search on the answer, searching, sorting, and a set of well-known
interview problems.

## Installation

```
pip install algodrills
```

Python 3.10 or newer is required.

## Modules

| Module | What it holds |
| --- | --- |
| `algodrills.arrays` | `intersection`, `subarray_sums`, `max_subarray_sum_brute`, `swap_min_max`, `unique_values` |
| `algodrills.binary` | `binary_to_decimal`, `decimal_to_binary_recursive`, `decimal_to_binary_loop`, `reverse_bits`, `is_power_of_two` |
| `algodrills.partition` | `can_place_cows`, `largest_min_distance`, `can_allocate`, `allocate_books` |
| `algodrills.searching` | `binary_search`, `binary_search_recursive`, `linear_search` |
| `algodrills.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sorted_into`, `sort_colors_brute`, `sort_colors_counting`, `sort_colors_dutch_flag` |
| `algodrills.strings` | `reverse_string` |
| `algodrills.leetcode` | `my_pow`, `h_index`, `length_of_longest_substring`, `max_subarray`, `single_number`, `max_area`, `remove_duplicates`, `remove_element` |
| `algodrills.vectors` | `pair_sum`, `pair_sum_two_pointer`, `majority_brute_force`, `majority_by_sorting`, `majority_moore`, `max_profit`, `most_water`, `product_except_self_brute`, `product_except_self_prefix`, `product_except_self`, `reverse_in_place` |

## Examples

```python
from algodrills.partition import largest_min_distance, allocate_books
from algodrills.searching import binary_search
from algodrills.sorting import sort_colors_dutch_flag
from algodrills.leetcode import max_area, my_pow
from algodrills.vectors import product_except_self

largest_min_distance([1, 2, 8, 4, 9], 3)      # 3
allocate_books([2, 1, 7, 4, 9, 8], 3)         # 13
binary_search([1, 2, 3, 4, 5, 6], 4)          # 3
sort_colors_dutch_flag([2, 0, 2, 1, 1, 0, 2]) # [0, 0, 1, 1, 2, 2, 2]
max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])         # 49
my_pow(2.0, 10)                               # 1024.0
product_except_self([1, 2, 3, 4])             # [24, 12, 8, 6]
```

Several problems come in more than one version, such as brute force, counting
or optimal. This lets the approaches be compared side by side on the same
input.

Most functions return a new list and leave their input alone. The exceptions
change a list you pass in:

- `merge_sorted_into` merges into the buffer it is given.
- `remove_duplicates` and `remove_element` change the list and return the new length.
- `reverse_in_place` reverses the list and returns `None`.

Empty input raises `ValueError` where no answer exists. This applies to
`max_subarray_sum_brute`, `max_subarray` and `largest_min_distance`.

## What the package does not do

There is no command-line program and nothing reads from standard input.
Every drill is a plain function: you call it with values and it returns its
result.

## Running the tests

```
pip install "algodrills[test]"
pytest
```