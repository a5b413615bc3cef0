# drillbook

A small library of classic practice algorithms. Each one is a plain function.
It takes ordinary Python values and returns its result. Nothing prints, and
the sorting functions return new lists without changing their input.

## Modules

- `drillbook.basics`
  - `gcd`: greatest common divisor, found by counting down from the smaller value.
  - `sum_and_difference`: returns the sum and the absolute difference.
  - `describe_pair`: returns a one-sentence description of two values.
  - `max_value` and `min_value`: raise `ValueError` when given no values.
  - `number_grid`: an n×n grid numbered row by row.
  - `switch_labels`: the labels a fall-through switch produces.
  - `sum_of_evens`: the sum of the even numbers from 2 up to n.
- `drillbook.bits`
  - Single-bit helpers: `get_bit`, `set_bit`, `clear_bit` and `update_bit`.
  - `count_ones`: reads a negative number as 32-bit two's complement.
  - `is_power_of_two`: tests whether a number is a power of two.
  - XOR-based finders: `find_unique` and `find_two_unique`.
  - `find_unique_in_triplets`: works on 32-bit signed values.
  - `bit_subsets`: every subset, in bit-mask order.
- `drillbook.subarrays`
  - `kadane_sum`: returns 0 for an all-negative input.
  - `max_circular_sum`: the best subarray sum when the sequence wraps around.
  - `max_subarray_sum`: an exhaustive search over every subarray.
  - `find_pair_with_sum`: returns an index pair, or `None`.
  - `all_subarrays`: every contiguous subarray.
- `drillbook.brackets`
  - `bracket_precedence`: the nesting rank of a bracket.
  - `are_brackets_balanced`: checks that the brackets match, with square around
    curly around round. Other characters are ignored.
- `drillbook.binary_search`
  - `aggressive_cows`: the largest minimum distance at which the cows can be placed.
  - `min_pages`: the smallest largest share when books are allocated in order.
  - `search_range`: the first and last index of a value in sorted data.
  - `painter_partition`: the least largest group total when boards are split.
  - `peak_index`: the index of the peak of a mountain array.
  - Rotated arrays: `find_pivot`, `binary_search` and `search_rotated`.
- `drillbook.recursion`
  - `josephus`: the survivor's position, counted from 0.
  - `natural_sum`: the sum of 1 to n.
  - `is_palindrome`: tests whether a string reads the same both ways.
  - `max_pieces`: rope cutting; returns -1 when no exact cut exists.
  - `permutations`: every arrangement of a string.
  - `count_subsets`: the number of subsets with a given sum.
  - `subsets`: every subsequence of a string.
  - `sum_of_digits`: the sum of the decimal digits of a number.
  - `tower_of_hanoi`: returns the moves as `(disk, from_peg, to_peg)` tuples.
- `drillbook.sorting`
  - `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`
    and `selection_sort`.
  - `pigeonhole_sort`: for integers only.
- `drillbook.patterns`
  - Text figures returned as lists of lines: `butterfly`, `zero_one_triangle`,
    `rectangle`, `hollow_rectangle`, `inverted_half_pyramid`,
    `rotated_half_pyramid`, `repeated_number_triangle`, `half_pyramid_numbers`,
    `inverted_half_pyramid_numbers`, `inverted_repeated_pyramid`,
    `floyd_triangle`, `rhombus`, `number_pyramid`, `palindromic_pyramid`,
    `diamond` and `zigzag`.

## Example

```python
from drillbook.basics import gcd
from drillbook.binary_search import min_pages
from drillbook.sorting import merge_sort
from drillbook.patterns import floyd_triangle

gcd(98, 56)                       # 14
min_pages([12, 34, 67, 90], 2)    # 113
merge_sort([12, 11, 13, 5, 6, 7]) # [5, 6, 7, 11, 12, 13]
print("\n".join(floyd_triangle(4)))
```

## What it does not do

drillbook is a library only. It has no command-line program, and it never
reads from standard input or writes to standard output. To show a pattern,
join its lines and print them yourself.

## Running the tests

```
pip install -e .[test]
pytest
```