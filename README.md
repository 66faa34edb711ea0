# algolab

Classic algorithms and data structures in plain Python, with no
third-party dependencies. Requires Python 3.10 or later.

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

| Module | Contents |
| --- | --- |
| `algolab.basics` | `is_prime`, `split`, `brackets_balanced`, `tribonacci` |
| `algolab.dynamic` | `catalan`, `longest_common_subsequence`, `longest_increasing_subsequence`, `edit_distance` and `edit_distance_table` with `EditCosts`, `max_tower` with `Athlete` |
| `algolab.searching` | `binary_search`, `order_statistic` (randomized selection, optional `rng`) |
| `algolab.infix` | `to_postfix`, infix to postfix conversion |
| `algolab.bst` | `BinarySearchTree` with `add`, `search`, `min`, `max`, in-order iteration, `in` and `len` |
| `algolab.sorting` | `insertion_sort`, `heap_sort`, `heap_sort_iterative`, `merge_sort`, `merge_sort_bottom_up`, `quick_sort`, `quick_sort_random`, `hybrid_quick_sort`, `shell_sort`, `universal_sort`, and `is_sorted_file` |
| `algolab.stringsort` | `multikey_quicksort` for records whose first field is a string |
| `algolab.huffman` | `HuffmanCode` (`from_text`, `encode`, `decode`, `key_lines`, `codes`) and the `main` command |
| `algolab.deque` | `LinkedDeque` with named back and front ends |
| `algolab.geometry` | `Point`, `Vector`, `dot_product`, `cross_product`, `cos_angle`, `sin_angle`, `triangle_area`, `is_left_turn`, `is_right_turn`, `is_collinear` |
| `algolab.segment` | `Segment` (`slope`, `intercept`, `length`, `point_at`), `segment_intersect` |
| `algolab.ellipse` | `Ellipse` (`area`, `intersect_segment`), `solve_quadratic` |
| `algolab.polygon` | `Polygon` (`is_convex`, `area`, `contains_point`, `intersect_segment`), `convex_hull`, and the `INSIDE`, `ON_BOUNDARY`, `OUTSIDE` results |
| `algolab.calendar_time` | `DateTime`, `TimeSpan`, `is_leap_year`, `days_in_month`, `is_valid` |
| `algolab.billing` | `Call`, `Subscriber` |
| `algolab.longnum` | `LongNum`, an arbitrary-precision integer in base 10**9 digits, and `factorial` |
| `algolab.matrix` | `Matrix` with `determinant`, `inverse`, `triangulate`, `reverse_triangulate`, `transpose`, `extract`, `expand`, and `compose_right` |

Every sort in `algolab.sorting` takes an iterable and an optional `key` and
returns a new list; the randomized ones also take an optional
`random.Random` as `rng`. Errors are raised as exceptions (`ValueError`,
`IndexError`, `ZeroDivisionError`) rather than reported by return values.

## Examples

```python
from algolab.basics import tribonacci
from algolab.sorting import merge_sort
from algolab.infix import to_postfix
from algolab.huffman import HuffmanCode
from algolab.longnum import factorial
from algolab.calendar_time import DateTime

tribonacci(10)                      # 44
merge_sort([5, 3, 9, 1])            # [1, 3, 5, 9]
to_postfix("(1+2)*3")               # "1 2 + 3 *"
str(factorial(20))                  # "2432902008176640000"
DateTime.parse("2.2.2012 10:30:30").day_of_week()  # 4 (Thursday)

code = HuffmanCode.from_text("abracadabra")
data = code.encode("abracadabra")
assert code.decode(data) == "abracadabra"
```

## Command line

The Huffman coder works on a directory holding `input.txt`:

```
algolab-huffman [directory]
```

The directory defaults to the current one. The command writes the code
table to `key.txt` (one `"<symbol> <code>"` line per symbol), the encoded
bytes to `shifr.txt`, and the text decoded back from `shifr.txt` to
`deshifr.txt`. Run `algolab-huffman --help` for the usage line.

## What is not included

`algolab-huffman` is the only command. Everything else is a library to call
from Python: there are no interactive prompts or menus for the deque, the
matrix, the dates or the other structures, and no timing or benchmark
runner for the sorts.