# algokit

A compact library of classic algorithm solutions in plain Python, with no
third-party dependencies.

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

| Module | Function / class | Purpose |
| --- | --- | --- |
| `algokit.bitmapholes` | `bitmap_holes(rows)` | Count 4-connected regions of `'0'` cells in a bitmap of strings |
| `algokit.combination` | `combination_sum(candidates, target)` | All combinations (with reuse) summing to `target` |
| `algokit.equalparts` | `three_equal_parts(arr)` | Split a binary array into three parts with equal binary value |
| `algokit.lastword` | `length_of_last_word(s)` | Length of the last space-separated word |
| `algokit.matrix` | `update_matrix(mat)`, `print_matrix(matrix, file=None)` | Distance of each cell to the nearest `0` |
| `algokit.maxgap` | `maximum_gap(nums)` | Largest gap between successive sorted values, bucket based |
| `algokit.minstack` | `MinStack` | Stack with constant-time minimum |
| `algokit.palindrome` | `longest_palindrome(s)` | Longest palindromic substring |
| `algokit.permutations` | `permute(nums)` | All permutations |
| `algokit.search` | `exist(board, word)` | Word search on a letter grid |
| `algokit.sorting` | `ListNode`, `sort_list`, `create_list`, `list_values`, `print_list` | Merge sort on a singly linked list |
| `algokit.spiralorder` | `spiral_order(matrix)` | Elements of a matrix in clockwise spiral order |
| `algokit.subset` | `subsets(nums)` | The power set, in depth-first order |
| `algokit.climbstairs` | `climb_stairs(n)` | Ways to climb `n` stairs taking 1 or 2 steps |
| `algokit.zigzag` | `convert(s, num_rows)` | Zigzag string conversion |

## Behaviour worth knowing

- `bitmap_holes` returns an `int`. The width comes from the first row; a
  shorter row raises `ValueError`.
- `combination_sum` raises `ValueError` if any candidate is zero or negative.
- `three_equal_parts` returns a tuple `(i, j)`, or `(-1, -1)` when no split
  exists.
- `update_matrix` returns a new grid and leaves its input unchanged; an empty
  or ragged grid raises `ValueError`. Cells that cannot reach a zero are `-1`.
  `print_matrix` writes rows as `[a b c]` to standard output by default.
- `MinStack.pop()` returns the removed value. `pop`, `top` and `get_min`
  raise `IndexError` on an empty stack; `len(stack)` gives its size.
- `exist` raises `ValueError` for a board with no rows.
- `ListNode` is iterable over its values. `print_list` writes each value
  followed by a space, then a newline, to standard error by default.
- `convert` raises `ValueError` when `num_rows` is below 1 and shorter than
  the string.
- `climb_stairs(n)` returns `n` unchanged for `n <= 2`.

## Examples

```python
from algokit.bitmapholes import bitmap_holes
from algokit.combination import combination_sum
from algokit.minstack import MinStack
from algokit.sorting import create_list, sort_list, list_values
from algokit.spiralorder import spiral_order

bitmap_holes(["01111", "01001", "01001", "01111"])   # 2
combination_sum([2, 3, 6, 7], 7)                     # [[2, 2, 3], [7]]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])      # [1, 2, 3, 6, 9, 8, 7, 4, 5]

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()   # -3
stack.pop()       # -3
stack.top()       # 0
stack.get_min()   # -2

list_values(sort_list(create_list([4, 2, 1, 3])))    # [1, 2, 3, 4]
```

## Demo

A command-line demo runs most of the algorithms on fixed sample inputs and
prints the results. It takes no options besides `--help`:

```
algokit-demo
```

The demo does not cover `climb_stairs` or `convert`, and it does not accept
input of your own; call the functions from Python for that.