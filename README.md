# algodrills

Classic data-structure and algorithm exercises written as plain, importable
Python functions and classes. It has no dependencies beyond the standard
library.

## Modules

### `algodrills.containers`

- `Stack` (`push`, `pop`, `top`, `is_empty`, `len()`), `Queue` (`push`,
  `pop`, `front`, `back`, `is_empty`, `len()`) and `Deque` (`push_front`,
  `push_back`, `pop_front`, `pop_back`, `front`, `back`, `is_empty`, `len()`).
  Reading from an empty container raises `IndexError`.
- `execute_stack`, `execute_queue` and `execute_deque` take an iterable of
  command lines such as `"push 3"`, `"pop"`, `"size"` or `"empty"` and return
  the list of integers those commands produce. Popping or peeking at an empty
  container yields `-1`; `empty` yields `1` or `0`. Blank lines and unknown
  commands are ignored.

### `algodrills.heaps`

- `MaxHeap` and `MinHeap`: array-backed binary heaps with `push`, `pop`,
  `len()` and iteration over the stored values in level order. `pop` on an
  empty heap raises `IndexError`.
- `AbsHeap`: pops the value with the smallest absolute value, the smaller
  value on ties.
- `run_heap_operations(heap, values)`: for each value, `-1` appends the heap's
  contents (each followed by a space), `0` pops (writing `0` when empty) and
  anything else pushes. Returns the produced text.
- `run_abs_heap_operations(values)`: `0` pops (giving `0` when empty), other
  values push; returns the popped values.

### `algodrills.binary_tree`

- `BTreeNode`: a dataclass with `data`, `left` and `right`, and an `inorder()`
  generator.
- `inorder(node)`: in-order values of a possibly empty (`None`) tree.

### `algodrills.sequences`

- `is_balanced(line)`: round and square brackets balanced.
- `is_vps(text)`: valid parenthesis string (any other character fails).
- `next_greater(values)`: first strictly greater value to the right, or `-1`.
- `stack_sequence(targets)`: the `"+"`/`"-"` push and pop operations that
  produce `targets` from 1, 2, 3, ...; raises `ValueError` if impossible.
- `tower_receivers(heights)`: 1-based position of the nearest taller-or-equal
  tower to the left, or `0`.
- `josephus(n, k)`, `last_card(n)`, `zero_sum(values)`,
  `print_order(priorities, target)` (priorities 1 to 9, 0-based target,
  1-based result), `is_palindrome(word)` and `running_medians(values)` (the
  smaller middle value for even lengths).
- The reverse/drop array language: `parse_int_array("[1,2,3]")`,
  `apply_ac(program, values)` with `R` and `D` instructions (raises
  `EmptyArrayError` when dropping from an empty array) and
  `format_int_array(values)`.

### `algodrills.sorting`

- `sort_members` (stable by age), `sort_words` (distinct, by length then
  alphabetically), `sort_ascending`, `sort_chars_desc`, `sort_points`.
- `binary_search(sorted_values, target)` and `membership(values, queries)`.
- Statistics: `mean_rounded` (halves away from zero), `median` (upper middle
  for even counts), `mode` (second smallest on ties), `value_range`, and
  `summarize`, which returns a frozen `Summary(mean, median, mode, spread)`.
  Each raises `ValueError` on an empty input.
- `smallest_seven(heights)` and `find_seven_dwarfs(heights)`, which drops the
  two heights that leave a total of 100 (raises `ValueError` if no pair does).

### `algodrills.puzzles`

`warp_moves`, `add_big` (digit-string addition), `blackjack`, `body_ranks`,
`min_repaint` (8x8 chessboard repainting), `paper_area`,
`smallest_generator`, `apocalypse_number`, `factorial`, `fibonacci`,
`sugar_bags` (raises `ValueError` when no exact packing exists),
`toggle_switches` and `format_switches`, `hanoi_moves`, `last_computer`,
`verification_digit`, `primes_between` and `divide_money`.

## Example

```python
from algodrills.containers import Stack, execute_queue
from algodrills.heaps import MaxHeap
from algodrills.sequences import josephus, is_balanced
from algodrills.puzzles import hanoi_moves

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.pop())          # 2

print(execute_queue(["push 1", "push 2", "front", "size"]))   # [1, 2]

heap = MaxHeap()
for value in (3, 9, 4):
    heap.push(value)
print(heap.pop())           # 9

print(josephus(7, 3))       # [3, 6, 2, 7, 5, 1, 4]
print(is_balanced("So when I die (the [first] I will see in (heaven) is a score list)."))  # True
print(hanoi_moves(2))       # [(1, 2), (1, 3), (2, 3)]
```

## What it does not do

The package is a library only. It installs no command-line programs and does
not read problem input from standard input; callers pass values in and get
Python values back.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```