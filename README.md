# pushswap

Sorts a list of integers with two stacks, `a` and `b`, and a fixed set of
operations, writing each operation it performs to standard output, one per
line. This is the push_swap puzzle: the aim is to sort stack `a` in
ascending order (smallest at the top) with few operations.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the first two elements of `a`                  |
| `sb`  | swap the first two elements of `b`                  |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the first element becomes the last   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the first |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

`pa` and `pb` do nothing, and are not recorded, when the stack they take
from is empty.

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

Numbers may be given as separate arguments, in one quoted argument
separated by spaces, or mixed:

```
push-swap "4 67 3" 87 23
```

If stack `a` is already sorted, or holds a single number, nothing is
printed. With no arguments the command does nothing.

On invalid input the command prints `Error` to standard error and exits
with status 1. Input is invalid when an argument is empty, no number is
given at all, a value is not a whole decimal number (an optional sign
followed by digits), a value falls outside the 32-bit signed integer
range, or a value appears twice.

Stacks of two to five values are sorted with a short fixed strategy;
larger inputs are ranked and pushed to `b` in chunks, then brought back
to `a` largest first.

## Library use

```python
from pushswap.stacks import PushSwap
from pushswap.sorting import sort_stacks

moves = []
machine = PushSwap([5, 1, 4, 2, 3], moves.append)
sort_stacks(machine)
print([op.value for op in moves])
print(list(machine.a))  # [1, 2, 3, 4, 5]
```

- `pushswap.stacks.PushSwap` holds stacks `a` and `b` (top first) and
  records every operation in its `operations` list; the optional second
  argument is called with each `Operation` as it is performed.
- `pushswap.sorting.sort_stacks` picks a strategy by the size of `a`;
  `sort_three`, `sort_small` and `greedy_sort` can also be called directly.
- `pushswap.parsing.parse_arguments` turns command-line strings into a list
  of integers and raises `pushswap.parsing.ParseError` on invalid input.

## What it does not do

The package only produces a sequence of operations. It does not read a
sequence of operations back in to check whether it sorts a given input.