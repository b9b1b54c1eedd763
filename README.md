# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations, and verify any sequence of those operations.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

An operation on a stack too small for it does nothing.

## Install

```
pip install .
```

## Command line

Print a sequence of operations that sorts the numbers, one per line:

```
push_swap 3 2 5 1 4
```

Each argument must be a decimal integer written without a plus sign, without
leading zeros and not as `-0`, and no argument may be repeated. Numbers too
large for a 32-bit signed integer are refused when the overflow is detected.
On bad input `Error` is printed to standard error and the exit status is 1.
With no arguments, or with numbers already in ascending order, nothing is
printed.

Check a sequence of operations read from standard input, one per line:

```
push_swap 3 2 5 1 4 | checker 3 2 5 1 4
```

`checker` prints `OK` (in green) when stack `a` ends up sorted and `b` is
empty, and `KO` (in red) otherwise. The arguments are validated as for
`push_swap`; an invalid argument or an unknown operation name is reported as
`Error` on standard error with exit status 1. A last line that is not ended
by a newline is not read.

## Library

```python
from pushswap.solver import solve
from pushswap.cli import run_checker
from pushswap.stacks import Stacks

moves = solve([3, 2, 5, 1, 4])
assert run_checker([3, 2, 5, 1, 4], moves)

stacks = Stacks([2, 1])
stacks.apply("sa")
assert stacks.is_sorted()
```

- `pushswap.solver`: `solve(values)` returns the operation names;
  `assign_order`, `sort_small` and `sort_big` work on a `Stacks` directly.
  Stacks of up to five numbers use fixed strategies; larger ones are
  partitioned through `b` in groups.
- `pushswap.stacks`: `Stacks` with one method per operation, `apply(name)`,
  `values_a()`, `values_b()` and `is_sorted()`; `is_valid_command(name)`.
  Pass a text stream as `output` to have each performed operation written to it.
- `pushswap.parsing`: `parse_arguments(args)` raises `InputError` on bad input;
  also `is_valid_number`, `has_duplicates` and `is_ascending`.
- `pushswap.cli`: `run_checker(values, commands)` and the two command
  entry points, `push_swap_main` and `checker_main`.

Supporting modules: `chartools` (ASCII classification), `bytetools`
(byte-buffer fill, copy, search, compare), `strtools` (string helpers,
including a 32-bit `atoi`), `linkedlist` (`LinkedList` and `Node`),
`printing` (writing to a text stream) and `linereader` (`LineReader` and
`read_lines`, reading a stream in fixed-size chunks).

## Tests

```
pip install .[test]
pytest
```