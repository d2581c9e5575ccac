# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of stack operations. It prints the operations it performs, one
per line. Replaying them on the input leaves stack `a` in ascending order,
with the smallest number on top.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | take the top of `b` and put it on `a`, or the top of `a` and put it on `b` |
| `ra`, `rb`, `rr` | rotate up, so the top element becomes the bottom one |
| `rra`, `rrb`, `rrr` | rotate down, so the bottom element becomes the top one |

An operation on a stack that is too small for it changes nothing.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as a single argument separated
by spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The same command is available as `python -m pushswap.cli`.

When there is a single argument it is split on spaces; when there are
several, each argument must be exactly one number. Each number must be an
optional `+` or `-` followed by decimal digits, and must fit in a 32-bit
signed integer. No two numbers may be equal (so `0` and `-0` count as
duplicates). If any of these rules is broken, the command prints `Error`
(with no trailing newline) and exits with status 1.

Input that is already sorted produces no output. So does running the
command with no arguments, or with a single argument that holds only
spaces.

## Library

```python
from pushswap.parsing import InputError, parse_stack, split_arguments
from pushswap.sorting import sort_numbers
from pushswap.stacks import Stacks

numbers = parse_stack(split_arguments(["3 2 1"]))  # raises InputError on bad input
operations = sort_numbers(numbers)                  # ["ra", "sa"]

stacks = Stacks([2, 1, 3])
stacks.sa()
stacks.a       # [1, 2, 3]
stacks.moves   # ["sa"]
```

- `pushswap.stacks.Stacks` holds both stacks as lists, top first, in
  `a` and `b`. Each of its methods `sa`, `sb`, `ss`, `pa`, `pb`, `ra`,
  `rb`, `rr`, `rra`, `rrb`, `rrr` carries out the operation of the same
  name and appends its name to `moves`.
- `pushswap.parsing` provides `split_arguments`, `parse_stack`,
  `is_valid_syntax`, `parse_number`, `has_duplicates` and the
  `InputError` exception (a `ValueError`).
- `pushswap.sorting` provides `sort_numbers`, which returns the list of
  moves, and `sort_stacks`, which sorts a `Stacks` in place. Two elements
  are sorted with at most one `sa`, three with a short fixed sequence;
  larger inputs are moved to `b` one by one, each time choosing the
  element that needs the fewest rotations, and are then pushed back.

## What it does not do

The package only produces moves. It does not read a list of moves back
in to check whether they sort a given input.