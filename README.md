# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a small set of
operations. It prints each operation it uses on its own line. The operations
are `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb` and `rrr`.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
```

You can pass the numbers as separate arguments, as one quoted string, or mix
the two. All arguments are joined and then split on spaces:

```
push_swap "5 1 4 2 3"
```

Output of `push_swap 2 1`:

```
sa
```

Rules:

- If the input is already sorted, nothing is printed.
- The command prints `Error` and exits with status 0 when:
  - a word holds a character other than a digit, `+` or `-`;
  - two values are equal;
  - a value lies outside the 32-bit signed range;
  - the arguments contain no words at all.
- With a single value, nothing is sorted. The exit status is the low byte of
  that value. A value beyond ±2147483646 prints `Error`.

How the values are sorted:

- Two or three values: a fixed sequence of `sa`, `ra` and `rra`.
- Four or five values: the smallest values are pushed to `b`, the rest is
  sorted, and the values are pushed back.
- More than five values: a binary radix sort on the ranks of the values.

## Library use

```python
from pushswap.sorting import push_swap
from pushswap.stacks import Stacks
from pushswap.parsing import parse_numbers, join_arguments

push_swap([2, 1])                # ['sa']
push_swap([1, 2, 3])             # []

ops = []
stacks = Stacks([3, 1, 2], ops.append)
stacks.ra()
ops                              # ['ra']
list(stacks.a)                   # [1, 2, 3]

parse_numbers(join_arguments(["3 1", "2"]))   # [3, 1, 2]
```

Modules:

- `pushswap.stacks` – `Stacks`, holding the deques `a` and `b` (index 0 is the
  top) and one method per operation. Each method passes the operation's name to
  the `emit` callback. `pa` and `pb` do nothing, and emit nothing, when the
  source stack is empty.
- `pushswap.sorting` – `sort_two_three`, `sort_four_five`, `radix_sort`,
  `sort_stacks` and `push_swap`, which returns the list of operations.
- `pushswap.parsing` – `split_words`, `atoi`, `is_number_char`,
  `join_arguments`, `parse_numbers`, `parse_single`, `minimum`, `normalize`,
  `max_bits` and `is_sorted`. Rejected input raises `ParseError`, a subclass of
  `ValueError`.
- `pushswap.printf` – `format_printf` returns the formatted text and `printf`
  writes it to standard output. Both support `%c %s %d %i %p %u %x %X %%`. Both
  hexadecimal conversions print upper-case digits.
- `pushswap.cli` – `run(args)` does the same steps as the command and returns
  the exit status. `main(argv=None)` is the command's entry point.

## What it does not do

The package only produces operations. It does not read a list of operations
and check whether they sort a given input.

## Tests

```
pip install .[test]
pytest
```