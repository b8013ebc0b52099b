"""Command line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ParseError, join_arguments, parse_numbers, parse_single
from .printf import printf
from .sorting import push_swap


def _error() -> int:
    printf("Error\n")
    return 0


def run(args: Sequence[str]) -> int:
    """Parse ``args``, write the sorting instructions and return the exit status.

    A lone value is not sorted; its low byte becomes the exit status.
    """
    if not args:
        return 0
    words = join_arguments(args)
    if not words:
        return _error()
    if len(words) == 1:
        try:
            value = parse_single(words[0])
        except ParseError:
            return _error()
        return value & 0xFF
    try:
        values = parse_numbers(words)
    except ParseError:
        return _error()
    for name in push_swap(values):
        printf("%s\n", name)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run with ``argv`` or, by default, the process arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())