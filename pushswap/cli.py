"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_stack, split_arguments
from pushswap.sorting import sort_numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line, or ``Error`` for invalid input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    tokens = split_arguments(args)
    if not tokens:
        return 0
    try:
        numbers = parse_stack(tokens)
    except InputError:
        sys.stdout.write("Error")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in sort_numbers(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())