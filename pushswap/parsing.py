"""Turning command-line arguments into the numbers of stack ``a``."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -2_147_483_648
INT_MAX = 2_147_483_647

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_SYNTAX = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def parse_number(text: str) -> int:
    """Read the integer at the start of ``text`` the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is honoured and digits
    are read until the first non-digit. Text with no digits yields 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def is_valid_syntax(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by one or more digits."""
    return _SYNTAX.fullmatch(text) is not None


def has_duplicates(tokens: Iterable[str]) -> bool:
    """Tell whether two tokens denote the same number."""
    seen: set[int] = set()
    for token in tokens:
        value = parse_number(token)
        if value in seen:
            return True
        seen.add(value)
    return False


def split_arguments(args: Sequence[str]) -> list[str]:
    """Return the tokens given on the command line.

    A single argument is split on spaces, so ``"3 2 1"`` gives three tokens;
    several arguments are taken one token each, as they are.
    """
    if len(args) == 1:
        return [token for token in args[0].split(" ") if token]
    return list(args)


def parse_stack(tokens: Sequence[str]) -> list[int]:
    """Validate ``tokens`` and return them as the numbers of stack ``a``.

    Every token must be a signed decimal integer that fits in 32 bits, and no
    number may appear twice; otherwise :class:`InputError` is raised.
    """
    for token in tokens:
        if not is_valid_syntax(token):
            raise InputError(f"not an integer: {token!r}")
        value = parse_number(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
    if has_duplicates(tokens):
        raise InputError("duplicate numbers")
    return [parse_number(token) for token in tokens]