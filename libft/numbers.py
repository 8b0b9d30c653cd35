"""Conversions between integers and their decimal text."""

from __future__ import annotations

from itertools import takewhile
from typing import Union

from libft.chars import isdigit

__all__ = ["isspace", "atoi", "itoa", "ltoa"]

_WHITESPACE = " \f\n\r\t\v"

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1


def isspace(c: Union[int, str]) -> bool:
    """True for space, form feed, newline, carriage return, tab and vertical tab."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return 0 <= c < 0x110000 and chr(c) in _WHITESPACE
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c in _WHITESPACE
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(s: str) -> int:
    """Parse a leading decimal integer, as C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text with no digits gives 0.
    The result wraps around to a 32-bit signed integer.
    """
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    if not digits:
        return 0
    return _wrap_int32(sign * int(digits))


def _to_decimal(n: int, low: int, high: int, kind: str) -> str:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not low <= n <= high:
        raise OverflowError(f"{n} does not fit in a {kind}")
    return str(n)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    return _to_decimal(n, _INT_MIN, _INT_MAX, "32-bit signed integer")


def ltoa(n: int) -> str:
    """Decimal text of a 64-bit signed integer."""
    return _to_decimal(n, _LONG_MIN, _LONG_MAX, "64-bit signed integer")