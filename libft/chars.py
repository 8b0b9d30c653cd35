"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. Classification functions return a bool. Case conversion returns
a value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "isalpha",
    "isupper",
    "islower",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "ispunct",
    "isxdigit",
    "toupper",
    "tolower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def isupper(c: CharLike) -> bool:
    """True for 'A' through 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def islower(c: CharLike) -> bool:
    """True for 'a' through 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    return isupper(c) or islower(c)


def isdigit(c: CharLike) -> bool:
    """True for '0' through '9'."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the range 0x00..0x7f."""
    return 0x00 <= _code(c) <= 0x7F


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 0x20 <= _code(c) <= 0x7E


def ispunct(c: CharLike) -> bool:
    """True for a printable character that is neither alphanumeric nor space."""
    return isprint(c) and not isalnum(c) and _code(c) != ord(" ")


def isxdigit(c: CharLike) -> bool:
    """True for a hexadecimal digit in either case."""
    code = _code(c)
    return (
        ord("0") <= code <= ord("9")
        or ord("a") <= code <= ord("f")
        or ord("A") <= code <= ord("F")
    )


def toupper(c: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; leave anything else alone."""
    if not islower(c):
        return c
    upper = _code(c) - _CASE_OFFSET
    return chr(upper) if isinstance(c, str) else upper


def tolower(c: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; leave anything else alone."""
    if not isupper(c):
        return c
    lower = _code(c) + _CASE_OFFSET
    return chr(lower) if isinstance(c, str) else lower