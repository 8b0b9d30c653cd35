"""Parsing and resolving printf conversion specifications."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional, Tuple

__all__ = [
    "Flag",
    "Conversion",
    "Spec",
    "FormatError",
    "parse_spec",
    "resolve_spec",
    "pop_arg",
]

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_UINT_MASK = 2**32 - 1
_UINTPTR_MASK = 2**64 - 1
_DIGITS = frozenset("0123456789")


class FormatError(ValueError):
    """A format string or its arguments cannot be converted."""


class Flag(enum.IntFlag):
    """Flags that modify a conversion."""

    ALT_FORM = 0b00000001
    BLANK_POS = 0b00000010
    SIGNED = 0b00000100
    LEFT_JUST = 0b00001000
    ZERO_PADD = 0b00010000
    WIDTH_ARG = 0b00100000
    PREC_ARG = 0b01000000


class Conversion(enum.Enum):
    """The kind of value a specification converts."""

    CHAR = 1
    DEC = 2
    U_INT = 3
    HEX_LOW = 4
    HEX_UP = 5
    STR = 6
    PTR = 7
    PERCENT = 8


_FLAG_CHARS = {
    "#": Flag.ALT_FORM,
    " ": Flag.BLANK_POS,
    "+": Flag.SIGNED,
    "-": Flag.LEFT_JUST,
    "0": Flag.ZERO_PADD,
}

_CONVERSIONS = {
    "c": Conversion.CHAR,
    "d": Conversion.DEC,
    "i": Conversion.DEC,
    "u": Conversion.U_INT,
    "x": Conversion.HEX_LOW,
    "X": Conversion.HEX_UP,
    "s": Conversion.STR,
    "p": Conversion.PTR,
    "%": Conversion.PERCENT,
}


@dataclass(frozen=True)
class Spec:
    """One conversion specification.

    ``width`` and ``precision`` are None when the format gives none.
    """

    flags: Flag = Flag(0)
    width: Optional[int] = None
    precision: Optional[int] = None
    conversion: Conversion = Conversion.PERCENT


def _at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _parse_number(fmt: str, pos: int, what: str) -> Tuple[int, int]:
    value = 0
    while _at(fmt, pos) in _DIGITS and pos < len(fmt):
        digit = ord(fmt[pos]) - ord("0")
        if value > (_INT_MAX - digit) // 10:
            raise FormatError(f"{what} too large at position {pos}")
        value = value * 10 + digit
        pos += 1
    return value, pos


def parse_spec(fmt: str, pos: int) -> Tuple[Spec, int]:
    """Parse the specification starting at ``pos``, just after a '%'.

    Returns the specification and the position following it. An unknown
    conversion character is treated as '%' and is left unconsumed.
    """
    if not 0 <= pos <= len(fmt):
        raise IndexError(f"position {pos} outside format of length {len(fmt)}")
    flags = Flag(0)
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        flags |= _FLAG_CHARS[fmt[pos]]
        pos += 1

    width: Optional[int] = None
    if _at(fmt, pos) == "*":
        flags |= Flag.WIDTH_ARG
        pos += 1
    elif pos < len(fmt) and fmt[pos] in _DIGITS:
        width, pos = _parse_number(fmt, pos, "width")

    precision: Optional[int] = None
    if _at(fmt, pos) == ".":
        pos += 1
        if _at(fmt, pos) == "*":
            flags |= Flag.PREC_ARG
            pos += 1
        else:
            precision, pos = _parse_number(fmt, pos, "precision")

    conversion = _CONVERSIONS.get(_at(fmt, pos)) if pos < len(fmt) else None
    if conversion is None:
        conversion = Conversion.PERCENT
    else:
        pos += 1
    return Spec(flags, width, precision, conversion), pos


def _to_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def _take(args: Iterator[Any], what: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for {what}") from None


def _take_int(args: Iterator[Any], what: str) -> int:
    value = _take(args, what)
    if not isinstance(value, int):
        raise TypeError(f"{what} argument must be an int, got {type(value).__name__}")
    return _to_int32(value)


def resolve_spec(spec: Spec, args: Iterator[Any]) -> Spec:
    """Fill a '*' width and precision from ``args``, width first.

    A negative width turns on left justification. The most negative
    int as width leaves the width unset; a precision of -1 means none.
    """
    flags, width, precision = spec.flags, spec.width, spec.precision
    if Flag.WIDTH_ARG in flags:
        given = _take_int(args, "width")
        if given == _INT_MIN:
            width = None
        elif given < 0:
            flags |= Flag.LEFT_JUST
            width = -given
        else:
            width = given
    if Flag.PREC_ARG in flags:
        given = _take_int(args, "precision")
        precision = None if given == -1 else given
    return replace(spec, flags=flags, width=width, precision=precision)


def pop_arg(conversion: Conversion, args: Iterator[Any]) -> Any:
    """Take the value ``conversion`` needs from ``args``.

    Integers are reduced to the C type the conversion reads; a string is
    returned as given, None standing for a null string; a pointer is an
    integer address, None counting as 0. '%' takes nothing.
    """
    if conversion is Conversion.PERCENT:
        return None
    value = _take(args, conversion.name.lower())
    if conversion is Conversion.CHAR:
        if isinstance(value, str) and len(value) == 1:
            return ord(value)
        if isinstance(value, int):
            return _to_int32(value)
        raise TypeError(f"character argument must be an int or one character, got {value!r}")
    if conversion is Conversion.DEC:
        if not isinstance(value, int):
            raise TypeError(f"integer argument expected, got {type(value).__name__}")
        return _to_int32(value)
    if conversion in (Conversion.U_INT, Conversion.HEX_LOW, Conversion.HEX_UP):
        if not isinstance(value, int):
            raise TypeError(f"integer argument expected, got {type(value).__name__}")
        return value & _UINT_MASK
    if conversion is Conversion.STR:
        if value is not None and not isinstance(value, str):
            raise TypeError(f"string argument expected, got {type(value).__name__}")
        return value
    if value is None:
        return 0
    if not isinstance(value, int):
        raise TypeError(f"pointer argument must be an int address, got {type(value).__name__}")
    return value & _UINTPTR_MASK