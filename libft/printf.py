"""Formatted output for the c, d, i, u, x, X, s, p and % conversions.

Text is built one conversion at a time. Errors in the format or its
arguments raise ``FormatError``. Arguments of the wrong type raise
``TypeError``.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, TextIO

from libft.layout import (
    Field,
    digit_length,
    render,
    sign_and_abs,
    space_padding,
    zero_padding,
)
from libft.numbers import ltoa
from libft.radix import ltox, ptox
from libft.spec import (
    Conversion,
    Flag,
    FormatError,
    Spec,
    parse_spec,
    pop_arg,
    resolve_spec,
)
from libft.strings import strdup

__all__ = ["format_arg", "sformat", "printf"]

_INT_MAX = 2**31 - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _finish(field: Field, spec: Spec, measure: Callable[[Field], int]) -> str:
    field.zero_pad = zero_padding(field, spec)
    field.digit_len = measure(field)
    field.space_pad = space_padding(spec, field)
    return render(field, spec)


def _format_char(spec: Spec, code: int) -> str:
    byte = code & 0xFF
    field = Field(value=byte, body=chr(byte), digit_len=1)
    field.space_pad = space_padding(spec, field)
    return render(field, spec)


def _format_dec(spec: Spec, value: int) -> str:
    sign, magnitude = sign_and_abs(value, spec.flags)
    field = Field(value=magnitude, sign=sign, body=ltoa(magnitude))
    return _finish(
        field, spec, lambda f: bool(f.sign) + f.zero_pad + len(f.body)
    )


def _format_unsigned(spec: Spec, value: int) -> str:
    field = Field(value=value, body=ltoa(value))
    return _finish(field, spec, lambda f: f.zero_pad + len(f.body))


def _format_hex(spec: Spec, value: int) -> str:
    upper = spec.conversion is Conversion.HEX_UP
    prefix = ""
    if Flag.ALT_FORM in spec.flags:
        prefix = "0X" if upper else "0x"
    field = Field(value=value, prefix=prefix, body=ltox(value, upper))
    return _finish(field, spec, digit_length)


def _format_str(spec: Spec, text: Optional[str]) -> str:
    precision = spec.precision
    if text is None:
        shown_null = precision is not None and precision >= len(_NULL_STRING)
        body = _NULL_STRING if shown_null else ""
    else:
        body = strdup(text)
    if precision is not None and precision >= 0:
        body = body[:precision]
    field = Field(body=body, digit_len=len(body))
    field.space_pad = space_padding(spec, field)
    return render(field, spec)


def _format_ptr(spec: Spec, address: int) -> str:
    if Flag.SIGNED in spec.flags:
        sign = "+"
    elif Flag.BLANK_POS in spec.flags:
        sign = " "
    else:
        sign = ""
    body = ptox(address) or _NULL_POINTER
    field = Field(value=address, sign=sign, prefix="0x", body=body)
    return _finish(field, spec, digit_length)


def _format_percent(spec: Spec, arg: Any) -> str:
    return "%"


_FORMATTERS: Dict[Conversion, Callable[[Spec, Any], str]] = {
    Conversion.CHAR: _format_char,
    Conversion.DEC: _format_dec,
    Conversion.U_INT: _format_unsigned,
    Conversion.HEX_LOW: _format_hex,
    Conversion.HEX_UP: _format_hex,
    Conversion.STR: _format_str,
    Conversion.PTR: _format_ptr,
    Conversion.PERCENT: _format_percent,
}


def format_arg(spec: Spec, arg: Any) -> str:
    """Text of one argument converted by a resolved specification.

    ``arg`` is the value ``pop_arg`` gives for the conversion.
    """
    try:
        formatter = _FORMATTERS[spec.conversion]
    except KeyError:
        raise FormatError(f"unknown conversion {spec.conversion!r}") from None
    return formatter(spec, arg)


def _pieces(fmt: str, args: Iterable[Any]) -> Iterator[str]:
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    text = strdup(fmt)
    remaining = iter(args)
    pos = 0
    while pos < len(text):
        percent = text.find("%", pos)
        if percent < 0:
            yield text[pos:]
            return
        if percent > pos:
            yield text[pos:percent]
        spec, pos = parse_spec(text, percent + 1)
        spec = resolve_spec(spec, remaining)
        yield format_arg(spec, pop_arg(spec.conversion, remaining))


def _emit(fmt: str, args: Iterable[Any], sink: Callable[[str], Any]) -> int:
    total = 0
    for piece in _pieces(fmt, args):
        sink(piece)
        if len(piece) > _INT_MAX - total:
            raise FormatError("output longer than the largest int")
        total += len(piece)
    return total


def sformat(fmt: str, *args: Any) -> str:
    """The text ``printf`` would write for ``fmt`` and ``args``."""
    parts: list = []
    _emit(fmt, args, parts.append)
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written. Text produced before an
    error has already been written when the error is raised.
    """
    out = sys.stdout if stream is None else stream
    return _emit(fmt, args, out.write)