"""Sign, prefix and padding layout of one converted field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from libft.spec import Flag, Spec

__all__ = [
    "Field",
    "sign_and_abs",
    "zero_padding",
    "space_padding",
    "digit_length",
    "pad",
    "render",
]


@dataclass
class Field:
    """The parts of one converted field before it is written out.

    ``value`` decides whether ``prefix`` is shown: it is left out for 0.
    ``prefix`` is None for conversions that have no prefix at all.
    """

    value: int = 0
    sign: str = ""
    prefix: Optional[str] = None
    body: str = ""
    zero_pad: int = 0
    space_pad: int = 0
    digit_len: int = 0

    @property
    def output_len(self) -> int:
        """Total number of characters the field takes."""
        return self.space_pad + self.digit_len


def _prefix_len(prefix: Optional[str]) -> int:
    # A missing prefix is measured as -1, as the length of a null string is.
    return -1 if prefix is None else len(prefix)


def _zero_flag_applies(spec: Spec) -> bool:
    return (
        Flag.ZERO_PADD in spec.flags
        and spec.precision is None
        and Flag.LEFT_JUST not in spec.flags
    )


def sign_and_abs(value: int, flags: Flag) -> Tuple[str, int]:
    """The sign character to show for ``value`` and its absolute value."""
    if value < 0:
        return "-", -value
    if Flag.SIGNED in flags:
        return "+", value
    if Flag.BLANK_POS in flags:
        return " ", value
    return "", value


def zero_padding(field: Field, spec: Spec) -> int:
    """Number of zeros to put before the body.

    With the '0' flag in effect this also sets ``field.digit_len``; with a
    precision of 0 and a value of 0 the body and sign are emptied.
    """
    if _zero_flag_applies(spec):
        field.digit_len = len(field.body) + bool(field.sign) + _prefix_len(field.prefix)
        if spec.width is not None and spec.width > field.digit_len:
            return spec.width - field.digit_len
        return 0
    if spec.precision == 0 and field.value == 0:
        field.body = ""
        field.sign = ""
    if spec.precision is not None and spec.precision > len(field.body):
        return spec.precision - len(field.body)
    return 0


def space_padding(spec: Spec, field: Field) -> int:
    """Number of spaces needed to bring the field up to the width."""
    if _zero_flag_applies(spec):
        return 0
    if spec.width is not None and spec.width > field.digit_len:
        return spec.width - field.digit_len
    return 0


def digit_length(field: Field) -> int:
    """Length of sign, shown prefix, zero padding and body together."""
    return (
        bool(field.sign)
        + _prefix_len(field.prefix) * (field.value != 0)
        + field.zero_pad
        + len(field.body)
    )


def pad(c: str, n: int) -> str:
    """``n`` copies of the character ``c``; nothing when ``n`` is not positive."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c * n if n > 0 else ""


def render(field: Field, spec: Spec) -> str:
    """The field's text, spaces after it when left-justified, before it otherwise."""
    prefix = field.prefix if field.value != 0 and field.prefix else ""
    core = field.sign + prefix + pad("0", field.zero_pad) + field.body
    spaces = pad(" ", field.space_pad)
    if Flag.LEFT_JUST in spec.flags:
        return core + spaces
    return spaces + core