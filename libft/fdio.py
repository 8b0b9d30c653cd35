"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = [
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
    "putchar",
    "putstr",
]


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` to ``stream``; ``None`` writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing at all."""
    if s is None:
        return
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of the integer ``n`` to ``stream``."""
    stream.write(str(int(n)))


def putchar(c: str) -> None:
    """Write the single character ``c`` to standard output."""
    putchar_fd(c, sys.stdout)


def putstr(s: Optional[str]) -> None:
    """Write ``s`` to standard output; ``None`` writes nothing."""
    putstr_fd(s, sys.stdout)