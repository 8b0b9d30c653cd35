"""C-style string inspection, comparison and copying.

Strings follow C semantics: a string ends at its first NUL character
(``"\\0"``), and anything after it is ignored. Searches return an index
into the string rather than a pointer, or ``None`` when nothing is found.
Since Python strings are immutable, the copying functions return the
resulting text instead of writing into a buffer.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strnlen",
    "strchr",
    "strrchr",
    "strcmp",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strncpy",
    "strdup",
    "strndup",
]

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: Union[int, str]) -> str:
    """Return the character named by a code point or a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_count(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strnlen(s: Optional[str], maxlen: int) -> int:
    """Like ``strlen`` but never more than ``maxlen``; ``None`` counts as 0."""
    _check_count("maxlen", maxlen)
    if s is None:
        return 0
    return min(strlen(s), maxlen)


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first occurrence of ``c``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text, ch = _cstr(s), _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last occurrence of ``c``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text, ch = _cstr(s), _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(pairs) -> int:
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return _compare(zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like ``strcmp`` but looks at no more than ``n`` characters."""
    _check_count("n", n)
    pairs = zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL)
    return _compare(islice(pairs, n))


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is
    no occurrence lying wholly inside the first ``length`` characters.
    """
    _check_count("length", length)
    haystack, needle = _cstr(big), _cstr(little)
    if not needle:
        return 0
    limit = min(length, len(haystack)) - len(needle)
    for start in range(limit + 1):
        if haystack.startswith(needle, start):
            return start
    return None


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length of ``src``. With ``size``
    zero nothing is written and ``dst`` comes back unchanged.
    """
    _check_count("size", size)
    source = _cstr(src)
    if size == 0:
        return dst, len(source)
    return source[:size - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had: ``min(strlen(dst), size) + strlen(src)``. When ``dst`` already
    fills the buffer it comes back unchanged.
    """
    _check_count("size", size)
    source = _cstr(src)
    if not isinstance(dst, str):
        raise TypeError(f"expected a str, got {type(dst).__name__}")
    dst_len = strnlen(dst, size)
    if dst_len >= size:
        return dst, size + len(source)
    head = dst[:dst_len]
    return head + source[:size - dst_len - 1], dst_len + len(source)


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: ``src`` cut to ``n`` and padded with NULs."""
    _check_count("n", n)
    return _cstr(src)[:n].ljust(n, _NUL)


def strdup(s: str) -> str:
    """Copy of ``s`` up to its terminator."""
    return _cstr(s)


def strndup(s: str, n: int) -> str:
    """Copy of at most the first ``n`` characters of ``s``."""
    _check_count("n", n)
    return _cstr(s)[:n]