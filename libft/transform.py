"""Building new strings from old ones: slicing, joining, trimming, splitting, mapping.

Strings follow C semantics: text after the first NUL character is ignored.
Functions given ``None`` where a string is expected return ``None``.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from libft.strings import strdup

__all__ = ["substr", "strjoin", "strtrim", "split", "strmapi", "striteri"]

_NUL = "\0"


def _separator(sep: Union[int, str]) -> str:
    if isinstance(sep, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(sep, int):
        return chr(sep)
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    raise TypeError(f"expected an int or a one-character str, got {type(sep).__name__}")


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` beginning at index ``start``.

    A ``start`` beyond the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if s is None:
        return None
    text = strdup(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``; a missing side counts as empty, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    return strdup(s1 or "") + strdup(s2 or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    if s is None or charset is None:
        return None
    return strdup(s).strip(strdup(charset))


def split(s: Optional[str], sep: Union[int, str]) -> Optional[List[str]]:
    """The non-empty runs of ``s`` that lie between occurrences of ``sep``."""
    separator = _separator(sep)
    if s is None:
        return None
    text = strdup(s)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """A new string whose i-th character is ``f(i, s[i])``."""
    if s is None or f is None:
        return None
    return strdup("".join(f(index, char) for index, char in enumerate(strdup(s))))


def striteri(
    s: Optional[str], f: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """Call ``f(i, s[i])`` for every character and apply the replacements it returns.

    ``f`` may return a new character for position ``i`` or ``None`` to keep
    the character as it is. Without ``f`` the string comes back unchanged.
    """
    if s is None:
        return None
    text = strdup(s)
    if f is None:
        return text
    chars = list(text)
    for index, char in enumerate(text):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement
    return strdup("".join(chars))