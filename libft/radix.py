"""Hexadecimal text of integers and addresses."""

from __future__ import annotations

from typing import Optional

__all__ = ["ltox", "ptox"]

_LONG_MAX = 2**63 - 1
_UINTPTR_MAX = 2**64 - 1


def _check_int(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected a non-negative value, got {n}")


def ltox(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative 64-bit signed integer."""
    _check_int(n)
    if n > _LONG_MAX:
        raise OverflowError(f"{n} does not fit in a 64-bit signed integer")
    return format(n, "X" if upper else "x")


def ptox(address: int) -> Optional[str]:
    """Lower-case hexadecimal digits of an address; None for address 0."""
    _check_int(address)
    if address > _UINTPTR_MAX:
        raise OverflowError(f"{address} does not fit in a 64-bit address")
    if address == 0:
        return None
    return format(address, "x")