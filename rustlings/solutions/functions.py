"""Solutions to the function exercises."""

from __future__ import annotations


def ring_messages(num: int) -> list[str]:
    """Return one ring message per call, numbered from one."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    """Return True if ``num`` is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """Return ``num`` squared."""
    return num * num