"""Solutions to the error handling exercises."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SIGNED = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed decimal integer that must fit in ``bits`` bits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


class EmptyNameError(ValueError):
    """Raised when a name tag is requested for an empty name."""


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag; empty names are refused."""
    if not name:
        raise EmptyNameError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def total_cost(item_quantity: str) -> int:
    """Total token cost of buying the typed quantity of items."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> str:
    """Try to buy the items with the given tokens and describe the outcome."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """Raised when a PositiveNonzeroInteger cannot be created."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly positive."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be parsed as a PositiveNonzeroInteger.

    ``cause`` is the CreationError or the integer parsing ValueError.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive, nonzero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc