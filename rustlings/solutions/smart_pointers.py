"""Solutions to the smart pointer exercises: a cons list and clone-on-write."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    rest: Cons | Nil


List = Cons | Nil


def create_empty_list() -> List:
    """Return the empty cons list."""
    return Nil()


def create_non_empty_list() -> List:
    """Return a cons list holding one value."""
    return Cons(1, Nil())


class Cow:
    """Data that is borrowed until it must be changed, then copied once."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self.data = data
        self.owned = owned

    def to_mut(self) -> list[int]:
        """Return a mutable list, copying borrowed data first."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying only if something changes."""
    for i, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[i] = -value
    return cow