"""Solutions to the struct exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

_MIN_WEIGHT_IN_GRAMS = 10


@dataclass
class ColorClassicStruct:
    """A colour with named channels."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour whose channels are reached by position."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True, repr=False)
class UnitLikeStruct:
    """A value with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"


@dataclass
class Order:
    """An order placed by a customer."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the template order other orders are built from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A package to ship; it must weigh at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_WEIGHT_IN_GRAMS:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """Return True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fee in cents for the given rate."""
        return self.weight_in_grams * cents_per_gram