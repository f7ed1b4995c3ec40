"""Struct drills: colours, order templates and shipping packages."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassic:
    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    red: int
    green: int
    blue: int


class UnitLike:
    """A value that carries no data."""

    def __repr__(self):
        return "UnitLike"

    def __eq__(self, other):
        return isinstance(other, UnitLike)

    def __hash__(self):
        return hash(UnitLike)


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template():
    """Return the template order that new orders are made from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self):
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self):
        """Whether the package crosses a border."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram):
        """Shipping fees in cents for the package's weight."""
        return cents_per_gram * self.weight_in_grams