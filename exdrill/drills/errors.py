"""Error-handling drills: name tags, token costs and positive integers."""

import string
from dataclasses import dataclass


def _parse_int(text, bits):
    """Parse a signed integer strictly: optional sign, ASCII digits, fixed width."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    negative = False
    digits = text
    if text[0] in "+-":
        if len(text) == 1:
            raise ValueError("invalid digit found in string")
        negative = text[0] == "-"
        digits = text[1:]
    if any(ch not in string.digits for ch in digits):
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name):
    """Return name-tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)


def total_cost(item_quantity):
    """Tokens needed for the typed quantity; raise ValueError if it is not a number."""
    qty = _parse_int(item_quantity, 32)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens, item_quantity):
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Base class for errors creating a PositiveNonzeroInteger."""


class NegativeError(CreationError):
    def __init__(self, message="number is negative"):
        super().__init__(message)


class ZeroError(CreationError):
    def __init__(self, message="number is zero"):
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Raised when text is not a number or not a positive nonzero one.

    ``error`` holds the underlying parse or creation error.
    """

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text):
    """Parse text into a PositiveNonzeroInteger, raising ParsePosNonzeroError."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc