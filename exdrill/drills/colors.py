"""Colour drill: building an RGB colour from three integers, with checks."""

from dataclasses import dataclass


class IntoColorError(ValueError):
    """Base class for errors converting values into a colour."""


class ColorLengthError(IntoColorError):
    """The values did not number exactly three."""


class ColorRangeError(IntoColorError):
    """A value lay outside 0..=255."""


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int


def color_from(values):
    """Build a Color from a sequence of three integers in 0..=255."""
    values = tuple(values)
    if len(values) != 3:
        raise ColorLengthError(f"expected 3 values, got {len(values)}")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"colour values must be integers, not {value!r}")
        if not 0 <= value <= 255:
            raise ColorRangeError(f"value {value} is outside 0..=255")
    red, green, blue = values
    return Color(red=red, green=green, blue=blue)