"""Trait drills: appending "Bar", shared licensing info and a generic wrapper."""

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or as a new item to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str):
    return value + "Bar"


@append_bar.register
def _(value: list):
    return [*value, "Bar"]


class Licensed:
    """Anything that can describe its licence."""

    def licensing_info(self):
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software, software_two):
    """Whether two licensed items give the same licensing info."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class Wrapper(Generic[T]):
    value: T