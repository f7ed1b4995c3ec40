"""Sharing drills: a cons list, copy-on-write absolute values, parallel sums."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell; ``rest`` is the next cell, or None for the end of the list."""

    value: int
    rest: "Cons | None" = None


def create_empty_list():
    return None


def create_non_empty_list():
    return Cons(0, None)


def abs_all(values):
    """Absolute values of ``values``.

    The input is returned as-is when nothing is negative; otherwise a new
    list is built, leaving the input untouched.
    """
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]


def offset_sums(numbers, workers=8):
    """Sum, in one thread per offset, the numbers equal to the offset modulo ``workers``."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset):
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))