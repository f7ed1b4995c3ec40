"""Iterator drills: capitalising words, checked division, factorials, counting."""

import enum
import math

_U64_MAX = 2**64 - 1


def capitalize_first(text):
    """Upper-case the first character of ``text``."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words):
    """Capitalise each word and return the list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words):
    """Capitalise each word and join them into one string."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """Base class for errors from ``divide``."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend, divisor):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other):
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self):
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self, message="division by zero"):
        super().__init__(message)


def divide(a, b):
    """Return ``a / b`` when ``a`` is evenly divisible by ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def result_with_list():
    """Divide each number by 27; raise the first DivisionError met."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _try_divide(a, b):
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results():
    """Divide each number by 27, keeping either the quotient or the error."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]


def factorial(num):
    """Return ``num!`` for an unsigned 64-bit ``num``."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping, value):
    """Count entries of ``mapping`` whose progress equals ``value``."""
    return list(mapping.values()).count(value)


def count_iterator(mapping, value):
    """Count entries of ``mapping`` whose progress equals ``value``."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(collection, value):
    """Count matching entries across every mapping in ``collection``."""
    total = 0
    for mapping in collection:
        total += list(mapping.values()).count(value)
    return total


def count_collection_iterator(collection, value):
    """Count matching entries across every mapping in ``collection``."""
    return sum(count_iterator(mapping, value) for mapping in collection)