"""Basic drills: prices, parity, squares and simple branching."""


def is_even(num):
    return num % 2 == 0


def sale_price(price):
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num):
    return num * num


def bigger(a, b):
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish):
    """Map "fizz" to "foo", "fuzz" to "bar", anything else to "baz"."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"