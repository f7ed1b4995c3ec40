"""Vector drills: arrays alongside lists, and doubling every element."""


def array_and_vec():
    """Return the same four numbers as a tuple and as a list."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values):
    """Double every element of ``values`` in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values):
    """Return a new list holding every element of ``values`` doubled."""
    return [value * 2 for value in values]