"""Option drill: how much ice cream is left at a given hour."""


def maybe_icecream(time_of_day):
    """Pieces of ice cream left at ``time_of_day`` (24-hour), or None past 24."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day < 22:
        return 5
    if time_of_day <= 24:
        return 0
    return None