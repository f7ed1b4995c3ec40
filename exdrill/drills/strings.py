"""String drills: colour words, trimming, composing, replacing and comparing."""


def current_favorite_color():
    return "blue"


def is_a_color_word(attempt):
    """Whether ``attempt`` is one of the known colour words."""
    return attempt in ("green", "blue", "red")


def trim_me(text):
    """Strip leading and trailing whitespace."""
    return text.strip()


def compose_me(text):
    return text + " world!"


def replace_me(text):
    return text.replace("cars", "balloons")


def longest(x, y):
    """Return the longer string by UTF-8 length; ``y`` when they are equal."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y