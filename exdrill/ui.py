"""Terminal styling and the warning and success messages."""

import os

_CODES = {
    "bold": "1",
    "red": "31",
    "green": "32",
    "blue": "34",
}


def style(text, *args):
    """Wrap ``text`` in ANSI codes for the named styles (bold, red, green, blue)."""
    text = str(text)
    if not args:
        return text
    try:
        codes = ";".join(_CODES[name] for name in args)
    except KeyError as exc:
        raise ValueError(f"unknown style: {exc.args[0]}") from None
    return f"\x1b[{codes}m{text}\x1b[0m"


def _no_emoji():
    return "NO_EMOJI" in os.environ


def warn(message):
    """Print ``message`` in red behind a warning mark."""
    mark = "!" if _no_emoji() else "⚠️ "
    print(f"{style(mark, 'red')} {style(message, 'red')}")


def success(message):
    """Print ``message`` in green behind a check mark."""
    mark = "✓" if _no_emoji() else "✅"
    print(f"{style(mark, 'green')} {style(message, 'green')}")


def separator():
    """Return the bold rule printed around program output."""
    return style("====================", "bold")