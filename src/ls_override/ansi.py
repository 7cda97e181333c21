"""
ANSI escape helpers.

Only SGR sequences (``ESC [ ... m``) are recognized; that is all ``ls --color``
ever emits.
"""

import re

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

# Anything starting with this is treated as color output from the listing source.
ESCAPE_INTRODUCER = "\x1b["


def strip_ansi(text):
    """Remove color sequences, leaving the visible text."""
    return ANSI_RE.sub("", text)


def visible_len(text):
    return len(strip_ansi(text))


def has_color(text):
    """
    Report whether the listing source already colored an entry.

    This is a substring check for the escape introducer, not a full parse.
    An entry wrapped in a bare reset still counts as colored.
    """
    return ESCAPE_INTRODUCER in text


def paint(text, code, reset):
    return f"{code}{text}{reset}"
