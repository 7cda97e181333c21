"""
Hidden entry recoloring.

Hidden directories always get the ``dotdir`` color. Hidden files get the
``dotfile`` color only if ``ls`` did not color them (executables, symlinks,
archives etc. keep their ``LS_COLORS`` look).
"""

import os

from ls_override import config
from ls_override.ansi import has_color, paint, strip_ansi

HIDDEN_MARKER = "."


def is_hidden(name):
    return name.startswith(HIDDEN_MARKER)


def _is_directory(name, root):
    # Names missing under root are looked up from the CWD instead.
    # os.path.isdir returns False for paths that vanished or can't be stat'ed
    if root:
        path = os.path.join(root, name)
        if os.path.lexists(path):
            return os.path.isdir(path)
    return os.path.isdir(name)


def recolor_entry(raw, root=None, name_colors=config.NAME_COLORS, reset=config.RESET):
    """
    Recolor a single entry if its visible name is hidden.

    Args:
        raw (str): Entry as printed by the listing source.
        root (str): Directory the entry lives in. None means the CWD.
        name_colors (Mapping): Must provide "dotdir" and "dotfile".
        reset (str): Sequence appended after the recolored name.

    Returns:
        str: The recolored entry, or ``raw`` unchanged.
    """
    name = strip_ansi(raw)
    if not is_hidden(name):
        return raw

    if _is_directory(name, root):
        return paint(name, name_colors["dotdir"], reset)

    if has_color(raw):
        return raw
    return paint(name, name_colors["dotfile"], reset)


def recolor_entries(entries, root=None):
    """Recolor a listing. Output has the same length and order as the input."""
    return [recolor_entry(raw, root) for raw in entries]
