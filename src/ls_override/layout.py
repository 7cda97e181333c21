"""
Column layout engine.

Entries are laid out column-major (filling down each column before moving
right), the same order ``ls -C`` uses. The column count is chosen by a
top-down search: the first count whose columns fit the terminal wins.

Total width is not monotonic in the column count (a different count shifts
which entries share a column), so the search tries every candidate instead
of bisecting.
"""

from collections import namedtuple

from ls_override.ansi import visible_len

DEFAULT_PADDING = 2


class Layout(namedtuple("Layout", ["columns", "rows", "widths"])):
    """
    One candidate grid.

    Attributes:
        columns (int): Number of columns, including any that end up empty.
        rows (int): ceil(entry_count / columns).
        widths (tuple): Maximum visible length per column (0 for empty ones).
    """

    __slots__ = ()

    def total_width(self, padding=DEFAULT_PADDING):
        return sum(self.widths) + padding * (self.columns - 1)


def plan_layout(lengths, columns):
    """
    Compute the Layout for a fixed column count.

    Args:
        lengths (list): Visible length of every entry, in listing order.
        columns (int): Candidate column count (>= 1).

    Returns:
        Layout
    """
    count = len(lengths)
    rows = (count + columns - 1) // columns
    widths = []
    for col in range(columns):
        chunk = lengths[col * rows:(col + 1) * rows]
        widths.append(max(chunk, default=0))
    return Layout(columns, rows, tuple(widths))


def best_layout(entries, term_width, padding=DEFAULT_PADDING):
    """
    Find the layout with the most columns that fits ``term_width``.

    Candidates run from min(N, term_width) down to 1. If nothing fits (an
    entry wider than the terminal), a single column is used.

    Returns:
        Layout, or None when there are no entries.
    """
    if not entries:
        return None

    lengths = [visible_len(e) for e in entries]
    max_cols = max(1, min(len(lengths), term_width))

    for columns in range(max_cols, 0, -1):
        layout = plan_layout(lengths, columns)
        if layout.total_width(padding) <= term_width:
            return layout
    return plan_layout(lengths, 1)


def render(entries, term_width, padding=DEFAULT_PADDING):
    """
    Lay out entries as rows of text.

    Every entry outside the last column is followed by
    ``width - visible_len + padding`` spaces (at least one), even when it
    ends its row. Entries keep their embedded color codes.

    Returns:
        list: One string per row, without trailing newlines.
    """
    layout = best_layout(entries, term_width, padding)
    if layout is None:
        return []

    count = len(entries)
    lines = []
    for row in range(layout.rows):
        parts = []
        for col in range(layout.columns):
            index = col * layout.rows + row
            if index >= count:
                break
            entry = entries[index]
            parts.append(entry)

            if col < layout.columns - 1:
                spaces = layout.widths[col] - visible_len(entry) + padding
                parts.append(" " * max(spaces, 1))
        lines.append("".join(parts))
    return lines
