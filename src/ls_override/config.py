# ==================================================================================
# LS-OVERRIDE CONFIGURATION
# ==================================================================================
# Values here are read once at startup. Environment overrides:
#   LS_OVERRIDE_COMMAND  - replaces LS_COMMAND
#   LS_OVERRIDE_PADDING  - replaces LS_PADDING

from types import MappingProxyType

# ==================================================================================
# LISTING SOURCE
# ==================================================================================
# The command whose output gets re-laid. User arguments are passed first,
# followed by LS_FLAGS. The flags must keep the output one entry per line.

LS_COMMAND = "ls"

LS_FLAGS = (
    "--color=always",             # keep ls's own coloring for non-hidden entries
    "-1",                         # one entry per line, we do the grid ourselves
    "-A",                         # show dotfiles, but not . and ..
    "-F",                         # type indicators (dir/, exec*, link@)
    "--group-directories-first",
)

# ==================================================================================
# LS OUTPUT FORMATTING
# ==================================================================================
# Spaces between columns. Increase for more breathing room.
LS_PADDING = 2  # default: 2 spaces (min: 1)

# Used when the terminal width cannot be determined (e.g. output is piped).
DEFAULT_TERM_WIDTH = 80


# ==========================================
# COLOR PALETTE
# ==========================================
# ANSI escape codes by name.
COLORS = MappingProxyType({
    "gray":         "\x1b[90m",
    "blue":         "\x1b[34m",
    "green":        "\x1b[32m",
    "cyan":         "\x1b[36m",
    "magenta":      "\x1b[35m",
    "fadedblue":    "\x1b[38;2;70;70;150m",
    "fadedgreen":   "\x1b[38;2;70;150;70m",
    "fadedcyan":    "\x1b[38;2;70;150;150m",
    "fadedmagenta": "\x1b[38;2;150;70;150m",
    "fadedyellow":  "\x1b[38;2;150;150;70m",
    "fadedred":     "\x1b[38;2;150;70;70m",
    "fadedgray":    "\x1b[38;2;100;100;100m",
})

RESET = "\x1b[0m"

# Colors applied to hidden entries (names starting with ".")
NAME_COLORS = MappingProxyType({
    "dotdir":  COLORS["fadedcyan"],  # always applied, overrides ls coloring
    "dotfile": COLORS["gray"],       # only when ls left the entry uncolored
})

# Engine Colors
THEME = MappingProxyType({
    "RESET": RESET,
    "ERROR": "\x1b[91m",  # Red (diagnostics on stderr)
})
