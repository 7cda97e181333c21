"""
ls-override command-line driver.

Runs the listing command, recolors hidden entries and prints them as a grid
sized to the terminal.

Exit status:
- 0 on success (an empty listing included).
- 1 if the listing command cannot be started, its output cannot be read,
  or the grid cannot be written (e.g. a closed pipe).
- The listing command's own status if it exits non-zero.
"""

import io
import os
import shutil
import subprocess
import sys

from ls_override import config
from ls_override.layout import render
from ls_override.recolor import recolor_entries


class ListingError(Exception):
    """The listing command could not be started or read."""


def load_settings(environ=None):
    """
    Resolve runtime settings from ``config`` and the environment.

    Missing config attributes fall back to built-in defaults. Environment
    variables win over the config module.

    Args:
        environ (dict): Defaults to ``os.environ``.

    Returns:
        dict: ls_command, ls_flags, padding, default_width.
    """
    if environ is None:
        environ = os.environ

    settings = {
        "ls_command": getattr(config, "LS_COMMAND", "ls"),
        "ls_flags": list(getattr(config, "LS_FLAGS", ())),
        "padding": getattr(config, "LS_PADDING", 2),
        "default_width": getattr(config, "DEFAULT_TERM_WIDTH", 80),
    }

    command = environ.get("LS_OVERRIDE_COMMAND")
    if command:
        settings["ls_command"] = command

    padding = environ.get("LS_OVERRIDE_PADDING")
    if padding:
        try:
            settings["padding"] = int(padding)
        except ValueError:
            report_error(f"Ignoring LS_OVERRIDE_PADDING={padding!r}: not an integer")

    settings["padding"] = max(1, settings["padding"])
    return settings


def build_command(args, settings):
    """User arguments go first and unchanged; the fixed flags are appended."""
    return [settings["ls_command"], *args, *settings["ls_flags"]]


# ls options whose value may be given as the next argument
SHORT_VALUE_OPTIONS = "ITw"
LONG_VALUE_OPTIONS = {
    "--block-size", "--format", "--hide", "--ignore", "--indicator-style",
    "--quoting-style", "--sort", "--tabsize", "--time", "--time-style", "--width",
}


def listing_root(args):
    """
    Directory that listed names are relative to.

    Only a single directory operand changes it; with zero or several operands
    names are looked up from the CWD. Option values (``-I node_modules``) are
    not operands. With ``-d``/``--directory`` ls prints the operands
    themselves, so their names are relative to the CWD as well.
    """
    operands = []
    expect_value = False
    only_operands = False
    for arg in args:
        if expect_value:
            expect_value = False
        elif only_operands or arg == "-" or not arg.startswith("-"):
            operands.append(arg)
        elif arg == "--":
            only_operands = True
        elif arg.startswith("--"):
            if arg == "--directory":
                return None
            expect_value = arg in LONG_VALUE_OPTIONS
        else:
            for pos, flag in enumerate(arg[1:], start=1):
                if flag == "d":
                    return None
                if flag in SHORT_VALUE_OPTIONS:
                    # -Ipattern carries its value, a bare -I takes the next arg
                    expect_value = pos == len(arg) - 1
                    break

    if len(operands) == 1 and os.path.isdir(operands[0]):
        return operands[0]
    return None


def terminal_width(default):
    """
    Width of the terminal on stdout (``COLUMNS`` wins, as in ``shutil``).

    Returns ``default`` when there is no terminal or it reports width 0.
    """
    width = shutil.get_terminal_size(fallback=(0, 0)).columns
    if width < 1:
        return default
    return width


def read_listing(command):
    """
    Run the listing command and collect its stdout lines.

    The child inherits our environment and stderr, so its own error messages
    reach the user directly.

    Args:
        command (list): argv of the listing command.

    Returns:
        tuple: (status, lines). ``lines`` has trailing newlines removed.

    Raises:
        ListingError: The command could not be started or read.
    """
    name = command[0]
    try:
        proc = subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            env=os.environ.copy(),
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise ListingError(f"Error starting {name}: {e}") from e

    try:
        with proc.stdout:
            lines = [line.rstrip("\n") for line in proc.stdout]
    except (OSError, ValueError) as e:
        proc.kill()
        proc.wait()
        raise ListingError(f"Error reading {name} output: {e}") from e

    return proc.wait(), lines


def _silence_stdout():
    # The interpreter flushes stdout again at exit; point it at devnull so
    # that flush cannot raise a second time.
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def report_error(message, stream=None):
    stream = stream or sys.stderr
    if stream.isatty():
        message = f"{config.THEME['ERROR']}{message}{config.THEME['RESET']}"
    print(message, file=stream)


def main(argv=None):
    """
    Entry point. Returns the process exit status.

    Args:
        argv (list): Arguments for the listing command. Defaults to
            ``sys.argv[1:]``.
    """
    if argv is None:
        argv = sys.argv[1:]

    settings = load_settings()
    command = build_command(argv, settings)

    try:
        status, entries = read_listing(command)
    except ListingError as e:
        report_error(str(e))
        return 1

    if status != 0:
        # A signal shows up as a negative status; that is still a failure.
        return status if status > 0 else 1

    entries = recolor_entries(entries, listing_root(argv))
    width = terminal_width(settings["default_width"])

    try:
        for line in render(entries, width, settings["padding"]):
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except OSError as e:
        # e.g. BrokenPipeError from `ls-override | head -1`
        _silence_stdout()
        report_error(f"Error writing output: {e}")
        return 1
    return 0


def run():
    sys.exit(main())
