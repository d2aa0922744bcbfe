"""
Colorized terminal output for reflag.

Diagnostics go to stderr so that a printed command line on stdout can be
piped or captured by ``eval`` without noise.
"""

import os
import platform
import sys


def _supports_color(stream=None) -> bool:
    """Check if *stream* (stderr by default) supports ANSI colors."""
    stream = stream or sys.stderr
    if os.getenv("NO_COLOR"):
        return False
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    return True


_COLOR = _supports_color()

# Enable ANSI escape sequences on Windows 10+
if _COLOR and platform.system() == "Windows":
    os.system("")


def disable_color():
    """Turn off ANSI escapes for the rest of the process (``--no-color``)."""
    global _COLOR
    _COLOR = False


def color_enabled() -> bool:
    return _COLOR


def _c(code: str, text: str) -> str:
    """Wrap *text* with an ANSI escape if colors are enabled."""
    return f"\033[{code}m{text}\033[0m" if _COLOR else text


def print_error(msg: str):
    """Print a red error message."""
    print(_c("31", msg), file=sys.stderr)


def print_warning(msg: str):
    """Print a yellow warning message."""
    print(_c("33", msg), file=sys.stderr)


def print_info(msg: str):
    """Print a cyan informational message."""
    print(_c("36", msg), file=sys.stderr)


def print_dim(msg: str):
    """Print a dimmed/muted message."""
    print(_c("2", msg), file=sys.stderr)


def debug(msg: str):
    """Print *msg* only when ``DEBUG`` is set (``reflag --debug``)."""
    if os.getenv("DEBUG"):
        print_dim(f"[debug] {msg}")
