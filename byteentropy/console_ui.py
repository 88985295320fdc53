"""Console presentation helpers for the entropy CLI.

Results go to stdout unstyled so they stay machine-readable; diagnostics go
to stderr and are coloured only when stderr is a terminal.
"""
from __future__ import annotations

import sys

import colorama
from colorama import Fore, Style

__all__ = [
    "init",
    "out",
    "usage",
    "error",
]

_use_color = False
_color_prefix = {"error": ""}


def init() -> None:
    """Initialise console helpers; colour is enabled for a terminal stderr only."""

    global _use_color, _color_prefix

    isatty = getattr(sys.stderr, "isatty", None)
    is_tty = bool(isatty()) if callable(isatty) else False

    _use_color = is_tty
    if _use_color:
        colorama.just_fix_windows_console()
        _color_prefix = {"error": Fore.RED + Style.BRIGHT}
    else:
        _color_prefix = {"error": ""}


def _apply(style: str, message: str) -> str:
    if not _use_color or not style:
        return message
    return f"{style}{message}{Style.RESET_ALL}"


def out(msg: str) -> None:
    """Print a plain line on stdout."""

    print(msg, file=sys.stdout)


def usage(text: str) -> None:
    """Write usage text to stderr verbatim."""

    sys.stderr.write(text)


def error(msg: str) -> None:
    """Highlight an error message on stderr."""

    print(_apply(_color_prefix["error"], msg), file=sys.stderr)
