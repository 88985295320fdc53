#!/usr/bin/env python3
"""
Entropy CLI – measure the Shannon entropy of a file or of stdin.

Usage:
    python entropy_cli.py FILE
    cat FILE | python entropy_cli.py

Prints one line such as:
    1,234.56 bits (154.32 bytes) = 3.0864% of 5,000 bytes (0.2469 bits/byte)
"""

from __future__ import annotations

import argparse
import logging
import os
import pathlib
import sys
from typing import BinaryIO, List, Optional

# Ensure relative repo imports work even if executed from another directory.
sys.path.insert(0, str(pathlib.Path(__file__).parent.resolve()))

from byteentropy import console_ui
from byteentropy.entropy import analyze
from byteentropy.errors import NoDataError, ReadError
from byteentropy.formatting import format_report

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_NO_DATA = 1
EXIT_READ = 1
EXIT_FILE = 2

USAGE = """\
usage: {prog} [ FILE ]

Displays the entropy (in total bits and bits/byte) of the data in FILE
(or from stdin if FILE is omitted).
"""

logger = logging.getLogger("entropy_cli")


class UsageError(Exception):
    """Command line did not match ``prog [ FILE ]``."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def parse_args(argv: List[str]) -> argparse.Namespace:
    # Anything flag-shaped is rejected, including a bare "-" and "--".
    if any(arg.startswith("-") for arg in argv):
        raise UsageError("unexpected option")
    ap = _Parser(add_help=False)
    ap.add_argument("file", nargs="?")
    return ap.parse_args(argv)


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _report(prog: str, stream: BinaryIO) -> int:
    try:
        report = analyze(stream)
    except NoDataError:
        console_ui.out(f"{prog}: No data found!")
        return EXIT_NO_DATA
    except ReadError as exc:
        console_ui.error(f"{prog}: Error reading data: {exc}")
        return EXIT_READ
    console_ui.out(format_report(report))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    prog = os.path.basename(sys.argv[0])
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()
    console_ui.init()

    try:
        args = parse_args(argv)
    except UsageError as exc:
        logger.debug("usage error: %s", exc)
        console_ui.usage(USAGE.format(prog=prog))
        return EXIT_USAGE

    if args.file is None:
        if sys.stdin is None:
            console_ui.error(f"{prog}: Error reading data: standard input is closed")
            return EXIT_READ
        return _report(prog, sys.stdin.buffer)

    # Only ENOENT counts as missing; other stat failures surface from open().
    try:
        os.stat(args.file)
    except FileNotFoundError:
        console_ui.error(f"{prog}: File not found: '{args.file}'")
        return EXIT_FILE
    except OSError as exc:
        logger.debug("stat %s failed: %s", args.file, exc)

    try:
        handle = open(args.file, "rb")
    except OSError as exc:
        console_ui.error(f"{prog}: Error opening file: {exc}")
        return EXIT_FILE

    with handle:
        return _report(prog, handle)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
