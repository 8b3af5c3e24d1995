"""Command line handling of the ``--version`` flag."""

from __future__ import annotations

import argparse
from enum import IntEnum
from typing import Optional

from serverkit.version import get

_RAW = "raw"
_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


class VersionValue(IntEnum):
    """What the ``--version`` flag asks for."""

    FALSE = 0
    TRUE = 1
    RAW = 2

    def __str__(self) -> str:
        if self is VersionValue.RAW:
            return _RAW
        return "true" if self is VersionValue.TRUE else "false"


def parse_version_value(s: str) -> VersionValue:
    """Parse a ``--version`` argument: ``raw`` or a boolean word."""
    if s == _RAW:
        return VersionValue.RAW
    if s in _TRUE_WORDS:
        return VersionValue.TRUE
    if s in _FALSE_WORDS:
        return VersionValue.FALSE
    raise ValueError(f"invalid version value: {s!r}")


def add_flags(parser: argparse.ArgumentParser) -> None:
    """Register ``--version`` on ``parser``; a bare ``--version`` means true."""
    parser.add_argument(
        "--version",
        type=parse_version_value,
        nargs="?",
        const=VersionValue.TRUE,
        default=VersionValue.FALSE,
        metavar="version",
        help="Print version information and quit.",
    )


def print_and_exit_if_requested(value: Optional[VersionValue]) -> None:
    """Print the version and exit with status 0 if the flag asks for it."""
    if value is VersionValue.RAW:
        print(repr(get()))
        raise SystemExit(0)
    if value is VersionValue.TRUE:
        print(get())
        raise SystemExit(0)