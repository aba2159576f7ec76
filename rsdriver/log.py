"""Coloured console logging and the driver version."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

VERSION_MAJOR = 1
VERSION_MINOR = 5
VERSION_PATCH = 3

RESET = "\033[0m"


class LogLevel(enum.Enum):
    """Message levels, each carrying the ANSI colour prefix it is printed with."""

    ERROR = "\033[1m\033[31m"  # bold red
    WARNING = "\033[1m\033[33m"  # bold yellow
    INFO = "\033[1m\033[32m"  # bold green
    INFOL = "\033[32m"  # green
    DEBUG = "\033[1m\033[36m"  # bold cyan
    TITLE = "\033[1m\033[35m"  # bold magenta
    MSG = "\033[1m\033[37m"  # bold white


def colorize(level: LogLevel, text: str) -> str:
    """Wrap ``text`` in the colour of ``level`` followed by a reset sequence."""
    return f"{level.value}{text}{RESET}"


def log(level: LogLevel, text: str, stream: TextIO | None = None) -> None:
    """Write one coloured line to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(colorize(level, text) + "\n")
    out.flush()


def driver_version() -> str:
    """Return the driver version as ``major.minor.patch``."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"