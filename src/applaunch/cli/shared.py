"""Shared CLI presentation and logging helpers."""

import logging
import os
import sys
from typing import TextIO

from applaunch.config import get_log_level

BOLD = "\033[1m"
RED = "\033[31m"
RESET = "\033[0m"

LOG_FORMAT = "%(name)s %(levelname)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(level=get_log_level(debug), format=LOG_FORMAT)


def supports_color(stream: TextIO) -> bool:
    """Return whether ANSI color output should be used on `stream`."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return stream.isatty()


def print_info(message: str) -> None:
    print(f" [INFO] {message}")


def print_error(message: str) -> None:
    """Print a fatal error to stderr, in bold red when the terminal allows it."""
    stream = sys.stderr
    if supports_color(stream):
        print(f" {BOLD}{RED}[ERROR]{RESET} {message}", file=stream)
    else:
        print(f" [ERROR] {message}", file=stream)
