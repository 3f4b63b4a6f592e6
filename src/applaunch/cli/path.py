"""`launch path` command implementation."""

import argparse

from applaunch.cli.shared import setup_logging
from applaunch.supervisor import LaunchSupervisor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launch path",
        description="Show content of $PATH environment variable",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def run(argv: list[str]) -> int:
    """Print each search-path directory on its own line."""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    for entry in LaunchSupervisor().path_entries():
        print(f"\t{entry}")
    return 0
