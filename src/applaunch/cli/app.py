"""Top-level CLI router."""

import sys

from applaunch import __version__

from . import path as path_cmd
from . import relaunch as relaunch_cmd
from . import run as run_cmd

COMMANDS = {
    "run": (run_cmd.run, "Run some application"),
    "path": (path_cmd.run, "Show content of $PATH environment variable"),
    "relaunch-pid": (relaunch_cmd.run, "Relaunch a process that got frozen given its PID"),
}

USAGE = "usage: launch [-h] [-V] {" + ",".join(COMMANDS) + "} ..."


def _help() -> str:
    lines = [USAGE, "", "Command line utility for launching applications.", "", "commands:"]
    for name, (_, summary) in COMMANDS.items():
        lines.append(f"  {name:<14}{summary}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Route to the subcommand named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE, file=sys.stderr)
        print("launch: error: a command is required", file=sys.stderr)
        return 2

    first, rest = args[0], args[1:]
    if first in {"-h", "--help"}:
        print(_help())
        return 0
    if first in {"-V", "--version"}:
        print(f"launch {__version__}")
        return 0

    command = COMMANDS.get(first)
    if command is None:
        print(USAGE, file=sys.stderr)
        print(f"launch: error: unknown command {first!r}", file=sys.stderr)
        return 2
    handler, _ = command
    return handler(rest)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
