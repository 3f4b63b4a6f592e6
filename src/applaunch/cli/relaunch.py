"""`launch relaunch-pid` command implementation."""

import argparse

from applaunch.cli.shared import print_error, print_info, setup_logging
from applaunch.errors import LaunchError, RelaunchFailed
from applaunch.supervisor import LaunchSupervisor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launch relaunch-pid",
        description="Relaunch a process that got frozen given its PID",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "pid",
        type=int,
        metavar="<PID>",
        help="PID of application to be relaunched",
    )
    return parser


def run(argv: list[str]) -> int:
    """Kill the process at PID and start it again from its executable and directory."""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        result = LaunchSupervisor().relaunch(args.pid)
    except RelaunchFailed as e:
        print_error(str(e))
        print_error("the original process is no longer running")
        return 1
    except LaunchError as e:
        print_error(str(e))
        return 1

    print_info("Relaunched application: ")
    print(f"        pid = {result.handle.pid}")
    print(f" executable = {result.location.executable_path}")
    print(f"  directory = {result.location.working_directory}")
    return 0
