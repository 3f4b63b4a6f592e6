"""`launch run` command implementation."""

import argparse
import logging

from pydantic import ValidationError

from applaunch.cli.shared import print_error, print_info, setup_logging
from applaunch.errors import LaunchError
from applaunch.models import LaunchConfig
from applaunch.supervisor import LaunchSupervisor

log = logging.getLogger(__name__)

PASSTHROUGH_SEPARATOR = "--"


def split_passthrough(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first `--` into launcher options and program arguments."""
    if PASSTHROUGH_SEPARATOR not in argv:
        return list(argv), []
    index = argv.index(PASSTHROUGH_SEPARATOR)
    return argv[:index], argv[index + 1 :]


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the run command."""
    parser = argparse.ArgumentParser(
        prog="launch run",
        description="Run some application",
        epilog="Arguments after -- are passed to the application unchanged.",
    )
    parser.add_argument(
        "application",
        metavar="<APPLICATION>",
        help="Application to be launched as daemon",
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-e",
        "--exec",
        action="store_true",
        help="Run application in the current terminal, replacing this process",
    )
    mode_group.add_argument(
        "-t",
        "--terminal",
        action="store_true",
        help="Launch application in a terminal emulator window",
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="Current directory of launched process",
    )
    parser.add_argument(
        "--logfile",
        help="Log file to which the process output will be redirected to",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def run(argv: list[str]) -> int:
    """Execute the run command."""
    own_args, passthrough = split_passthrough(argv)
    args = build_parser().parse_args(own_args)
    setup_logging(args.debug)

    try:
        config = LaunchConfig(
            program=args.application,
            arguments=passthrough,
            working_directory=args.directory,
            log_file=args.logfile,
            run_in_terminal=args.terminal,
            replace_current_process=args.exec,
        )
    except ValidationError as e:
        reasons = "; ".join(err["msg"] for err in e.errors())
        print_error(f"invalid launch configuration: {reasons}")
        return 1
    log.debug("config=%s", config)

    try:
        handle = LaunchSupervisor().run(config)
    except LaunchError as e:
        print_error(str(e))
        return 1

    print_info("Forked process launched successfully.")
    print_info(f"Process pid = {handle.pid}")
    return 0
