"""Errors raised by the launch, daemonize and relaunch operations.

Library code raises these to its immediate caller and never prints them;
the CLI alone decides how they are shown and which exit code they map to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from applaunch.models import ProcessLocation


class LaunchError(Exception):
    """Base class for all applaunch failures."""


class SpawnFailed(LaunchError):
    """The OS refused to create the process or start the program."""

    action = "unable to launch"

    def __init__(self, program: str, reason: object = None) -> None:
        self.program = program
        self.reason = reason
        message = f"{self.action} {program}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class ForkFailed(SpawnFailed):
    """fork() failed; no child process exists."""

    action = "unable to fork process and launch"


class ProcessNotFound(LaunchError):
    """The pid does not name a live, inspectable process."""

    def __init__(self, pid: int, reason: object = None) -> None:
        self.pid = pid
        self.reason = reason
        message = f"process of pid <{pid}> not found"
        if reason is not None:
            message += f" ({reason})"
        super().__init__(message)


class TerminateFailed(LaunchError):
    """The kill signal could not be delivered; the process was left running."""

    def __init__(self, pid: int, reason: object = None) -> None:
        self.pid = pid
        self.reason = reason
        super().__init__(f"unable to terminate process of pid <{pid}>: {reason}")


class RelaunchFailed(LaunchError):
    """The old process was killed but its replacement could not be started."""

    def __init__(self, pid: int, location: ProcessLocation, reason: object = None) -> None:
        self.pid = pid
        self.location = location
        self.reason = reason
        super().__init__(
            f"failed to relaunch process: pid <{pid}> was terminated but "
            f"{location.executable_path} could not be restarted in "
            f"{location.working_directory} ({reason}). "
            "Restart it manually."
        )


class LogFileOpenFailed(LaunchError):
    """The log file cannot be opened; the launch continues without redirection."""

    def __init__(self, path: str, reason: object = None) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to open log file {path}: {reason}")
