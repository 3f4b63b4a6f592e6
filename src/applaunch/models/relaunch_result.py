"""Outcome of a successful relaunch."""

from dataclasses import dataclass

from applaunch.models.process_handle import ProcessHandle
from applaunch.models.process_location import ProcessLocation


@dataclass(frozen=True)
class RelaunchResult:
    """The pid that was killed, its replacement, and where the replacement runs."""

    old_pid: int
    handle: ProcessHandle
    location: ProcessLocation
