"""Resolved location of a live process."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessLocation:
    """Absolute executable path and working directory of a running process."""

    executable_path: str
    working_directory: str
