"""Handle for a process started by applaunch."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessHandle:
    """Identifier of a spawned process; valid only while that process exists."""

    pid: int

    def __post_init__(self) -> None:
        if self.pid <= 0:
            raise ValueError(f"pid must be positive, got {self.pid}")
