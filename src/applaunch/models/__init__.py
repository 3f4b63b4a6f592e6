"""Model package for applaunch."""

from applaunch.models.launch_config import LaunchConfig
from applaunch.models.process_handle import ProcessHandle
from applaunch.models.process_location import ProcessLocation
from applaunch.models.relaunch_result import RelaunchResult

__all__ = [
    "LaunchConfig",
    "ProcessHandle",
    "ProcessLocation",
    "RelaunchResult",
]
