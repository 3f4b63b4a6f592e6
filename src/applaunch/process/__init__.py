"""Process creation, daemonization and lookup."""

from applaunch.process.daemonizer import Daemonizer, check_log_file
from applaunch.process.locator import ProcessLocator
from applaunch.process.spawner import ProcessSpawner
from applaunch.process.system import PosixSystem

__all__ = [
    "Daemonizer",
    "PosixSystem",
    "ProcessLocator",
    "ProcessSpawner",
    "check_log_file",
]
