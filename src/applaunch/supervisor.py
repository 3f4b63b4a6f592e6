"""Core logic for applaunch: dispatch launches and relaunch processes by pid."""

import logging
import os
from collections.abc import Mapping

from applaunch.config import SEARCH_PATH_VAR
from applaunch.errors import ProcessNotFound, RelaunchFailed, SpawnFailed, TerminateFailed
from applaunch.models import LaunchConfig, ProcessHandle, ProcessLocation, RelaunchResult
from applaunch.process import Daemonizer, ProcessLocator, ProcessSpawner
from applaunch.process.system import KILL_SIGNAL

log = logging.getLogger("applaunch")


class LaunchSupervisor:
    """Entry point for the CLI commands; keeps no state between invocations."""

    def __init__(
        self,
        spawner: ProcessSpawner | None = None,
        daemonizer: Daemonizer | None = None,
        locator: ProcessLocator | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.spawner = spawner or ProcessSpawner()
        self.daemonizer = daemonizer or Daemonizer(self.spawner)
        self.locator = locator or ProcessLocator()
        self.environ = os.environ if environ is None else environ

    def run(self, config: LaunchConfig) -> ProcessHandle:
        """Launch according to `config`. With replace_current_process this only returns by raising."""
        if not config.replace_current_process:
            return self.daemonizer.daemonize(config)

        try:
            self.spawner.system.chdir(config.working_directory)
        except OSError as e:
            raise SpawnFailed(config.program, e) from e
        self.spawner.replace(config.program, config.arguments)

    def path_entries(self) -> list[str]:
        """Return the directories listed in the search-path variable, in order."""
        value = self.environ.get(SEARCH_PATH_VAR, "")
        if not value:
            return []
        return value.split(os.pathsep)

    def relaunch(self, pid: int) -> RelaunchResult:
        """Kill `pid` and start its executable again, detached, in its working directory.

        Resolution and termination failures leave the process untouched.
        A failure after the kill raises RelaunchFailed: the old process is
        gone and nothing replaced it.
        """
        location = self.locator.resolve(pid)
        log.debug("relaunch: resolved pid %d to %s", pid, location)

        self._terminate(pid, location)

        config = LaunchConfig(
            program=location.executable_path,
            working_directory=location.working_directory,
        )
        try:
            handle = self.daemonizer.daemonize(config)
        except SpawnFailed as e:
            raise RelaunchFailed(pid, location, e) from e
        log.debug("relaunch: pid %d replaced by pid %d", pid, handle.pid)
        return RelaunchResult(old_pid=pid, handle=handle, location=location)

    def _terminate(self, pid: int, location: ProcessLocation) -> None:
        # The pid may have been reused since it was resolved.
        current = self.locator.resolve(pid)
        if current.executable_path != location.executable_path:
            raise ProcessNotFound(pid, f"now running {current.executable_path}")

        try:
            self.spawner.system.kill(pid, KILL_SIGNAL)
        except ProcessLookupError:
            log.info("pid %d exited before it could be killed", pid)
        except OSError as e:
            raise TerminateFailed(pid, e) from e
