"""Fork-style and exec-style process creation."""

import logging
import subprocess
import sys
from collections.abc import Sequence
from typing import NoReturn

from applaunch.errors import SpawnFailed
from applaunch.models import ProcessHandle
from applaunch.process.system import EXEC_FAILED_STATUS, PosixSystem, build_argv

log = logging.getLogger(__name__)


class ProcessSpawner:
    """Start programs either beside the caller (`spawn`) or in its place (`replace`)."""

    def __init__(self, system: PosixSystem | None = None) -> None:
        self.system = system or PosixSystem()

    def spawn(
        self,
        program: str,
        arguments: Sequence[str] = (),
        working_directory: str | None = None,
    ) -> ProcessHandle:
        """Start `program` in a new process and return without waiting for it."""
        argv = build_argv(program, arguments)
        if not self.system.can_fork():
            return self._spawn_without_fork(program, argv, working_directory)

        try:
            pid = self.system.fork()
        except OSError as e:
            raise SpawnFailed(program, e) from e

        if pid > 0:
            log.debug("spawned %s as pid %d", program, pid)
            return ProcessHandle(pid)

        # Child: never return into the caller's code path.
        try:
            if working_directory is not None:
                self.system.chdir(working_directory)
            self.system.execvp(program, argv)
        finally:
            self.system.exit(EXEC_FAILED_STATUS)

    def replace(self, program: str, arguments: Sequence[str] = ()) -> NoReturn:
        """Replace the current process image with `program`; returns only by raising."""
        argv = build_argv(program, arguments)
        log.debug("exec %s", argv)
        # Buffered output would be lost with the old image.
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            self.system.execvp(program, argv)
        except OSError as e:
            raise SpawnFailed(program, e) from e
        raise SpawnFailed(program, "exec returned")

    def _spawn_without_fork(
        self, program: str, argv: list[str], working_directory: str | None
    ) -> ProcessHandle:
        try:
            proc = subprocess.Popen(argv, cwd=working_directory)
        except OSError as e:
            raise SpawnFailed(program, e) from e
        log.debug("spawned %s as pid %d", program, proc.pid)
        return ProcessHandle(proc.pid)
