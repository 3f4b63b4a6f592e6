"""Thin facade over the POSIX process primitives used by applaunch.

Everything that forks, execs, signals or touches file descriptors goes
through a `PosixSystem` instance, so unit tests can hand the spawner and
daemonizer a fake and never create real processes.
"""

import os
import signal
from typing import NoReturn

STDIN_FD = 0
STDOUT_FD = 1
STDERR_FD = 2
STANDARD_FDS = (STDIN_FD, STDOUT_FD, STDERR_FD)

# SIGKILL is POSIX-only.
KILL_SIGNAL = getattr(signal, "SIGKILL", signal.SIGTERM)

# Exit status of a forked child whose exec failed (shell convention).
EXEC_FAILED_STATUS = 127


class PosixSystem:
    """Default implementation backed by the `os` module."""

    def can_fork(self) -> bool:
        return hasattr(os, "fork")

    def fork(self) -> int:
        return os.fork()

    def setsid(self) -> None:
        os.setsid()

    def umask(self, mask: int) -> int:
        return os.umask(mask)

    def chdir(self, path: str) -> None:
        os.chdir(path)

    def close(self, fd: int) -> None:
        os.close(fd)

    def open_for_writing(self, path: str) -> int:
        """Open (create/truncate) `path` for writing, like fopen(path, "w").

        The descriptor survives exec, so it can serve as a standard stream
        even when it lands on fd 0-2 itself.
        """
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
        os.set_inheritable(fd, True)
        return fd

    def dup2(self, fd: int, fd2: int) -> None:
        os.dup2(fd, fd2)

    def execvp(self, program: str, argv: list[str]) -> NoReturn:
        os.execvp(program, argv)

    def exit(self, status: int) -> NoReturn:
        os._exit(status)

    def kill(self, pid: int, sig: int = KILL_SIGNAL) -> None:
        os.kill(pid, sig)


def build_argv(program: str, arguments) -> list[str]:
    """Return the argument vector for `program`; argv[0] is always the program."""
    return [program, *arguments]
