"""Shared fixtures: a recording stand-in for the POSIX process primitives."""

import pytest


class ChildExited(Exception):
    """Raised by RecordingSystem.exit() so the forked-child branch can be asserted."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class RecordingSystem:
    """Records every primitive call; fork() returns `fork_result` (0 means "be the child")."""

    ChildExited = ChildExited

    def __init__(
        self,
        fork_result: int = 4242,
        *,
        can_fork: bool = True,
        fork_error: OSError | None = None,
        chdir_error: OSError | None = None,
        open_error: OSError | None = None,
        exec_error: OSError | None = None,
        kill_error: OSError | None = None,
        log_fd: int = 0,
    ) -> None:
        self.fork_result = fork_result
        self._can_fork = can_fork
        self.fork_error = fork_error
        self.chdir_error = chdir_error
        self.open_error = open_error
        self.exec_error = exec_error
        self.kill_error = kill_error
        self.log_fd = log_fd
        self.calls: list[tuple] = []

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def can_fork(self) -> bool:
        return self._can_fork

    def fork(self) -> int:
        self.calls.append(("fork",))
        if self.fork_error:
            raise self.fork_error
        return self.fork_result

    def setsid(self) -> None:
        self.calls.append(("setsid",))

    def umask(self, mask: int) -> int:
        self.calls.append(("umask", mask))
        return 0o022

    def chdir(self, path: str) -> None:
        self.calls.append(("chdir", path))
        if self.chdir_error:
            raise self.chdir_error

    def close(self, fd: int) -> None:
        self.calls.append(("close", fd))

    def open_for_writing(self, path: str) -> int:
        self.calls.append(("open_for_writing", path))
        if self.open_error:
            raise self.open_error
        return self.log_fd

    def dup2(self, fd: int, fd2: int) -> None:
        self.calls.append(("dup2", fd, fd2))

    def execvp(self, program: str, argv: list[str]) -> None:
        self.calls.append(("execvp", program, argv))
        if self.exec_error:
            raise self.exec_error

    def exit(self, status: int) -> None:
        self.calls.append(("exit", status))
        raise ChildExited(status)

    def kill(self, pid: int, sig: int = 9) -> None:
        self.calls.append(("kill", pid, sig))
        if self.kill_error:
            raise self.kill_error


@pytest.fixture
def make_system():
    """Return the RecordingSystem class so tests can build one per scenario."""
    return RecordingSystem
