"""Detach launched programs from the caller's terminal and session."""

import contextlib
import logging
import os
import subprocess

from applaunch.config import get_terminal
from applaunch.errors import ForkFailed, LogFileOpenFailed, SpawnFailed
from applaunch.models import LaunchConfig, ProcessHandle
from applaunch.process.spawner import ProcessSpawner
from applaunch.process.system import EXEC_FAILED_STATUS, STANDARD_FDS, build_argv

log = logging.getLogger(__name__)

# Keep the terminal window open after the program exits.
TERMINAL_ARGS = ("-hold", "-e")


def check_log_file(path: str, working_directory: str = ".") -> LogFileOpenFailed | None:
    """Return why `path` could not be opened for writing, or None if it looks openable.

    Relative paths are taken relative to `working_directory`, which is where
    the daemon opens its log. Nothing is created or truncated.
    """
    full_path = os.path.join(working_directory, path)
    if os.path.isdir(full_path):
        return LogFileOpenFailed(path, "is a directory")
    if os.path.exists(full_path):
        if not os.access(full_path, os.W_OK):
            return LogFileOpenFailed(path, "permission denied")
        return None
    parent = os.path.dirname(full_path) or "."
    if not os.path.isdir(parent):
        return LogFileOpenFailed(path, f"no such directory: {parent}")
    if not os.access(parent, os.W_OK | os.X_OK):
        return LogFileOpenFailed(path, f"permission denied: {parent}")
    return None


class Daemonizer:
    """Launch a program so that it keeps running after applaunch exits."""

    def __init__(self, spawner: ProcessSpawner | None = None, terminal: str | None = None) -> None:
        self.spawner = spawner or ProcessSpawner()
        self.system = self.spawner.system
        self.terminal = terminal

    def daemonize(self, config: LaunchConfig) -> ProcessHandle:
        """Start `config.program` detached (or in a terminal window) and return its pid."""
        if config.run_in_terminal:
            return self.launch_in_terminal(config)
        return self.detach(config)

    def launch_in_terminal(self, config: LaunchConfig) -> ProcessHandle:
        terminal = self.terminal or get_terminal()
        log.debug("launching %s in %s", config.program, terminal)
        return self.spawner.spawn(
            terminal,
            [*TERMINAL_ARGS, config.program, *config.arguments],
            working_directory=config.working_directory,
        )

    def detach(self, config: LaunchConfig) -> ProcessHandle:
        if config.log_file:
            problem = check_log_file(config.log_file, config.working_directory)
            if problem is not None:
                log.warning("%s; %s will run without output redirection", problem, config.program)

        if not self.system.can_fork():
            return self._detach_without_fork(config)

        try:
            pid = self.system.fork()
        except OSError as e:
            raise ForkFailed(config.program, e) from e

        if pid > 0:
            log.debug("daemonized %s as pid %d", config.program, pid)
            return ProcessHandle(pid)

        # Child: whatever happens below ends in exec or _exit.
        try:
            self._become_daemon(config)
            self.system.execvp(config.program, build_argv(config.program, config.arguments))
        finally:
            self.system.exit(EXEC_FAILED_STATUS)

    def _become_daemon(self, config: LaunchConfig) -> None:
        self.system.setsid()
        self.system.umask(0)
        self.system.chdir(config.working_directory)

        for fd in STANDARD_FDS:
            with contextlib.suppress(OSError):
                self.system.close(fd)

        if not config.log_file:
            return
        try:
            log_fd = self.system.open_for_writing(config.log_file)
        except OSError:
            # Streams stay closed; the parent already warned.
            return
        for fd in STANDARD_FDS:
            if fd != log_fd:
                self.system.dup2(log_fd, fd)
        if log_fd not in STANDARD_FDS:
            self.system.close(log_fd)

    def _detach_without_fork(self, config: LaunchConfig) -> ProcessHandle:
        argv = build_argv(config.program, config.arguments)
        output = None
        if config.log_file:
            try:
                output = open(os.path.join(config.working_directory, config.log_file), "w")
            except OSError as e:
                log.warning("%s", LogFileOpenFailed(config.log_file, e))

        stream = output if output is not None else subprocess.DEVNULL
        try:
            proc = subprocess.Popen(
                argv,
                cwd=config.working_directory,
                stdin=subprocess.DEVNULL,
                stdout=stream,
                stderr=stream,
                start_new_session=True,
            )
        except OSError as e:
            raise SpawnFailed(config.program, e) from e
        finally:
            if output is not None:
                output.close()
        log.debug("daemonized %s as pid %d", config.program, proc.pid)
        return ProcessHandle(proc.pid)
