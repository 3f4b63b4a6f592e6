"""Find the executable and working directory of a live process."""

import logging
from pathlib import Path

from applaunch.errors import ProcessNotFound
from applaunch.models import ProcessLocation

log = logging.getLogger(__name__)

PROC_ROOT = Path("/proc")


class ProcessLocator:
    """Resolve a pid through the per-process `exe` and `cwd` symlinks under /proc."""

    def __init__(self, proc_root: Path | str = PROC_ROOT) -> None:
        self.proc_root = Path(proc_root)

    def resolve(self, pid: int) -> ProcessLocation:
        """Return where `pid` runs from; raise ProcessNotFound unless both links resolve."""
        if pid <= 0:
            raise ProcessNotFound(pid, "pid must be positive")

        process_dir = self.proc_root / str(pid)
        try:
            exe = (process_dir / "exe").resolve(strict=True)
            cwd = (process_dir / "cwd").resolve(strict=True)
        except (OSError, RuntimeError) as e:
            log.debug("resolving pid %d failed: %s", pid, e)
            raise ProcessNotFound(pid, e.__class__.__name__) from e

        location = ProcessLocation(executable_path=str(exe), working_directory=str(cwd))
        log.debug("pid %d -> %s", pid, location)
        return location
