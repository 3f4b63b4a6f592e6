"""Configuration for applaunch."""

import logging
import os

DEFAULT_TERMINAL = "xterm"
DEFAULT_LOG_LEVEL = "WARNING"
SEARCH_PATH_VAR = "PATH"


def get_terminal() -> str:
    """Return the terminal emulator used for `run --terminal`, from env or default."""
    return os.environ.get("APPLAUNCH_TERMINAL", "").strip() or DEFAULT_TERMINAL


def get_log_level(debug: bool = False) -> int:
    """Return the logging level, honouring --debug before APPLAUNCH_LOG_LEVEL."""
    if debug:
        return logging.DEBUG
    name = os.environ.get("APPLAUNCH_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING
