"""applaunch: launch, daemonize and relaunch processes from the command line."""

__version__ = "0.1.0"
