"""Command-line interface for applaunch."""

from applaunch.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
