"""Command line utilities for cubetimer."""

from cubetimer.cli.app import main, run_cli

__all__ = ["main", "run_cli"]
