"""Shared builders and fakes for the cubetimer test-suite."""

from __future__ import annotations

from tests.helpers.cli import run_cli_in_tmp, write_config
from tests.helpers.fakes import FakeClock, ScriptedKeys, fixed_scramble
from tests.helpers.history import SAMPLE_TIMES, build_history

__all__ = [
    "FakeClock",
    "SAMPLE_TIMES",
    "ScriptedKeys",
    "build_history",
    "fixed_scramble",
    "run_cli_in_tmp",
    "write_config",
]
