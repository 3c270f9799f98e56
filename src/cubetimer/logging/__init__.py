"""Logging utilities for cubetimer."""

from cubetimer.logging.config import JsonFormatter, setup_logging

__all__ = ["JsonFormatter", "setup_logging"]
