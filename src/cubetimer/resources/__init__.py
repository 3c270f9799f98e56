"""Filesystem locations used by cubetimer."""

from .paths import (
    config_dir,
    data_dir,
    default_config_path,
    default_history_path,
)

__all__ = ["config_dir", "data_dir", "default_config_path", "default_history_path"]
