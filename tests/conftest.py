from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from cubetimer.core.history import SolveHistory  # noqa: E402
from tests.helpers import FakeClock, build_history  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_user_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the XDG directories at ``tmp_path`` so tests never touch ``$HOME``."""

    home = tmp_path / "home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / "data"))
    monkeypatch.delenv("CUBETIMER_CONFIG", raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_cubetimer_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("cubetimer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def sample_history() -> SolveHistory:
    return build_history()
