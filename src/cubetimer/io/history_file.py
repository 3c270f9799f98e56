"""Plain-text solve history storage: one duration in seconds per line."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ..core.history import SolveHistory

__all__ = ["iter_times", "load_history", "parse_time_line", "save_history"]

logger = logging.getLogger(__name__)


def parse_time_line(line: str) -> Optional[float]:
    """Return the duration stored on ``line`` or ``None`` when unusable."""

    text = line.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def iter_times(lines: Iterable[str]) -> Iterator[float]:
    for number, line in enumerate(lines, start=1):
        value = parse_time_line(line)
        if value is None:
            logger.debug(
                "Discarding malformed history line.",
                extra={"event": "history_file.skip", "line": number},
            )
            continue
        yield value


def load_history(path: Path) -> SolveHistory:
    """Read ``path`` and replay its durations through :class:`SolveHistory`.

    A missing file is created empty. Failing to create or read the file raises
    :class:`OSError`.
    """

    path = Path(path)
    if not path.exists():
        path.touch()
        logger.info(
            "Created empty history file.",
            extra={"event": "history_file.create", "path": str(path)},
        )
    text = path.read_text(encoding="utf-8")
    history = SolveHistory.from_times(iter_times(text.splitlines()))
    logger.info(
        "Loaded solve history.",
        extra={"event": "history_file.load", "path": str(path), "records": len(history)},
    )
    return history


def save_history(history: SolveHistory, path: Path) -> None:
    """Rewrite ``path`` with every record of ``history`` in insertion order."""

    path = Path(path)
    lines: List[str] = [f"{record}\n" for record in history]
    with path.open("w", encoding="utf-8") as handle:
        handle.writelines(lines)
    logger.debug(
        "Saved solve history.",
        extra={"event": "history_file.save", "path": str(path), "records": len(lines)},
    )
