"""Trimmed-mean averages shared by every solve window."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

__all__ = [
    "AO5_WINDOW",
    "AO12_WINDOW",
    "AO100_WINDOW",
    "AO1000_WINDOW",
    "trimmed_mean",
    "window_average",
]

AO5_WINDOW = 5
AO12_WINDOW = 12
AO100_WINDOW = 100
AO1000_WINDOW = 1000


def trimmed_mean(samples: Iterable[float]) -> float:
    """Return the mean of ``samples`` without one minimum and one maximum.

    Only the sorted-first and sorted-last entries are discarded, so repeated
    extreme values beyond those two positions still contribute to the mean.
    """

    values = np.sort(np.asarray(list(samples), dtype=float))
    if values.size < 3:
        raise ValueError("trimmed_mean requires at least three samples")
    return float(values[1:-1].sum() / (values.size - 2))


def window_average(recent_first: Sequence[float], size: int) -> Optional[float]:
    """Average the first ``size`` entries of a most-recent-first sequence.

    Returns ``None`` while fewer than ``size`` samples exist.
    """

    if len(recent_first) < size:
        return None
    return trimmed_mean(recent_first[:size])
