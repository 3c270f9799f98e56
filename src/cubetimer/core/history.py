"""Solve history aggregate with incremental statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .averages import (
    AO5_WINDOW,
    AO12_WINDOW,
    AO100_WINDOW,
    AO1000_WINDOW,
    trimmed_mean,
    window_average,
)
from .records import SolveRecord

__all__ = ["HistorySummary", "SolveHistory"]

logger = logging.getLogger(__name__)


def _running_min(current: Optional[float], candidate: Optional[float]) -> Optional[float]:
    if candidate is None:
        return current
    if current is None or candidate < current:
        return candidate
    return current


@dataclass(frozen=True, slots=True)
class HistorySummary:
    """Snapshot of the derived statistics used by the front ends."""

    count: int
    best: Optional[float]
    worst: Optional[float]
    mean: Optional[float]
    pb_ao5: Optional[float]
    pb_ao12: Optional[float]
    current_ao5: Optional[float]
    current_ao12: Optional[float]
    ao100: Optional[float]
    ao1000: Optional[float]


class SolveHistory:
    """Insertion-ordered solves (oldest first) plus running aggregates.

    Statistics are folded in on :meth:`insert`. :meth:`delete` only removes the
    record; averages stored on the remaining records and the aggregates keep
    the values computed when those records were inserted.
    """

    def __init__(self, records: Iterable[SolveRecord] = ()) -> None:
        self._records: List[SolveRecord] = []
        self.pb_single: Optional[float] = None
        self.pb_ao5: Optional[float] = None
        self.pb_ao12: Optional[float] = None
        self.ao100: Optional[float] = None
        self.ao1000: Optional[float] = None
        self.rolling_avg: Optional[float] = None
        self.total = 0.0
        for record in records:
            self.insert(record)

    @classmethod
    def from_times(cls, times: Iterable[float]) -> "SolveHistory":
        """Replay raw ``times`` in order, recomputing every statistic."""

        return cls(SolveRecord(time=float(value)) for value in times)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SolveRecord]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    @property
    def records(self) -> Tuple[SolveRecord, ...]:
        return tuple(self._records)

    def times(self) -> List[float]:
        return [record.time for record in self._records]

    def latest(self) -> Optional[SolveRecord]:
        if not self._records:
            return None
        return self._records[-1]

    def display_rows(self) -> List[SolveRecord]:
        """Records in display order: most recent first."""

        return list(reversed(self._records))

    def record_at_row(self, display_row: Optional[int]) -> Optional[SolveRecord]:
        index = self._storage_index(display_row)
        if index is None:
            return None
        return self._records[index]

    def insert(self, record: SolveRecord) -> SolveRecord:
        """Compute ``record``'s averages, append it and update the aggregates.

        Returns the stored record carrying its ao5/ao12.
        """

        time = float(record.time)
        window: List[float] = [time]
        window.extend(
            stored.time
            for stored in reversed(self._records[-(AO12_WINDOW - 1):])
        )
        populated = replace(
            record,
            time=time,
            ao5=window_average(window, AO5_WINDOW),
            ao12=window_average(window, AO12_WINDOW),
        )
        self._records.append(populated)

        self.pb_single = _running_min(self.pb_single, populated.time)
        self.pb_ao5 = _running_min(self.pb_ao5, populated.ao5)
        self.pb_ao12 = _running_min(self.pb_ao12, populated.ao12)

        count = len(self._records)
        if count >= AO100_WINDOW:
            self.ao100 = self._tail_average(AO100_WINDOW)
        if count >= AO1000_WINDOW:
            self.ao1000 = self._tail_average(AO1000_WINDOW)

        self.total += populated.time
        self.rolling_avg = self.total / count
        return populated

    def delete(self, display_row: Optional[int]) -> Optional[SolveRecord]:
        """Remove the record shown at ``display_row`` (most recent first).

        Rows outside the history are ignored and ``None`` is returned.
        """

        index = self._storage_index(display_row)
        if index is None:
            return None
        removed = self._records.pop(index)
        logger.debug(
            "Solve deleted.",
            extra={
                "event": "history.delete",
                "display_row": display_row,
                "time": removed.time,
            },
        )
        return removed

    def summary(self) -> HistorySummary:
        times = self.times()
        latest = self.latest()
        return HistorySummary(
            count=len(times),
            best=min(times) if times else None,
            worst=max(times) if times else None,
            mean=self.rolling_avg if times else None,
            pb_ao5=self.pb_ao5,
            pb_ao12=self.pb_ao12,
            current_ao5=latest.ao5 if latest else None,
            current_ao12=latest.ao12 if latest else None,
            ao100=self.ao100,
            ao1000=self.ao1000,
        )

    def _storage_index(self, display_row: Optional[int]) -> Optional[int]:
        if display_row is None:
            return None
        count = len(self._records)
        if display_row < 0 or display_row >= count:
            return None
        return count - display_row - 1

    def _tail_average(self, size: int) -> float:
        tail: Sequence[SolveRecord] = self._records[-size:]
        return trimmed_mean(stored.time for stored in tail)
