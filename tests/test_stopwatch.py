from __future__ import annotations

import pytest

from cubetimer.core.records import SolveRecord
from cubetimer.core.stopwatch import Stopwatch
from tests.helpers import FakeClock


def test_stopwatch_starts_idle(clock: FakeClock) -> None:
    stopwatch = Stopwatch(time_fn=clock)

    assert not stopwatch.running
    assert stopwatch.start_instant is None
    assert stopwatch.display_text() == "0.000"


def test_first_toggle_starts_without_result(clock: FakeClock) -> None:
    stopwatch = Stopwatch(time_fn=clock)

    assert stopwatch.toggle() is None
    assert stopwatch.running
    assert stopwatch.start_instant == clock.now


def test_second_toggle_returns_record_without_averages(clock: FakeClock) -> None:
    stopwatch = Stopwatch(time_fn=clock)
    stopwatch.toggle()
    clock.advance(12.345)

    record = stopwatch.toggle()

    assert isinstance(record, SolveRecord)
    assert record.time == pytest.approx(12.345)
    assert record.ao5 is None and record.ao12 is None
    assert not stopwatch.running
    assert stopwatch.start_instant is None
    assert stopwatch.last_duration == pytest.approx(12.345)


def test_display_text_precision_depends_on_state(clock: FakeClock) -> None:
    stopwatch = Stopwatch(time_fn=clock)
    stopwatch.toggle()
    clock.advance(3.27)
    assert stopwatch.display_text() == "3.3"

    clock.advance(1.0)
    assert stopwatch.display_text() == "4.3"

    stopwatch.toggle()
    clock.advance(50.0)
    assert stopwatch.display_text() == "4.270"


def test_display_text_is_pure(clock: FakeClock) -> None:
    stopwatch = Stopwatch(time_fn=clock)
    stopwatch.toggle()
    clock.advance(2.0)

    stopwatch.display_text()
    stopwatch.display_text()

    assert stopwatch.running
    assert stopwatch.last_duration == 0.0


def test_reset_discards_running_solve(clock: FakeClock) -> None:
    stopwatch = Stopwatch(time_fn=clock)
    stopwatch.toggle()
    clock.advance(5.0)

    stopwatch.reset()

    assert not stopwatch.running
    assert stopwatch.last_duration == 0.0
    assert stopwatch.toggle() is None
