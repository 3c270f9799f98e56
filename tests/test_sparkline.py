from __future__ import annotations

from cubetimer.visualization.sparkline import (
    DEFAULT_SPARKLINE_BLOCKS,
    GAP_BLOCK,
    render_sparkline,
)


def test_sparkline_spans_palette() -> None:
    line = render_sparkline([1.0, 2.0, 3.0, 8.0])

    assert len(line) == 4
    assert line[0] == DEFAULT_SPARKLINE_BLOCKS[0]
    assert line[-1] == DEFAULT_SPARKLINE_BLOCKS[-1]


def test_sparkline_keeps_most_recent_values() -> None:
    line = render_sparkline([100.0, 1.0, 2.0], width=2)

    assert line == DEFAULT_SPARKLINE_BLOCKS[0] + DEFAULT_SPARKLINE_BLOCKS[-1]


def test_sparkline_renders_gaps() -> None:
    line = render_sparkline([None, 1.0, None, 2.0])

    assert line[0] == GAP_BLOCK
    assert line[2] == GAP_BLOCK


def test_sparkline_flat_series() -> None:
    assert render_sparkline([5.0, 5.0, 5.0]) == DEFAULT_SPARKLINE_BLOCKS[0] * 3


def test_sparkline_custom_blocks() -> None:
    assert render_sparkline([0.0, 1.0], blocks="._") == "._"


def test_sparkline_empty_inputs() -> None:
    assert render_sparkline([]) == ""
    assert render_sparkline([None, None]) == ""
    assert render_sparkline([1.0, 2.0], width=0) == ""
