"""Block-character sparklines for solve trends."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

DEFAULT_SPARKLINE_BLOCKS: Sequence[str] = "▁▂▃▄▅▆▇█"
GAP_BLOCK = " "

__all__ = ["DEFAULT_SPARKLINE_BLOCKS", "GAP_BLOCK", "render_sparkline"]


def render_sparkline(
    values: Iterable[Optional[float]],
    *,
    width: int | None = None,
    blocks: Sequence[str] = DEFAULT_SPARKLINE_BLOCKS,
) -> str:
    """Render ``values`` (oldest first) as a sparkline.

    Parameters
    ----------
    values:
        Samples to plot. ``None`` entries, such as averages that are not
        defined yet, render as :data:`GAP_BLOCK`.
    width:
        Optional maximum number of samples; the most recent ones are kept.
    blocks:
        Characters of increasing height.
    """

    data = list(values)
    if width is not None:
        if width <= 0:
            return ""
        data = data[-width:]
    present = [value for value in data if value is not None]
    palette = tuple(blocks)
    if not present or not palette:
        return ""

    minimum = min(present)
    maximum = max(present)
    buckets = len(palette) - 1
    flat = math.isclose(maximum, minimum) or buckets <= 0
    span = maximum - minimum

    rendered: list[str] = []
    for value in data:
        if value is None:
            rendered.append(GAP_BLOCK)
            continue
        if flat:
            rendered.append(palette[0])
            continue
        index = int(round((value - minimum) / span * buckets))
        rendered.append(palette[max(0, min(buckets, index))])
    return "".join(rendered)
