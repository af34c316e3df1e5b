"""Value-to-pixel scaling for ranked bar charts."""

from __future__ import annotations

from typing import Union

import numpy as np

from core.models import Scale, ScaleError, Series, Tick, Viewport

__all__ = ["DEFAULT_TICK_COUNT", "compute_scale"]

DEFAULT_TICK_COUNT = 5


def compute_scale(
    series: Series,
    viewport: Viewport,
    tick_count: int = DEFAULT_TICK_COUNT,
) -> Union[Scale, ScaleError]:
    """Return the linear scale for ``series`` inside ``viewport``.

    Degenerate inputs are reported as a :class:`ScaleError` instead of a
    scale: a plotting area with no room left after margins, a series with
    no entries, and a series whose values are all zero.
    """

    plot_width = viewport.plot_width
    plot_height = viewport.plot_height
    if plot_width <= 0 or plot_height <= 0:
        return ScaleError.VIEWPORT_TOO_SMALL

    if not series:
        return ScaleError.EMPTY_SERIES

    domain_max = max(max(entry.value for entry in series), 0.0)
    if domain_max == 0:
        return ScaleError.ALL_ZERO

    steps = max(int(tick_count), 1)
    pixel_range = float(plot_height)
    # half-up rounding, 2.5 -> 3
    tick_values = np.floor((domain_max / steps) * np.arange(steps + 1) + 0.5)
    positions = pixel_range - tick_values / domain_max * pixel_range
    ticks = tuple(Tick(float(value), float(position)) for value, position in zip(tick_values, positions))
    return Scale(domain_max=domain_max, pixel_range=pixel_range, ticks=ticks)
