"""Scene construction for ranked bar charts.

The builders here only describe what to draw. Every element carries
absolute pixel coordinates on the drawing surface (margins included, y
growing downward) so any surface can paint the scene without knowing about
scales or series.
"""

from __future__ import annotations

from core.formatting import format_number, truncate_label
from core.models import (
    AxisTick,
    AxisTitle,
    Bar,
    ChartResult,
    GradientFill,
    GridLine,
    Scale,
    SceneElement,
    ScaleError,
    Series,
    Viewport,
)
from visualization.scale import DEFAULT_TICK_COUNT, compute_scale
from visualization.theme import ChartStyle

__all__ = ["build_chart", "build_chart_result", "placeholder_for"]

_TICK_LABEL_GAP = 12.0
_AXIS_TITLE_INSET = 20.0


def build_chart(
    series: Series,
    scale: Scale,
    viewport: Viewport,
    style: ChartStyle,
) -> list[SceneElement]:
    """Return the scene for ``series`` drawn with ``scale`` inside ``viewport``.

    Gridlines and axis labels come before the bars so surfaces that paint in
    input order keep the grid behind them.
    """

    left = viewport.margin.left
    top = viewport.margin.top
    plot_width = viewport.plot_width
    plot_height = viewport.plot_height

    elements: list[SceneElement] = [
        GradientFill(style.gradient_id, style.gradient_top, style.gradient_bottom)
    ]

    for tick in scale.ticks:
        y = top + tick.position
        elements.append(GridLine(position=y, x_start=left, x_end=left + plot_width))
        elements.append(
            AxisTick(
                position=y,
                label=f"{format_number(tick.value)}{style.tick_suffix}",
                axis="y",
                offset=left - _TICK_LABEL_GAP,
            )
        )

    elements.append(
        AxisTitle(
            text=style.axis_title,
            x=min(_AXIS_TITLE_INSET, left / 2),
            y=top + plot_height / 2,
        )
    )

    if not series:
        return elements

    slot = plot_width / len(series)
    bar_width = max(0.0, slot * (1 - style.bar_padding))
    inset = slot * style.bar_padding / 2
    baseline = scale.map(0)

    for index, entry in enumerate(series):
        elements.append(
            AxisTick(
                position=left + index * slot + inset + bar_width / 2,
                label=truncate_label(entry.label, style.label_max_chars, style.label_keep_chars),
                axis="x",
                offset=top + plot_height + style.label_offset,
                rotation=style.label_rotation,
            )
        )

    for index, entry in enumerate(series):
        bar_top = scale.map(entry.value)
        height = max(0.0, baseline - bar_top)
        value_text = format_number(entry.value)
        elements.append(
            Bar(
                x=left + index * slot + inset,
                y=top + bar_top,
                width=bar_width,
                height=height,
                tooltip=f"{entry.label}: {value_text}{style.unit}",
                value_label=(
                    f"{value_text}{style.value_suffix}"
                    if height > style.value_label_min_height
                    else None
                ),
            )
        )

    return elements


def placeholder_for(error: ScaleError, style: ChartStyle) -> str:
    if error is ScaleError.VIEWPORT_TOO_SMALL:
        return style.too_small_message
    if error is ScaleError.ALL_ZERO:
        return style.all_zero_message
    return style.empty_message


def build_chart_result(
    series: Series,
    viewport: Viewport,
    style: ChartStyle,
    tick_count: int = DEFAULT_TICK_COUNT,
) -> ChartResult:
    """Scale and build one chart, turning degenerate inputs into a placeholder."""

    if not series:
        return ChartResult(placeholder=style.empty_message, error=ScaleError.EMPTY_SERIES)

    scale = compute_scale(series, viewport, tick_count)
    if isinstance(scale, ScaleError):
        return ChartResult(placeholder=placeholder_for(scale, style), error=scale)

    return ChartResult(elements=tuple(build_chart(series, scale, viewport, style)))
