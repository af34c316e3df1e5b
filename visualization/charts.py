"""Plotly drawing surface for LearnBoard chart scenes."""

from __future__ import annotations

from typing import Iterable

import plotly.graph_objects as go

from analytics.aggregation import skill_levels, xp_by_project
from core.models import (
    AxisTick,
    AxisTitle,
    Bar,
    ChartResult,
    GradientFill,
    GridLine,
    Record,
    Viewport,
)
from visualization.scale import DEFAULT_TICK_COUNT
from visualization.scene import build_chart_result
from visualization.theme import SKILLS_CHART_STYLE, XP_CHART_STYLE, theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_figure",
    "build_xp_chart",
    "build_skills_chart",
]


def _empty_plotly_figure(message: str, viewport: Viewport) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.placeholder_color, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        height=viewport.height,
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _dash_pattern(pattern: str) -> str:
    return ",".join(f"{part.strip()}px" for part in pattern.split(","))


def _text(x: float, y: float, text: str, **kwargs: object) -> dict:
    annotation = dict(x=x, y=y, xref="x", yref="y", text=text, showarrow=False)
    annotation.update(kwargs)
    return annotation


def build_figure(result: ChartResult, viewport: Viewport, grid_dash: str = "3,3") -> go.Figure:
    """Paint a chart scene onto a pixel-space Plotly figure.

    The axes span the viewport in pixels with the y axis reversed, which
    matches the scene's top-left origin.
    """

    if result.is_placeholder:
        return _empty_plotly_figure(result.placeholder or "", viewport)

    elements = result.elements
    fill = next((element for element in elements if isinstance(element, GradientFill)), None)

    shapes: list[dict] = []
    annotations: list[dict] = []
    hover_x: list[float] = []
    hover_y: list[float] = []
    hover_text: list[str] = []

    for element in elements:
        if isinstance(element, GridLine):
            shapes.append(
                dict(
                    type="line",
                    xref="x",
                    yref="y",
                    x0=element.x_start,
                    x1=element.x_end,
                    y0=element.position,
                    y1=element.position,
                    line=dict(color=TOKENS.grid_color, width=1, dash=_dash_pattern(grid_dash)),
                    layer="below",
                )
            )
        elif isinstance(element, AxisTick) and element.axis == "y":
            annotations.append(
                _text(
                    element.offset,
                    element.position,
                    element.label,
                    xanchor="right",
                    yanchor="middle",
                    font=dict(color=TOKENS.tick_label_color, size=11, family=TOKENS.label_font),
                )
            )
        elif isinstance(element, AxisTick):
            annotations.append(
                _text(
                    element.position,
                    element.offset,
                    element.label,
                    xanchor="right",
                    yanchor="top",
                    textangle=element.rotation,
                    font=dict(color=TOKENS.axis_label_color, size=10, family=TOKENS.label_font),
                )
            )
        elif isinstance(element, AxisTitle):
            annotations.append(
                _text(
                    element.x,
                    element.y,
                    element.text,
                    textangle=element.rotation,
                    font=dict(color=TOKENS.title_color, size=13, family=TOKENS.label_font),
                )
            )
        elif isinstance(element, Bar):
            center = element.x + element.width / 2
            shapes.append(
                dict(
                    type="rect",
                    xref="x",
                    yref="y",
                    x0=element.x,
                    x1=element.x + element.width,
                    y0=element.y,
                    y1=element.y + element.height,
                    fillcolor=fill.top_color if fill else TOKENS.grid_color,
                    line=dict(color=fill.bottom_color if fill else TOKENS.grid_color, width=1),
                    layer="above",
                )
            )
            hover_x.append(center)
            hover_y.append(element.y + element.height / 2)
            hover_text.append(element.tooltip)
            if element.value_label is not None:
                annotations.append(
                    _text(
                        center,
                        element.y - 7,
                        f"<b>{element.value_label}</b>",
                        yanchor="bottom",
                        font=dict(color=TOKENS.value_label_color, size=10, family=TOKENS.label_font),
                    )
                )

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=hover_x,
            y=hover_y,
            mode="markers",
            marker=dict(size=18, opacity=0),
            hovertext=hover_text,
            hoverinfo="text",
            showlegend=False,
        )
    )
    fig.update_layout(
        shapes=shapes,
        annotations=annotations,
        width=viewport.width,
        height=viewport.height,
        margin=dict(l=0, r=0, t=0, b=0),
        xaxis=dict(range=[0, viewport.width], visible=False, fixedrange=True),
        yaxis=dict(range=[viewport.height, 0], visible=False, fixedrange=True),
        hovermode="closest",
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_xp_chart(
    records: Iterable[Record],
    viewport: Viewport,
    tick_count: int = DEFAULT_TICK_COUNT,
) -> go.Figure:
    """Render the XP-by-project bar chart."""

    result = build_chart_result(xp_by_project(records), viewport, XP_CHART_STYLE, tick_count)
    return build_figure(result, viewport, XP_CHART_STYLE.grid_dash)


def build_skills_chart(
    records: Iterable[Record],
    viewport: Viewport,
    tick_count: int = DEFAULT_TICK_COUNT,
) -> go.Figure:
    """Render the skill-level bar chart."""

    result = build_chart_result(skill_levels(records), viewport, SKILLS_CHART_STYLE, tick_count)
    return build_figure(result, viewport, SKILLS_CHART_STYLE.grid_dash)
