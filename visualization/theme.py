"""Shared chart styling tokens for LearnBoard visualizations."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import Margin, Viewport

__all__ = [
    "ThemeTokens",
    "ChartStyle",
    "XP_CHART_STYLE",
    "SKILLS_CHART_STYLE",
    "CHART_STYLES",
    "theme_tokens",
    "default_viewport",
]


@dataclass(frozen=True)
class ThemeTokens:
    label_font: str = "Inter"
    axis_label_color: str = "#CBD5E0"
    tick_label_color: str = "#A0AEC0"
    title_color: str = "#E2E8F0"
    value_label_color: str = "#C3DAFE"
    grid_color: str = "#4A5568"
    placeholder_color: str = "#A0AEC0"


@dataclass(frozen=True)
class ChartStyle:
    """Fixed presentation settings for one chart type."""

    name: str
    axis_title: str
    gradient_id: str
    gradient_top: str
    gradient_bottom: str
    unit: str
    value_suffix: str
    tick_suffix: str
    label_rotation: float
    label_max_chars: int
    label_keep_chars: int
    margin: Margin
    height: int
    empty_message: str
    all_zero_message: str
    too_small_message: str = "Chart cannot be rendered (too small)."
    bar_padding: float = 0.3
    value_label_min_height: float = 15.0
    label_offset: float = 25.0
    grid_dash: str = "3,3"


XP_CHART_STYLE = ChartStyle(
    name="xp",
    axis_title="XP Amount",
    gradient_id="barGradient",
    gradient_top="#A78BFA",
    gradient_bottom="#7C3AED",
    unit=" XP",
    value_suffix="",
    tick_suffix="",
    label_rotation=-55.0,
    label_max_chars=15,
    label_keep_chars=12,
    margin=Margin(top=40, right=30, bottom=120, left=70),
    height=380,
    empty_message="No project XP data available",
    all_zero_message="All projects have 0 XP",
)

SKILLS_CHART_STYLE = ChartStyle(
    name="skills",
    axis_title="Skill Level (%)",
    gradient_id="skillBarGradient",
    gradient_top="#F472B6",
    gradient_bottom="#EC4899",
    unit="%",
    value_suffix="%",
    tick_suffix="%",
    label_rotation=-45.0,
    label_max_chars=12,
    label_keep_chars=9,
    margin=Margin(top=40, right=30, bottom=100, left=70),
    height=400,
    empty_message="No skills data available.",
    all_zero_message="All skills have 0% progress.",
    grid_dash="2,2",
)

CHART_STYLES: dict[str, ChartStyle] = {
    XP_CHART_STYLE.name: XP_CHART_STYLE,
    SKILLS_CHART_STYLE.name: SKILLS_CHART_STYLE,
}

_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS


def default_viewport(style: ChartStyle, width: float) -> Viewport:
    """Return the viewport a chart of ``style`` gets at the given width."""

    return Viewport(width=width, height=style.height, margin=style.margin)
