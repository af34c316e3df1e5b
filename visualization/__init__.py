"""Visualization utilities for LearnBoard dashboards."""

from .charts import build_figure, build_skills_chart, build_xp_chart
from .scale import compute_scale
from .scene import build_chart, build_chart_result
from .theme import CHART_STYLES, SKILLS_CHART_STYLE, XP_CHART_STYLE, default_viewport, theme_tokens

__all__ = [
    "build_figure",
    "build_skills_chart",
    "build_xp_chart",
    "compute_scale",
    "build_chart",
    "build_chart_result",
    "CHART_STYLES",
    "SKILLS_CHART_STYLE",
    "XP_CHART_STYLE",
    "default_viewport",
    "theme_tokens",
]
