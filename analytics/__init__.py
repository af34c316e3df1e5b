"""Analytics helpers shared across LearnBoard services."""

from analytics.aggregation import TOP_N, aggregate, coerce_amount, skill_levels, xp_by_project
from analytics.naming import normalize_project_name, normalize_skill_name
from analytics.summary import (
    TotalXpPolicy,
    build_profile_summary,
    build_recent_rows,
    compute_total_xp,
    count_audits,
)

__all__ = [
    "TOP_N",
    "aggregate",
    "coerce_amount",
    "skill_levels",
    "xp_by_project",
    "normalize_project_name",
    "normalize_skill_name",
    "TotalXpPolicy",
    "build_profile_summary",
    "build_recent_rows",
    "compute_total_xp",
    "count_audits",
]
