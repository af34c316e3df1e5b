"""Learner profile page layout."""

from __future__ import annotations

from typing import Callable, Mapping

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from app.layout import card
from core.formatting import format_number
from core.models import ProfileSummary, UserProfile


def _render_stats_card(user: UserProfile, summary: ProfileSummary) -> None:
    id_col, login_col = st.columns(2)
    id_col.metric("User ID", user.id)
    login_col.metric("Login", user.login)

    metric_cols = st.columns((1, 1, 1, 1))
    metric_cols[0].metric("Total XP", summary["total_xp_label"])
    metric_cols[1].metric("Audit ratio", summary["audit_ratio"])
    metric_cols[2].metric("Audits done", summary["audits_done"])
    metric_cols[3].metric("Audits received", summary["audits_received"])
    st.caption(f"{summary['project_count']} projects · {summary['skill_count']} skills")


def _render_recent_card(summary: ProfileSummary) -> None:
    rows = summary["recent_rows"]
    if not rows:
        st.info("No XP transactions found.")
        return

    table = pd.DataFrame(rows).rename(columns={"name": "Task", "amount": "XP", "date": "Date"})
    table["XP"] = table["XP"].map(format_number)
    st.dataframe(table, hide_index=True, use_container_width=True)


def render_page(
    user: UserProfile,
    summary: ProfileSummary,
    figures: Mapping[str, go.Figure],
    on_logout: Callable[[], None],
) -> None:
    """Render the profile dashboard page."""

    st.title("Profile")
    st.button("Logout", on_click=on_logout)

    with card("Overview", suffix=user.login):
        _render_stats_card(user, summary)

    xp_col, skills_col = st.columns(2, gap="medium")
    with xp_col:
        with card("XP by project", suffix="Top 10"):
            if "xp" in figures:
                st.plotly_chart(figures["xp"], use_container_width=False, key="xp-chart")
    with skills_col:
        with card("Skills", suffix="Top 10"):
            if "skills" in figures:
                st.plotly_chart(figures["skills"], use_container_width=False, key="skills-chart")

    with card("Recent XP transactions"):
        _render_recent_card(summary)


__all__ = ["render_page"]
