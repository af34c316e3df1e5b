"""Shared layout primitives for the LearnBoard Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Optional

import streamlit as st


def inject_css() -> None:
    """Inject global CSS tokens and card styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: rgba(255, 255, 255, 0.04);
            --border: rgba(255, 255, 255, 0.08);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #111827;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .lb-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            padding: 0.9rem 0;
          }

          .lb-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #A78BFA;
          }

          .lb-nav__user {
            color: #CBD5E0;
            font-weight: 600;
          }

          .lb-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .lb-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            padding: 1.25rem 1.5rem;
            gap: var(--gap);
          }

          .lb-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
          }

          .lb-card__title {
            font-size: 1.05rem;
            font-weight: 600;
            color: #E2E8F0;
          }

          .lb-chip {
            font-size: 0.75rem;
            font-weight: 600;
            color: #C3DAFE;
            background: rgba(124, 58, 237, 0.25);
            border-radius: 999px;
            padding: 0.15rem 0.6rem;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable LearnBoard card."""

    chip_html = f'<span class="lb-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="lb-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="lb-card__head"><span class="lb-card__title">{title}</span>'
            f"{chip_html}</div>",
            unsafe_allow_html=True,
        )
        yield


def render_navbar(login: Optional[str] = None) -> None:
    user_html = f'<span class="lb-nav__user">{login}</span>' if login else ""
    st.markdown(
        f'<div class="lb-nav"><span class="lb-nav__brand">LearnBoard</span>{user_html}</div>',
        unsafe_allow_html=True,
    )


def render_chart_width_control(default_width: int) -> int:
    """Sidebar control standing in for the browser viewport width."""

    with st.sidebar:
        st.markdown("### Display")
        return int(
            st.slider(
                "Chart width (px)",
                min_value=120,
                max_value=1400,
                value=int(st.session_state.get("chart_width", default_width)),
                step=20,
                key="chart_width",
            )
        )
