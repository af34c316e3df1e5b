"""LearnBoard learner dashboard."""

from __future__ import annotations

import logging
from typing import Optional

import plotly.graph_objects as go
import streamlit as st

from analytics.summary import TotalXpPolicy, build_profile_summary
from app.layout import inject_css, render_chart_width_control, render_navbar
from app.pages import render_login_page, render_profile_page
from config import Settings, configure_logging, get_settings
from core.client import AuthenticationError, DataSourceError, GraphQLClient
from core.coordinator import RenderCoordinator
from core.models import ChartResult, Viewport
from visualization.charts import build_figure
from visualization.theme import CHART_STYLES, default_viewport

logger = logging.getLogger(__name__)

_STATE_TOKEN = "token"
_STATE_COORDINATOR = "coordinator"
_STATE_FIGURES = "figures"
_STATE_VIEWPORTS = "viewports"


def _chart_viewports(width: int) -> dict[str, Viewport]:
    return {name: default_viewport(style, width) for name, style in CHART_STYLES.items()}


def _store_figure(name: str, result: ChartResult, viewport: Viewport) -> None:
    figures: dict[str, go.Figure] = st.session_state.setdefault(_STATE_FIGURES, {})
    figures[name] = build_figure(result, viewport, CHART_STYLES[name].grid_dash)


def _get_coordinator(settings: Settings) -> RenderCoordinator:
    coordinator = st.session_state.get(_STATE_COORDINATOR)
    if coordinator is None:
        coordinator = RenderCoordinator(
            _store_figure,
            debounce_ms=settings.debounce_ms,
            tick_count=settings.tick_count,
            top_n=settings.top_n,
        )
        st.session_state[_STATE_COORDINATOR] = coordinator
    return coordinator


def _logout(client: Optional[GraphQLClient] = None) -> None:
    if client is not None:
        client.sign_out()
    coordinator: Optional[RenderCoordinator] = st.session_state.get(_STATE_COORDINATOR)
    if coordinator is not None:
        coordinator.logout()
    for key in (_STATE_TOKEN, _STATE_FIGURES, _STATE_VIEWPORTS):
        st.session_state.pop(key, None)
    logger.info("Signed out")


def _load_profile(
    client: GraphQLClient,
    coordinator: RenderCoordinator,
    viewports: dict[str, Viewport],
) -> bool:
    coordinator.begin_load()
    with st.spinner("Loading profile…"):
        try:
            dataset = client.fetch_dataset()
        except AuthenticationError as exc:
            coordinator.fail_load()
            logger.warning("Profile load rejected: %s", exc)
            _logout(client)
            st.error(f"{exc}. Please sign in again.")
            return False
        except DataSourceError as exc:
            coordinator.fail_load()
            logger.error("Profile load failed: %s", exc)
            st.error(f"{exc}. Try logging out and in.")
            return False

    coordinator.complete_load(dataset, viewports)
    return True


def main() -> None:
    """Application entrypoint for the LearnBoard dashboard."""

    st.set_page_config(
        page_title="LearnBoard | Profile",
        page_icon="📊",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    settings = get_settings()
    configure_logging(settings.log_level, structured_json=settings.log_json)
    inject_css()

    token = st.session_state.get(_STATE_TOKEN)
    if not token:
        render_navbar()
        client = GraphQLClient(settings)
        render_login_page(client.sign_in)
        return

    client = GraphQLClient(settings, token=token)
    coordinator = _get_coordinator(settings)
    width = render_chart_width_control(settings.chart_width)
    viewports = _chart_viewports(width)

    if coordinator.cache.get() is None:
        if not _load_profile(client, coordinator, viewports):
            return
    elif viewports != st.session_state.get(_STATE_VIEWPORTS):
        # st.slider reports once per release and no poll runs between reruns
        coordinator.request_resize(viewports)
        coordinator.flush()
    st.session_state[_STATE_VIEWPORTS] = viewports

    dataset = coordinator.cache.get()
    if dataset is None:
        return

    summary = build_profile_summary(
        dataset,
        TotalXpPolicy(settings.total_xp_policy),
        settings.xp_event_id,
    )
    render_navbar(dataset.user.login)
    render_profile_page(
        dataset.user,
        summary,
        st.session_state.get(_STATE_FIGURES, {}),
        on_logout=lambda: _logout(client),
    )


if __name__ == "__main__":
    main()
