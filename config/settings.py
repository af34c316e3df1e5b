"""Centralised configuration handling for LearnBoard."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Mapping, Optional

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://learn.zone01kisumu.ke/api/graphql-engine/v1/graphql"
DEFAULT_AUTH_URL = "https://learn.zone01kisumu.ke/api/auth/signin"

_SECRET_KEYS = (
    "api_url",
    "auth_url",
    "request_timeout",
    "total_xp_policy",
    "xp_event_id",
    "debounce_ms",
    "top_n",
    "tick_count",
    "chart_width",
    "log_level",
    "log_json",
)


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    api_url: str = DEFAULT_API_URL
    auth_url: str = DEFAULT_AUTH_URL
    request_timeout: float = 15.0

    total_xp_policy: Literal["all", "event"] = "event"
    xp_event_id: Optional[int] = 75

    debounce_ms: int = 250
    top_n: int = 10
    tick_count: int = 5
    chart_width: int = 500

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(env_prefix="LEARNBOARD_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("learnboard")
    if secrets_section:
        overrides = {key: secrets_section.get(key) for key in _SECRET_KEYS}

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
