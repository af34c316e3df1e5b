"""Application configuration utilities."""

from .log import configure_logging
from .settings import DEFAULT_API_URL, DEFAULT_AUTH_URL, Settings, get_settings

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_AUTH_URL",
    "Settings",
    "configure_logging",
    "get_settings",
]
