"""Page modules for the LearnBoard Streamlit application."""

from .login import render_page as render_login_page
from .profile import render_page as render_profile_page

__all__ = [
    "render_login_page",
    "render_profile_page",
]
