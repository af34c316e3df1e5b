"""Sign-in page."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from core.client import AuthenticationError


def render_page(sign_in: Callable[[str, str], str]) -> None:
    """Render the login form and store the session token on success."""

    st.title("Sign in")
    st.caption("Use your platform username or email.")

    with st.form("login_form"):
        login = st.text_input("Username or email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In")

    if not submitted:
        return

    with st.spinner("Signing in…"):
        try:
            token = sign_in(login, password)
        except AuthenticationError as exc:
            st.error(str(exc) or "Invalid username/email or password. Please try again.")
            return

    st.session_state["token"] = token
    st.rerun()


__all__ = ["render_page"]
