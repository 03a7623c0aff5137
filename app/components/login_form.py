"""
Login page.
"""
import streamlit as st
import logging

from config.settings import settings
from src.dashboard.login import LoginController

logger = logging.getLogger(__name__)


class LoginForm:
    """Renders the sign-in card and hands credentials to the LoginController."""

    def __init__(self, controller: LoginController):
        self.controller = controller

    def render(self):
        _, center, _ = st.columns([1, 2, 1])

        with center:
            st.title(settings.APP_TITLE)
            st.caption("Sign in to your account to continue")

            with st.form("login_form"):
                username = st.text_input("Username", placeholder="Enter your username")
                password = st.text_input("Password", type="password", placeholder="Enter your password")
                submitted = st.form_submit_button("Sign In", type="primary", use_container_width=True)

            if submitted:
                with st.spinner("Signing in..."):
                    user = self.controller.login(username, password)

                if user is not None:
                    st.rerun()

            if self.controller.error:
                st.error(self.controller.error, icon="⚠️")

            self._display_demo_accounts()

    def _display_demo_accounts(self):
        if not settings.DEMO_ACCOUNTS:
            return

        lines = [
            f"- **{settings.demo_account_role(name)}:** `{name}` / `{settings.DEMO_PASSWORD}`"
            for name in settings.DEMO_ACCOUNTS
        ]
        st.info("**Demo Accounts:**\n\n" + "\n".join(lines))
