"""
Main Streamlit application for the feedback tracker.

Routing:
1. No stored session -> login page
2. Employee -> received feedback dashboard
3. Manager -> team dashboard with feedback and team management views
"""
import streamlit as st
import logging

from components.common import SESSION_EXPIRED_FLAG, expire_session
from components.login_form import LoginForm
from components.employee_dashboard import EmployeeDashboardView
from components.manager_dashboard import ManagerDashboardView
from src.api.client import create_client
from src.api.errors import SessionExpiredError
from src.api.models import User
from src.dashboard.employee import EmployeeDashboard
from src.dashboard.login import LoginController
from src.dashboard.manager import ManagerDashboard
from src.storage.session_store import SessionStore
from config.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def initialize_session_state():
    """
    Initialize Streamlit session state variables.

    The token and user live in a plain dict rather than directly in
    st.session_state so the API client can read them from worker threads.
    """
    if "client_storage" not in st.session_state:
        st.session_state.client_storage = {}

    if "store" not in st.session_state:
        st.session_state.store = SessionStore(st.session_state.client_storage)

    if "client" not in st.session_state:
        logger.info(f"Creating API client for {settings.API_BASE_URL}")
        st.session_state.client = create_client(st.session_state.store)

    if "login_controller" not in st.session_state:
        st.session_state.login_controller = LoginController(
            st.session_state.client,
            st.session_state.store
        )


def get_or_create_dashboard(user: User):
    """
    Get the dashboard controller for this user, creating it on first use or
    when a different user has signed in.
    """
    if st.session_state.get("dashboard_owner") != user.id or "dashboard" not in st.session_state:
        controller_class = ManagerDashboard if user.is_manager else EmployeeDashboard
        logger.info(f"Creating {controller_class.__name__} for {user.username}")
        st.session_state.dashboard = controller_class(st.session_state.client, user)
        st.session_state.dashboard_owner = user.id

    return st.session_state.dashboard


def render_navbar(user: User):
    """Top bar with the signed-in user and a logout button."""
    col1, col2 = st.columns([5, 1])

    with col1:
        st.markdown(f"#### 💬 {settings.APP_TITLE}")
        st.caption(f"Welcome, **{user.username}** ({user.role})")

    with col2:
        if st.button("Logout", use_container_width=True):
            logger.info(f"User {user.username} logging out")
            st.session_state.login_controller.logout()
            for key in ("dashboard", "dashboard_owner"):
                st.session_state.pop(key, None)
            st.rerun()

    st.divider()


def render_login():
    if st.session_state.pop(SESSION_EXPIRED_FLAG, False):
        st.warning("Your session has expired. Please sign in again.", icon="🔒")

    LoginForm(st.session_state.login_controller).render()


def main():
    """Main application entry point."""

    st.set_page_config(
        page_title=settings.APP_TITLE,
        page_icon="💬",
        layout="wide"
    )

    initialize_session_state()

    store: SessionStore = st.session_state.store
    user = store.get_user()

    if not store.is_authenticated() or user is None:
        render_login()
        return

    render_navbar(user)

    dashboard = get_or_create_dashboard(user)

    try:
        if user.is_manager:
            ManagerDashboardView(dashboard).render()
        else:
            EmployeeDashboardView(dashboard).render()
    except SessionExpiredError:
        logger.warning(f"Session expired for {user.username}")
        expire_session()


if __name__ == "__main__":
    main()
