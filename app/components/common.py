"""
Small pieces shared by several components.
"""
import streamlit as st

SESSION_EXPIRED_FLAG = "session_expired"


def expire_session():
    """
    Return to the login screen after the backend rejected the session.

    The API client has already cleared the stored token and user; this only
    drops the per-session view state and reruns the app.
    """
    for key in ("dashboard", "dashboard_owner"):
        st.session_state.pop(key, None)
    st.session_state[SESSION_EXPIRED_FLAG] = True
    st.rerun()


def render_back_header(title: str, on_back) -> None:
    """Header row with a 'Dashboard' button that leaves a sub-view."""
    col1, col2 = st.columns([1, 5])
    with col1:
        if st.button("🏠 Dashboard", key=f"back_{title}", use_container_width=True):
            on_back()
            st.rerun()
    with col2:
        st.subheader(title)
    st.divider()
