"""
Unit tests for the Streamlit app shell.

These tests verify role routing after login and the return to the login
page when the backend rejects the session mid-render. Streamlit is patched
out; session state is a plain dict with attribute access.
"""
import pytest
from unittest.mock import MagicMock, patch

import streamlit_app
from components.common import SESSION_EXPIRED_FLAG
from src.api.client import FeedbackTrackerClient
from src.dashboard.employee import EmployeeDashboard
from src.dashboard.manager import ManagerDashboard
from src.storage.session_store import SessionStore

from conftest import make_response, make_user


class FakeSessionState(dict):
    """Dict that also allows `st.session_state.key` access."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError as e:
            raise AttributeError(key) from e

    def __setattr__(self, key, value):
        self[key] = value


@pytest.fixture
def fake_st():
    st = MagicMock()
    st.session_state = FakeSessionState()
    with patch("streamlit_app.st", st), \
            patch("components.common.st", st), \
            patch("components.manager_dashboard.st", st):
        yield st


@pytest.fixture
def app_session(fake_st, mock_http):
    """Session state seeded with a store and a client over a mocked HTTP session."""
    storage = {}
    store = SessionStore(storage)
    client = FeedbackTrackerClient(store=store, base_url="http://api.test", http=mock_http)

    fake_st.session_state.client_storage = storage
    fake_st.session_state.store = store
    fake_st.session_state.client = client
    return fake_st.session_state


def sign_in(session, user):
    session.store.set_token("abc123")
    session.store.set_user(user)


@pytest.fixture
def patched_views():
    with patch("streamlit_app.render_navbar"), \
            patch("streamlit_app.LoginForm") as login_form, \
            patch("streamlit_app.ManagerDashboardView") as manager_view, \
            patch("streamlit_app.EmployeeDashboardView") as employee_view:
        yield {"login": login_form, "manager": manager_view, "employee": employee_view}


def test_signed_out_user_sees_login(fake_st, app_session, patched_views):
    streamlit_app.main()

    patched_views["login"].return_value.render.assert_called_once()
    patched_views["manager"].assert_not_called()
    patched_views["employee"].assert_not_called()
    fake_st.warning.assert_not_called()


def test_manager_routes_to_manager_dashboard(app_session, patched_views):
    sign_in(app_session, make_user(user_id=1, username="john_manager", role="manager"))

    streamlit_app.main()

    assert isinstance(app_session.dashboard, ManagerDashboard)
    assert app_session.dashboard_owner == 1
    patched_views["manager"].assert_called_once_with(app_session.dashboard)
    patched_views["employee"].assert_not_called()


def test_employee_routes_to_employee_dashboard(app_session, patched_views):
    sign_in(app_session, make_user(user_id=2, username="alice_employee", role="employee"))

    streamlit_app.main()

    assert isinstance(app_session.dashboard, EmployeeDashboard)
    patched_views["employee"].assert_called_once_with(app_session.dashboard)
    patched_views["manager"].assert_not_called()


def test_dashboard_is_kept_across_reruns(app_session, patched_views):
    sign_in(app_session, make_user(user_id=2, username="alice_employee", role="employee"))

    streamlit_app.main()
    first = app_session.dashboard
    streamlit_app.main()

    assert app_session.dashboard is first


def test_dashboard_is_replaced_when_user_changes(app_session):
    manager = make_user(user_id=1, username="john_manager", role="manager")
    employee = make_user(user_id=2, username="alice_employee", role="employee")

    first = streamlit_app.get_or_create_dashboard(manager)
    second = streamlit_app.get_or_create_dashboard(employee)

    assert isinstance(first, ManagerDashboard)
    assert isinstance(second, EmployeeDashboard)
    assert app_session.dashboard_owner == 2


def test_expired_session_returns_to_login_with_notice(fake_st, app_session, mock_http):
    """A 401 while the manager dashboard loads clears the session and shows the login warning."""
    sign_in(app_session, make_user(user_id=1, username="john_manager", role="manager"))
    mock_http.request.return_value = make_response(401, {"detail": "Token expired"})

    with patch("streamlit_app.render_navbar"), patch("streamlit_app.LoginForm") as login_form:
        streamlit_app.main()

        assert app_session.store.is_authenticated() is False
        assert "dashboard" not in app_session
        assert app_session[SESSION_EXPIRED_FLAG] is True
        fake_st.rerun.assert_called_once()

        streamlit_app.main()

    fake_st.warning.assert_called_once_with("Your session has expired. Please sign in again.", icon="🔒")
    login_form.return_value.render.assert_called_once()
    assert SESSION_EXPIRED_FLAG not in app_session
