"""
Unit tests for the employee dashboard controller and the parallel loader.
"""
import pytest

from src.api.errors import ApiError, NetworkError, NETWORK_ERROR_MESSAGE, SessionExpiredError
from src.dashboard.base import LOAD_ERROR_MESSAGE, fetch_concurrently
from src.dashboard.employee import ACKNOWLEDGE_ERROR_MESSAGE, EmployeeDashboard

from conftest import make_feedback


@pytest.fixture
def dashboard(mock_client, employee_user):
    mock_client.feedback.get_my_received_feedback.return_value = [
        make_feedback(feedback_id=1, is_acknowledged=False),
        make_feedback(feedback_id=2, is_acknowledged=True, sentiment="neutral"),
        make_feedback(feedback_id=3, is_acknowledged=False, sentiment="negative"),
    ]
    return EmployeeDashboard(mock_client, employee_user)


def test_fetch_concurrently_keeps_call_order():
    results = fetch_concurrently(lambda: "team", lambda: "feedback", lambda: "stats")

    assert results == ["team", "feedback", "stats"]


def test_fetch_concurrently_prefers_session_expired():
    def fails():
        raise ApiError(500, None, "/dashboard/stats")

    def expired():
        raise SessionExpiredError(401, None, "/feedback/my-given")

    with pytest.raises(SessionExpiredError):
        fetch_concurrently(fails, expired)


def test_load_populates_feedback_and_stats(dashboard, mock_client):
    assert dashboard.load() is True

    assert dashboard.loaded is True
    assert dashboard.error == ""
    assert len(dashboard.feedback) == 3
    assert dashboard.stats.total_feedback == 4
    mock_client.feedback.get_my_received_feedback.assert_called_once()
    mock_client.dashboard.get_stats.assert_called_once()


def test_pending_and_unacknowledged_count(dashboard):
    dashboard.load()

    assert [item.id for item in dashboard.pending] == [1, 3]
    assert dashboard.unacknowledged_count == 2


def test_load_failure_sets_generic_message(dashboard, mock_client):
    mock_client.dashboard.get_stats.side_effect = ApiError(500, None, "/dashboard/stats")

    assert dashboard.load() is False
    assert dashboard.loaded is False
    assert dashboard.error == LOAD_ERROR_MESSAGE


def test_load_network_failure_message(dashboard, mock_client):
    mock_client.feedback.get_my_received_feedback.side_effect = NetworkError("refused")

    dashboard.load()

    assert dashboard.error == NETWORK_ERROR_MESSAGE


def test_load_session_expired_propagates(dashboard, mock_client):
    mock_client.dashboard.get_stats.side_effect = SessionExpiredError(401, None, "/dashboard/stats")

    with pytest.raises(SessionExpiredError):
        dashboard.load()


def test_retry_clears_previous_error(dashboard, mock_client):
    stats = mock_client.dashboard.get_stats.return_value
    mock_client.dashboard.get_stats.side_effect = [ApiError(500, None, "/dashboard/stats"), stats]

    dashboard.load()
    assert dashboard.error == LOAD_ERROR_MESSAGE

    assert dashboard.load() is True
    assert dashboard.error == ""


def test_acknowledge_patches_item_and_refreshes_stats(dashboard, mock_client):
    dashboard.load()
    mock_client.feedback.get_my_received_feedback.reset_mock()
    mock_client.dashboard.get_stats.reset_mock()

    assert dashboard.acknowledge(1) is True

    mock_client.feedback.acknowledge_feedback.assert_called_once_with(1)
    mock_client.dashboard.get_stats.assert_called_once()
    mock_client.feedback.get_my_received_feedback.assert_not_called()
    assert [item.id for item in dashboard.pending] == [3]
    assert dashboard.feedback[0].is_acknowledged is True


def test_acknowledge_failure_keeps_item_pending(dashboard, mock_client):
    dashboard.load()
    mock_client.feedback.acknowledge_feedback.side_effect = ApiError(404, "Feedback not found", "/feedback/1/acknowledge")

    assert dashboard.acknowledge(1) is False
    assert dashboard.error == ACKNOWLEDGE_ERROR_MESSAGE
    assert dashboard.unacknowledged_count == 2


def test_acknowledge_session_expired_propagates(dashboard, mock_client):
    dashboard.load()
    mock_client.feedback.acknowledge_feedback.side_effect = SessionExpiredError(401, None, "/feedback/1/acknowledge")

    with pytest.raises(SessionExpiredError):
        dashboard.acknowledge(1)
