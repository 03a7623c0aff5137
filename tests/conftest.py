"""
Shared fixtures for the feedback tracker tests.

The HTTP layer is always mocked; no test talks to a real backend.
"""
import json

import pytest
from unittest.mock import Mock

from src.api.client import FeedbackTrackerClient
from src.api.models import DashboardStats, FeedbackWithDetails, User
from src.storage.session_store import SessionStore


def make_response(status_code=200, payload=None):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if payload is None:
        response.content = b""
        response.json.side_effect = ValueError("No JSON body")
    else:
        response.content = json.dumps(payload).encode()
        response.json.return_value = payload
    return response


def make_user(user_id=1, username="alice_employee", role="employee", is_active=True, **kwargs):
    return User(
        id=user_id,
        username=username,
        email=kwargs.pop("email", f"{username}@example.com"),
        role=role,
        is_active=is_active,
        created_at=kwargs.pop("created_at", "2024-01-15T10:30:00"),
        updated_at=kwargs.pop("updated_at", "2024-01-15T10:30:00"),
        **kwargs
    )


def make_feedback(feedback_id=1, employee_id=2, is_acknowledged=False, sentiment="positive"):
    return FeedbackWithDetails(
        id=feedback_id,
        employee_id=employee_id,
        manager_id=1,
        strengths="Clear communicator in team meetings",
        areas_to_improve="Could delegate more of the routine work",
        sentiment=sentiment,
        is_acknowledged=is_acknowledged,
        created_at="2024-02-01T09:00:00",
        updated_at="2024-02-01T09:00:00",
        employee_name="alice_employee",
        manager_name="john_manager"
    )


@pytest.fixture
def storage():
    """Plain dict standing in for the persisted client state."""
    return {}


@pytest.fixture
def store(storage):
    return SessionStore(storage)


@pytest.fixture
def mock_http():
    """Mock requests.Session; tests set `request.return_value` per call."""
    http = Mock()
    http.headers = {}
    return http


@pytest.fixture
def client(store, mock_http):
    return FeedbackTrackerClient(
        store=store,
        base_url="http://api.test",
        timeout=5,
        http=mock_http
    )


@pytest.fixture
def manager_user():
    return make_user(user_id=1, username="john_manager", role="manager")


@pytest.fixture
def employee_user():
    return make_user(user_id=2, username="alice_employee", role="employee")


@pytest.fixture
def mock_client():
    """Mock client with the four resource groups used by the controllers."""
    client = Mock()
    client.dashboard.get_stats.return_value = DashboardStats(
        total_feedback=4,
        positive_feedback=2,
        neutral_feedback=1,
        negative_feedback=1,
        acknowledged_feedback=3,
        team_size=3,
        active_team_size=2
    )
    return client
