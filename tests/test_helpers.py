"""
Unit tests for formatting helpers and derived stats.
"""
from datetime import datetime, timezone

from src.api.errors import ApiError, NetworkError, NETWORK_ERROR_MESSAGE, describe_error
from src.api.models import DashboardStats
from src.utils.helpers import (
    format_datetime,
    parse_timestamp,
    pluralize,
    sentiment_badge,
    sentiment_label,
    was_updated,
)


def test_parse_timestamp_with_utc_suffix():
    dt = parse_timestamp("2024-03-05T14:20:00Z")

    assert dt == datetime(2024, 3, 5, 14, 20, tzinfo=timezone.utc)


def test_parse_timestamp_invalid():
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp("") is None


def test_format_datetime_full_and_date():
    assert format_datetime("2024-03-05T14:20:00") == "Mar 05, 2024, 02:20 PM"
    assert format_datetime("2024-03-05T14:20:00", "date") == "Mar 05, 2024"


def test_format_datetime_fallbacks():
    assert format_datetime("") == "—"
    assert format_datetime(None) == "—"
    assert format_datetime("not a date") == "not a date"


def test_was_updated():
    assert was_updated("2024-03-05T14:20:00", "2024-03-06T08:00:00") is True
    assert was_updated("2024-03-05T14:20:00", "2024-03-05T14:20:00") is False
    assert was_updated("2024-03-05T14:20:00", "") is False


def test_sentiment_labels():
    assert sentiment_label("positive") == "Positive"
    assert sentiment_label("negative") == "Constructive"
    assert sentiment_badge("neutral") == "😐 Neutral"


def test_pluralize():
    assert pluralize(1, "feedback entry", "feedback entries") == "1 feedback entry"
    assert pluralize(0, "feedback entry", "feedback entries") == "0 feedback entries"
    assert pluralize(3, "member") == "3 members"


def test_acknowledgment_rate_rounds():
    stats = DashboardStats(total_feedback=3, acknowledged_feedback=2)

    assert stats.acknowledgment_rate == 67


def test_acknowledgment_rate_rounds_halves_up():
    assert DashboardStats(total_feedback=8, acknowledged_feedback=1).acknowledgment_rate == 13
    assert DashboardStats(total_feedback=8, acknowledged_feedback=5).acknowledgment_rate == 63
    assert DashboardStats(total_feedback=200, acknowledged_feedback=1).acknowledgment_rate == 1


def test_acknowledgment_rate_without_feedback():
    assert DashboardStats().acknowledgment_rate == 0


def test_inactive_team_size():
    stats = DashboardStats(team_size=5, active_team_size=3)

    assert stats.inactive_team_size == 2
    assert DashboardStats().inactive_team_size == 0


def test_describe_error():
    assert describe_error(NetworkError("refused"), "fallback") == NETWORK_ERROR_MESSAGE
    assert describe_error(ApiError(400, "Email already registered"), "fallback") == "Email already registered"
    assert describe_error(ApiError(500), "fallback") == "fallback"
    assert describe_error(ValueError("boom"), "fallback") == "fallback"
