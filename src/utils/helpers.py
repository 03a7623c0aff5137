"""
Utility functions and helpers for the feedback tracker UI.

This module provides formatting used across multiple components: backend
timestamps, sentiment labels and simple list summaries.
"""
from datetime import datetime
from typing import Optional

from config.settings import Settings as settings


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp as returned by the backend.

    Accepts a trailing 'Z' for UTC. Returns None for empty or unparseable
    values so callers can fall back to the raw string.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_datetime(value: Optional[str], format_type: str = "full") -> str:
    """
    Format a backend timestamp consistently across the application.

    Args:
        value: ISO timestamp string
        format_type: "full" (date and time) or "date"

    Returns:
        Formatted string, the raw value if it cannot be parsed, or "—" if empty
    """
    if not value:
        return "—"

    dt = parse_timestamp(value)
    if dt is None:
        return value

    if format_type == "date":
        return dt.strftime("%b %d, %Y")
    return dt.strftime("%b %d, %Y, %I:%M %p")


def was_updated(created_at: str, updated_at: str) -> bool:
    """True when an entry carries an update time different from its creation time."""
    return bool(updated_at) and created_at != updated_at


def sentiment_label(sentiment: str) -> str:
    """Display label for a sentiment value ('negative' reads as 'Constructive')."""
    return settings.SENTIMENTS.get(sentiment, sentiment.title() if sentiment else "")


def sentiment_badge(sentiment: str) -> str:
    """Short badge text with an icon, e.g. '🙂 Positive'."""
    icon = settings.SENTIMENT_ICONS.get(sentiment, "")
    return f"{icon} {sentiment_label(sentiment)}".strip()


def pluralize(count: int, noun: str, plural: Optional[str] = None) -> str:
    """'1 feedback entry' / '3 feedback entries' style counts."""
    if count == 1:
        return f"{count} {noun}"
    return f"{count} {plural or noun + 's'}"
