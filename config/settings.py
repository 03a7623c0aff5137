"""
Configuration settings for the Feedback Tracker client
"""
import os
import streamlit as st
from streamlit.errors import StreamlitAPIException
from typing import List, Dict, Optional
from dotenv import load_dotenv

# Load .env only for local development
load_dotenv()


def get_secret(key: str, default: str = "") -> str:
    """
    Get secret from Streamlit secrets (cloud) or environment (local).
    Tries st.secrets first, falls back to os.getenv.
    """
    try:
        # Try Streamlit secrets first (works in cloud)
        return st.secrets.get(key, default)
    except (AttributeError, FileNotFoundError, StreamlitAPIException):
        # Fall back to environment variables (local development)
        return os.getenv(key, default)


def _parse_timeout(value: str) -> Optional[float]:
    """Parse REQUEST_TIMEOUT; '0' or 'none' disables the timeout."""
    if value is None or str(value).strip().lower() in ("", "0", "none"):
        return None
    try:
        return float(value)
    except ValueError:
        return 10.0


class Settings:
    """Application settings loaded from Streamlit secrets or environment variables"""

    # Backend API
    API_BASE_URL: str = str(get_secret("FEEDBACK_API_URL", "http://localhost:8000")).rstrip("/")
    REQUEST_TIMEOUT: Optional[float] = _parse_timeout(str(get_secret("REQUEST_TIMEOUT", "10")))

    # Persisted client state keys
    TOKEN_KEY: str = "authToken"
    USER_KEY: str = "user"

    # UI
    APP_TITLE: str = get_secret("APP_TITLE", "Feedback System")
    DEMO_ACCOUNTS: List[str] = [
        name.strip()
        for name in str(get_secret(
            "DEMO_ACCOUNTS",
            "john_manager,sarah_manager,alice_employee,bob_employee"
        )).split(",")
        if name.strip()
    ]
    DEMO_PASSWORD: str = get_secret("DEMO_PASSWORD", "password")
    RECENT_FEEDBACK_LIMIT: int = 5

    # Form rules
    MIN_FEEDBACK_LENGTH: int = 10
    MIN_USERNAME_LENGTH: int = 3
    MIN_PASSWORD_LENGTH: int = 6

    # Sentiment values with their display labels
    SENTIMENTS: Dict[str, str] = {
        "positive": "Positive",
        "neutral": "Neutral",
        "negative": "Constructive"
    }

    SENTIMENT_ICONS: Dict[str, str] = {
        "positive": "🙂",
        "neutral": "😐",
        "negative": "🙁"
    }

    ROLES: List[str] = ["manager", "employee"]

    # Logging
    LOG_LEVEL: str = get_secret("LOG_LEVEL", "INFO")

    @classmethod
    def demo_account_role(cls, username: str) -> str:
        """Guess a demo account's role from its name, for the login page hint."""
        return "Manager" if "manager" in username.lower() else "Employee"

settings = Settings()
