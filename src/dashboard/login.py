"""
Login and logout flow.
"""
import logging
from typing import Optional

from src.api.client import FeedbackTrackerClient
from src.api.errors import FeedbackClientError, UnauthorizedError, describe_error
from src.api.models import User
from src.dashboard.base import RECOVERABLE_ERRORS
from src.storage.session_store import SessionStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"
LOGIN_FAILED_MESSAGE = "Login failed. Please try again."
MISSING_CREDENTIALS_MESSAGE = "Username and password are required"


class LoginController:
    """
    Exchanges credentials for a token and resolves the logged-in user.

    A successful login leaves both the token and the user in the store; a
    failed one leaves neither.
    """

    def __init__(self, client: FeedbackTrackerClient, store: SessionStore):
        self.client = client
        self.store = store
        self.error = ""

    def login(self, username: str, password: str) -> Optional[User]:
        self.error = ""

        if not (username or "").strip() or not password:
            self.error = MISSING_CREDENTIALS_MESSAGE
            return None

        try:
            response = self.client.auth.login(username, password)
            self.store.set_token(response.access_token)

            user = self.client.users.get_current_user()
            self.store.set_user(user)
        except UnauthorizedError:
            logger.warning(f"Rejected login for '{username}'")
            self.store.clear()
            self.error = INVALID_CREDENTIALS_MESSAGE
            return None
        except RECOVERABLE_ERRORS as e:
            logger.error(f"Login error for '{username}': {e}")
            self.store.clear()
            self.error = describe_error(e, LOGIN_FAILED_MESSAGE)
            return None

        logger.info(f"User {user.username} logged in as {user.role}")
        return user

    def logout(self) -> None:
        """Tell the backend, then always drop the local session."""
        try:
            if self.store.get_token():
                self.client.auth.logout()
        except FeedbackClientError as e:
            logger.warning(f"Logout request failed, clearing local session anyway: {e}")
        finally:
            self.store.clear()
