"""
Shared plumbing for the dashboard controllers.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List

from pydantic import ValidationError

from src.api.client import FeedbackTrackerClient
from src.api.errors import (
    FeedbackClientError,
    NetworkError,
    NETWORK_ERROR_MESSAGE,
    SessionExpiredError,
    describe_error,
)
from src.api.models import User

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load dashboard data. Please refresh the page."

# Failures a controller turns into an on-screen message. SessionExpiredError
# is a FeedbackClientError too but is always re-raised before these are caught.
RECOVERABLE_ERRORS = (FeedbackClientError, ValidationError)


class ActionError(Exception):
    """A mutation failed; `message` is what the triggering form should display."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def fetch_concurrently(*calls: Callable[[], Any]) -> List[Any]:
    """
    Run independent GETs in parallel and wait for all of them to settle.

    Results come back in call order. If any call failed, an exception is
    raised after every call has finished; a SessionExpiredError wins over
    other failures so the caller always learns the session is gone.
    """
    if not calls:
        return []

    with ThreadPoolExecutor(max_workers=len(calls)) as pool:
        futures = [pool.submit(call) for call in calls]
        outcomes = []
        for future in futures:
            try:
                outcomes.append((future.result(), None))
            except Exception as e:
                outcomes.append((None, e))

    errors = [error for _, error in outcomes if error is not None]
    for error in errors:
        if isinstance(error, SessionExpiredError):
            raise error
    if errors:
        raise errors[0]

    return [result for result, _ in outcomes]


class DashboardController:
    """
    Base for role dashboards: holds the client, the user and the page error.

    Controllers are plain objects kept in Streamlit session state between
    reruns, so they can be exercised in tests without a Streamlit runtime.
    """

    def __init__(self, client: FeedbackTrackerClient, user: User):
        self.client = client
        self.user = user
        self.error = ""
        self.loaded = False

    def load(self) -> bool:
        raise NotImplementedError

    def _load_failed(self, exc: BaseException) -> bool:
        logger.error(f"Error loading dashboard data for {self.user.username}: {exc}")
        self.error = NETWORK_ERROR_MESSAGE if isinstance(exc, NetworkError) else LOAD_ERROR_MESSAGE
        return False

    def _action_failed(self, exc: BaseException, fallback: str, action: str) -> ActionError:
        logger.error(f"Error {action}: {exc}")
        return ActionError(describe_error(exc, fallback))
