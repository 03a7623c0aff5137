# ============= src/api/__init__.py =============
'''HTTP client package for the feedback tracker backend.'''

from .client import FeedbackTrackerClient, create_client
from .errors import (
    FeedbackClientError,
    NetworkError,
    ApiError,
    UnauthorizedError,
    SessionExpiredError,
    describe_error
)

__all__ = [
    'FeedbackTrackerClient',
    'create_client',
    'FeedbackClientError',
    'NetworkError',
    'ApiError',
    'UnauthorizedError',
    'SessionExpiredError',
    'describe_error'
]
