"""
Exceptions raised by the API client and helpers to turn them into messages.
"""
from typing import Any, Optional


NETWORK_ERROR_MESSAGE = "Unable to reach the server. Please check your connection and try again."


class FeedbackClientError(Exception):
    """Base class for every error raised by the feedback tracker client."""


class NetworkError(FeedbackClientError):
    """The backend could not be reached (connection refused, DNS, timeout)."""


class ApiError(FeedbackClientError):
    """The backend answered with a non-success status code."""

    def __init__(self, status_code: int, detail: Optional[str] = None, path: str = ""):
        self.status_code = status_code
        self.detail = detail
        self.path = path
        message = f"{status_code} on {path}" if path else str(status_code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnauthorizedError(ApiError):
    """HTTP 401. On login this means the credentials were rejected."""


class SessionExpiredError(UnauthorizedError):
    """HTTP 401 on an authenticated request. The stored session is already cleared."""


def extract_detail(payload: Any) -> Optional[str]:
    """
    Pull a human-readable message out of an error body.

    Handles the plain `{"detail": "..."}` shape as well as FastAPI-style
    validation errors where `detail` is a list of `{"loc": ..., "msg": ...}`.
    """
    if not isinstance(payload, dict):
        return None

    detail = payload.get("detail", payload.get("message"))
    if detail is None:
        return None

    if isinstance(detail, str):
        return detail.strip() or None

    if isinstance(detail, list):
        messages = []
        for item in detail:
            if isinstance(item, dict):
                msg = item.get("msg")
                loc = item.get("loc") or []
                field = loc[-1] if loc else None
                if msg and field and field != "body":
                    messages.append(f"{field}: {msg}")
                elif msg:
                    messages.append(str(msg))
            else:
                messages.append(str(item))
        return "; ".join(messages) or None

    return str(detail)


def describe_error(exc: BaseException, fallback: str) -> str:
    """Map a client error to the single message shown to the user."""
    if isinstance(exc, NetworkError):
        return NETWORK_ERROR_MESSAGE
    if isinstance(exc, ApiError) and exc.detail:
        return exc.detail
    return fallback
