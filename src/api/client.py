"""
HTTP client for the feedback tracker backend.

This module wraps a `requests.Session` with the two rules the whole UI
relies on:

- every request except login carries `Authorization: Bearer <token>`
  when a token is stored
- a 401 on any non-login request clears the stored session and raises
  `SessionExpiredError`, which the app shell turns into a return to login

Endpoints are grouped the way the backend groups its routers: auth, users,
feedback and dashboard.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, List, Optional

import requests

from config.settings import Settings as settings
from src.api.errors import (
    ApiError,
    NetworkError,
    SessionExpiredError,
    UnauthorizedError,
    extract_detail,
)
from src.api.models import (
    CreateFeedbackData,
    CreateUserData,
    DashboardStats,
    Feedback,
    FeedbackWithDetails,
    LoginData,
    LoginResponse,
    UpdateFeedbackData,
    UpdateUserData,
    User,
    feedback_from_json,
    users_from_json,
)

if TYPE_CHECKING:
    from src.storage.session_store import SessionStore

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth/login"


class FeedbackTrackerClient:
    """
    Thin wrapper around the backend's REST API.

    Args:
        store: SessionStore holding the bearer token and user
        base_url: Backend root URL (defaults to settings)
        timeout: Per-request timeout in seconds, None to wait indefinitely
        on_unauthorized: Called after a forced logout on 401
        http: Optional pre-built requests.Session
    """

    def __init__(
        self,
        store: "SessionStore",
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
        http: Optional[requests.Session] = None
    ):
        self.store = store
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.on_unauthorized = on_unauthorized

        self.http = http or requests.Session()
        self.http.headers.update({"Content-Type": "application/json"})

        self.auth = AuthAPI(self)
        self.users = UsersAPI(self)
        self.feedback = FeedbackAPI(self)
        self.dashboard = DashboardAPI(self)

    @staticmethod
    def _is_login(path: str) -> bool:
        return LOGIN_PATH in path

    def _headers(self, path: str) -> dict:
        if self._is_login(path):
            return {}
        token = self.store.get_token()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        """
        Issue a request and return the decoded JSON body (None when empty).

        Raises:
            NetworkError: the server could not be reached
            UnauthorizedError: 401 on the login endpoint
            SessionExpiredError: 401 anywhere else (session already cleared)
            ApiError: any other non-2xx response
        """
        url = f"{self.base_url}{path}"

        try:
            response = self.http.request(
                method,
                url,
                json=json,
                headers=self._headers(path),
                timeout=self.timeout
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.error(f"{method} {path} failed: server unreachable ({type(e).__name__})")
            raise NetworkError(str(e)) from e

        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.status_code == 401:
            detail = extract_detail(self._decode(response))
            if self._is_login(path):
                raise UnauthorizedError(401, detail, path)
            self._force_logout(path)
            raise SessionExpiredError(401, detail, path)

        if not response.ok:
            detail = extract_detail(self._decode(response))
            logger.warning(f"{method} {path} rejected with {response.status_code}: {detail}")
            raise ApiError(response.status_code, detail, path)

        if response.status_code == 204:
            return None
        return self._decode(response)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def _force_logout(self, path: str) -> None:
        logger.warning(f"Received 401 on {path}; clearing stored session")
        self.store.clear()
        if self.on_unauthorized is not None:
            self.on_unauthorized()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Optional[dict] = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Optional[dict] = None) -> Any:
        return self.request("PUT", path, json=json)


class _Resource:
    def __init__(self, client: FeedbackTrackerClient):
        self.client = client


class AuthAPI(_Resource):

    def login(self, username: str, password: str) -> LoginResponse:
        data = LoginData(username=username, password=password)
        return LoginResponse.model_validate(
            self.client.post(LOGIN_PATH, data.model_dump())
        )

    def get_current_user(self) -> User:
        return User.model_validate(self.client.get("/auth/me"))

    def logout(self) -> None:
        self.client.post("/auth/logout")


class UsersAPI(_Resource):

    def create_user(self, data: CreateUserData) -> User:
        return User.model_validate(self.client.post("/users/", data.model_dump()))

    def get_current_user(self) -> User:
        return User.model_validate(self.client.get("/users/me"))

    def get_my_team(self) -> List[User]:
        return users_from_json(self.client.get("/users/my-team"))

    def get_user(self, user_id: int) -> User:
        return User.model_validate(self.client.get(f"/users/{user_id}"))

    def update_user(self, user_id: int, data: UpdateUserData) -> User:
        return User.model_validate(
            self.client.put(f"/users/{user_id}", data.model_dump(exclude_none=True))
        )

    def toggle_user_status(self, user_id: int) -> User:
        return User.model_validate(self.client.post(f"/users/{user_id}/toggle-status"))

    def get_team_stats(self, manager_id: int) -> Any:
        # Shape is defined by the backend; passed through untouched
        return self.client.get(f"/users/team-stats/{manager_id}")


class FeedbackAPI(_Resource):

    def create_feedback(self, data: CreateFeedbackData) -> Feedback:
        return Feedback.model_validate(self.client.post("/feedback/", data.model_dump()))

    def get_my_received_feedback(self) -> List[FeedbackWithDetails]:
        return feedback_from_json(self.client.get("/feedback/my-received"))

    def get_team_member_feedback(self, employee_id: int) -> List[FeedbackWithDetails]:
        return feedback_from_json(self.client.get(f"/feedback/team-member/{employee_id}"))

    def get_my_given_feedback(self) -> List[FeedbackWithDetails]:
        return feedback_from_json(self.client.get("/feedback/my-given"))

    def update_feedback(self, feedback_id: int, data: UpdateFeedbackData) -> Feedback:
        return Feedback.model_validate(
            self.client.put(f"/feedback/{feedback_id}", data.model_dump(exclude_none=True))
        )

    def acknowledge_feedback(self, feedback_id: int) -> Feedback:
        return Feedback.model_validate(self.client.post(f"/feedback/{feedback_id}/acknowledge"))


class DashboardAPI(_Resource):

    def get_stats(self) -> DashboardStats:
        return DashboardStats.model_validate(self.client.get("/dashboard/stats"))

    def get_team_overview(self) -> Any:
        return self.client.get("/dashboard/team-overview")


def create_client(store: "SessionStore", **kwargs) -> FeedbackTrackerClient:
    """Factory function to create an API client."""
    return FeedbackTrackerClient(store=store, **kwargs)
