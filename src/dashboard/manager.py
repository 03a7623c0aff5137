"""
Manager dashboard: team, given feedback, stats and team administration.

The controller owns the view switching between the main dashboard, the
new-feedback form, team management and a single employee's feedback.
Every mutation is followed by sequential reloads of the collections it
can affect; the backend stays the source of truth for list contents.
"""
import logging
from typing import Dict, List, Optional

from config.settings import Settings as settings
from src.api.errors import SessionExpiredError
from src.api.models import (
    CreateFeedbackData,
    CreateUserData,
    DashboardStats,
    FeedbackWithDetails,
    UpdateFeedbackData,
    UpdateUserData,
    User,
)
from src.dashboard.base import (
    ActionError,
    DashboardController,
    RECOVERABLE_ERRORS,
    fetch_concurrently,
)

logger = logging.getLogger(__name__)

VIEW_DASHBOARD = "dashboard"
VIEW_FEEDBACK = "feedback"
VIEW_TEAM_MANAGEMENT = "team-management"
VIEWS = (VIEW_DASHBOARD, VIEW_FEEDBACK, VIEW_TEAM_MANAGEMENT)

EMPLOYEE_FEEDBACK_ERROR_MESSAGE = "Failed to load employee feedback"


class ManagerDashboard(DashboardController):
    """View state and actions behind the manager dashboard."""

    def __init__(self, client, user):
        super().__init__(client, user)
        self.team_members: List[User] = []
        self.feedback: List[FeedbackWithDetails] = []
        self.stats: Optional[DashboardStats] = None
        self.current_view = VIEW_DASHBOARD
        self.selected_employee: Optional[User] = None
        self.selected_employee_feedback: List[FeedbackWithDetails] = []

    # ----------------------------
    # Loading and navigation
    # ----------------------------
    def load(self) -> bool:
        """Fetch team, given feedback and stats in parallel. Also used by Retry."""
        self.error = ""
        try:
            team, feedback, stats = fetch_concurrently(
                self.client.users.get_my_team,
                self.client.feedback.get_my_given_feedback,
                self.client.dashboard.get_stats
            )
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            return self._load_failed(e)

        self.team_members = team
        self.feedback = feedback
        self.stats = stats
        self.loaded = True
        return True

    def show(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}")
        self.current_view = view

    def back_to_dashboard(self) -> None:
        self.current_view = VIEW_DASHBOARD
        self.selected_employee = None
        self.selected_employee_feedback = []
        self.error = ""

    def view_employee_feedback(self, employee: User) -> bool:
        self.selected_employee = employee
        try:
            self.selected_employee_feedback = self.client.feedback.get_team_member_feedback(employee.id)
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            logger.error(f"Error loading feedback for employee {employee.id}: {e}")
            self.error = EMPLOYEE_FEEDBACK_ERROR_MESSAGE
            return False
        return True

    # ----------------------------
    # Feedback
    # ----------------------------
    def submit_feedback(self, data: CreateFeedbackData) -> None:
        """Create feedback, refresh given feedback and stats, return to the dashboard."""
        try:
            self.client.feedback.create_feedback(data)
            self.feedback = self.client.feedback.get_my_given_feedback()
            self.stats = self.client.dashboard.get_stats()
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            raise self._action_failed(e, "Failed to submit feedback", "submitting feedback") from e

        logger.info(f"{self.user.username} submitted feedback for employee {data.employee_id}")
        self.current_view = VIEW_DASHBOARD

    def edit_feedback(self, feedback_id: int, updates: UpdateFeedbackData) -> None:
        try:
            self.client.feedback.update_feedback(feedback_id, updates)
            self.feedback = self.client.feedback.get_my_given_feedback()

            if self.selected_employee is not None:
                self.selected_employee_feedback = self.client.feedback.get_team_member_feedback(
                    self.selected_employee.id
                )

            self.stats = self.client.dashboard.get_stats()
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            raise self._action_failed(e, "Failed to update feedback", "updating feedback") from e

        logger.info(f"{self.user.username} updated feedback {feedback_id}")

    # ----------------------------
    # Team administration
    # ----------------------------
    def create_employee(self, username: str, email: str, password: str) -> None:
        data = CreateUserData(username=username, email=email, password=password, role="employee")
        try:
            self.client.users.create_user(data)
            self.team_members = self.client.users.get_my_team()
            self.stats = self.client.dashboard.get_stats()
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            raise self._action_failed(e, "Failed to create employee account", "creating employee") from e

        logger.info(f"{self.user.username} created employee account '{username}'")

    def update_employee(self, employee_id: int, updates: UpdateUserData) -> None:
        try:
            self.client.users.update_user(employee_id, updates)
            self.team_members = self.client.users.get_my_team()
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            raise self._action_failed(e, "Failed to update employee", "updating employee") from e

    def toggle_employee_status(self, employee_id: int) -> User:
        """
        Activate or deactivate a team member.

        The member is patched from the response as soon as the toggle
        resolves, then the team and stats are refreshed from the backend.
        """
        try:
            updated = self.client.users.toggle_user_status(employee_id)
            self._replace_member(updated)

            self.team_members = self.client.users.get_my_team()
            self.stats = self.client.dashboard.get_stats()
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            raise self._action_failed(e, "Failed to update employee status", "toggling employee status") from e

        logger.info(
            f"{self.user.username} set employee {employee_id} "
            f"{'active' if updated.is_active else 'inactive'}"
        )
        return updated

    def _replace_member(self, member: User) -> None:
        self.team_members = [
            member if existing.id == member.id else existing
            for existing in self.team_members
        ]

    # ----------------------------
    # Derived values for rendering
    # ----------------------------
    @property
    def active_team_members(self) -> List[User]:
        return [member for member in self.team_members if member.is_active]

    @property
    def inactive_team_members(self) -> List[User]:
        return [member for member in self.team_members if not member.is_active]

    @property
    def recent_feedback(self) -> List[FeedbackWithDetails]:
        return self.feedback[:settings.RECENT_FEEDBACK_LIMIT]

    def feedback_for(self, employee_id: int) -> List[FeedbackWithDetails]:
        return [item for item in self.feedback if item.employee_id == employee_id]

    def member_summary(self, member: User) -> Dict[str, int]:
        """Feedback count and unread (unacknowledged) count for one member."""
        entries = self.feedback_for(member.id)
        return {
            "total": len(entries),
            "unread": sum(1 for item in entries if not item.is_acknowledged)
        }
