"""
Employee dashboard: received feedback, acknowledgment and personal stats.
"""
import logging
from typing import List, Optional

from src.api.errors import SessionExpiredError
from src.api.models import DashboardStats, FeedbackWithDetails
from src.dashboard.base import DashboardController, RECOVERABLE_ERRORS, fetch_concurrently

logger = logging.getLogger(__name__)

ACKNOWLEDGE_ERROR_MESSAGE = "Failed to acknowledge feedback. Please try again."


class EmployeeDashboard(DashboardController):
    """View state and actions behind the employee dashboard."""

    def __init__(self, client, user):
        super().__init__(client, user)
        self.feedback: List[FeedbackWithDetails] = []
        self.stats: Optional[DashboardStats] = None

    def load(self) -> bool:
        """Fetch received feedback and stats in parallel. Also used by Retry."""
        self.error = ""
        try:
            feedback, stats = fetch_concurrently(
                self.client.feedback.get_my_received_feedback,
                self.client.dashboard.get_stats
            )
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            return self._load_failed(e)

        self.feedback = feedback
        self.stats = stats
        self.loaded = True
        return True

    def acknowledge(self, feedback_id: int) -> bool:
        """
        Acknowledge one feedback item.

        The item is flipped in the local list instead of reloading the whole
        list; only the stats are fetched again.
        """
        try:
            self.client.feedback.acknowledge_feedback(feedback_id)

            self.feedback = [
                item.model_copy(update={"is_acknowledged": True}) if item.id == feedback_id else item
                for item in self.feedback
            ]

            self.stats = self.client.dashboard.get_stats()
        except SessionExpiredError:
            raise
        except RECOVERABLE_ERRORS as e:
            logger.error(f"Error acknowledging feedback {feedback_id}: {e}")
            self.error = ACKNOWLEDGE_ERROR_MESSAGE
            return False

        logger.info(f"{self.user.username} acknowledged feedback {feedback_id}")
        return True

    @property
    def pending(self) -> List[FeedbackWithDetails]:
        return [item for item in self.feedback if not item.is_acknowledged]

    @property
    def unacknowledged_count(self) -> int:
        return len(self.pending)
