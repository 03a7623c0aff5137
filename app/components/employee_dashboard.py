"""
Employee dashboard page.
"""
import streamlit as st
import logging

from src.dashboard.employee import EmployeeDashboard

from .feedback_list import FeedbackList

logger = logging.getLogger(__name__)


class EmployeeDashboardView:
    """
    Shows the feedback an employee has received, its sentiment breakdown,
    and the items still awaiting acknowledgment.
    """

    def __init__(self, dashboard: EmployeeDashboard):
        self.dashboard = dashboard

    def render(self):
        dashboard = self.dashboard

        if not dashboard.loaded and not dashboard.error:
            with st.spinner("Loading dashboard..."):
                dashboard.load()

        if dashboard.error:
            self._display_error()
            return

        st.title("My Feedback")
        st.caption("Track your feedback and professional development")

        self._display_stats()
        self._display_sentiment_overview()

        if dashboard.unacknowledged_count > 0:
            st.markdown("### 🟠 New Feedback Awaiting Review")
            st.warning(
                f"You have {dashboard.unacknowledged_count} feedback item(s) that need your acknowledgment"
            )
            FeedbackList(
                dashboard.pending,
                is_manager=False,
                key="employee_pending",
                on_acknowledge=dashboard.acknowledge
            ).render()
            st.divider()

        st.markdown("### Feedback Timeline")
        st.caption("All feedback you've received, sorted by most recent")
        FeedbackList(
            dashboard.feedback,
            is_manager=False,
            key="employee_timeline",
            on_acknowledge=dashboard.acknowledge
        ).render()

    def _display_error(self):
        st.error(self.dashboard.error, icon="⚠️")
        if st.button("Retry", type="primary"):
            with st.spinner("Loading dashboard..."):
                self.dashboard.load()
            st.rerun()

    def _display_stats(self):
        stats = self.dashboard.stats
        if stats is None:
            return

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("💬 Total Feedback", stats.total_feedback)
        with col2:
            st.metric("✅ Acknowledged", stats.acknowledged_feedback)
        with col3:
            st.metric("🕒 Pending Review", self.dashboard.unacknowledged_count)
        with col4:
            st.metric("📈 Positive Feedback", stats.positive_feedback)

    def _display_sentiment_overview(self):
        stats = self.dashboard.stats
        if stats is None:
            return

        with st.container(border=True):
            st.markdown("**Feedback Overview**")
            st.caption("Summary of your feedback sentiment")
            st.markdown(
                f"🟢 Positive ({stats.positive_feedback})    "
                f"🟡 Neutral ({stats.neutral_feedback})    "
                f"🔴 Negative ({stats.negative_feedback})"
            )
