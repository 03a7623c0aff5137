"""
Manager dashboard page and its sub-views.

View switching is driven entirely by the ManagerDashboard controller:
the team management view, the new-feedback form, a single employee's
feedback, or the main dashboard.
"""
import streamlit as st
import logging

from src.dashboard.manager import ManagerDashboard, VIEW_DASHBOARD, VIEW_FEEDBACK, VIEW_TEAM_MANAGEMENT
from src.utils.helpers import pluralize

from .common import render_back_header
from .employee_management import EmployeeManagement
from .feedback_form import FeedbackForm
from .feedback_list import FeedbackList

logger = logging.getLogger(__name__)


class ManagerDashboardView:
    """Renders whichever view the controller currently points at."""

    def __init__(self, dashboard: ManagerDashboard):
        self.dashboard = dashboard

    def render(self):
        dashboard = self.dashboard

        if not dashboard.loaded and not dashboard.error:
            with st.spinner("Loading dashboard..."):
                dashboard.load()

        if dashboard.error and dashboard.current_view == VIEW_DASHBOARD:
            self._display_error()
            return

        if dashboard.current_view == VIEW_TEAM_MANAGEMENT:
            render_back_header("Team Management", dashboard.back_to_dashboard)
            EmployeeManagement(dashboard).render()
            return

        if dashboard.current_view == VIEW_FEEDBACK:
            render_back_header("Submit New Feedback", dashboard.back_to_dashboard)
            FeedbackForm(
                team_members=dashboard.active_team_members,
                on_submit=dashboard.submit_feedback,
                on_cancel=dashboard.back_to_dashboard
            ).render()
            return

        if dashboard.selected_employee is not None:
            render_back_header(
                f"Feedback for {dashboard.selected_employee.username}",
                dashboard.back_to_dashboard
            )
            FeedbackList(
                dashboard.selected_employee_feedback,
                is_manager=True,
                key="manager_employee",
                on_edit=dashboard.edit_feedback
            ).render()
            return

        self._render_main()

    def _display_error(self):
        st.error(self.dashboard.error, icon="⚠️")
        if st.button("Retry", type="primary"):
            self.dashboard.back_to_dashboard()
            with st.spinner("Loading dashboard..."):
                self.dashboard.load()
            st.rerun()

    def _render_main(self):
        dashboard = self.dashboard

        col1, col2, col3 = st.columns([4, 1, 1])
        with col1:
            st.title("Manager Dashboard")
            st.caption("Manage your team and track feedback")
        with col2:
            if st.button("⚙️ Manage Team", use_container_width=True):
                dashboard.show(VIEW_TEAM_MANAGEMENT)
                st.rerun()
        with col3:
            if st.button("➕ New Feedback", type="primary", use_container_width=True):
                dashboard.show(VIEW_FEEDBACK)
                st.rerun()

        self._display_stats()
        st.divider()
        self._display_quick_actions()
        st.divider()
        self._display_team()
        st.divider()

        st.markdown("### Recent Feedback")
        st.caption("Latest feedback you've provided")
        FeedbackList(
            dashboard.recent_feedback,
            is_manager=True,
            key="manager_recent",
            on_edit=dashboard.edit_feedback
        ).render()

    def _display_stats(self):
        stats = self.dashboard.stats
        if stats is None:
            return

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("👥 Team Members", stats.active_team_size or 0)
            st.caption(f"{stats.inactive_team_size} inactive")
        with col2:
            st.metric("💬 Total Feedback", stats.total_feedback)
        with col3:
            st.metric("📈 Positive Feedback", stats.positive_feedback)
        with col4:
            st.metric("✅ Acknowledgment Rate", f"{stats.acknowledgment_rate}%")

    def _display_quick_actions(self):
        st.markdown("### Quick Actions")
        st.caption("Common management tasks")

        col1, col2 = st.columns(2)
        with col1:
            if st.button("👤 Add Team Member", key="quick_add_member", use_container_width=True):
                self.dashboard.show(VIEW_TEAM_MANAGEMENT)
                st.rerun()
        with col2:
            if st.button("➕ Submit Feedback", key="quick_submit_feedback", use_container_width=True):
                self.dashboard.show(VIEW_FEEDBACK)
                st.rerun()

    def _display_team(self):
        st.markdown("### Your Team")
        st.caption("Manage feedback for your team members")

        members = self.dashboard.active_team_members
        if not members:
            st.info("No active team members.")
            return

        for member in members:
            summary = self.dashboard.member_summary(member)

            with st.container(border=True):
                col1, col2, col3 = st.columns([4, 1, 1])
                with col1:
                    line = pluralize(summary["total"], "feedback entry", "feedback entries")
                    if member.email:
                        line += f" • {member.email}"
                    st.markdown(f"**{member.username}**")
                    st.caption(line)
                with col2:
                    if summary["unread"] > 0:
                        st.markdown(f"`{summary['unread']} unread`")
                with col3:
                    if st.button("View Feedback", key=f"view_feedback_{member.id}", use_container_width=True):
                        with st.spinner("Loading feedback..."):
                            self.dashboard.view_employee_feedback(member)
                        st.rerun()
