"""
Feedback list with inline editing for managers and acknowledgment for employees.
"""
import streamlit as st
import logging
from typing import Callable, List, Optional

from src.api.models import FeedbackWithDetails, UpdateFeedbackData
from src.dashboard.base import ActionError
from src.utils.helpers import format_datetime, sentiment_badge, was_updated
from src.utils.validation import validate_feedback_edit

from .selectors import sentiment_selector

logger = logging.getLogger(__name__)


class FeedbackList:
    """
    Renders feedback cards.

    Managers see "Feedback for <employee>" and can edit one item at a time.
    Employees see "Feedback from <manager>" and can acknowledge items they
    have not yet acknowledged. `key` keeps the widget state of several lists
    on one page apart.
    """

    def __init__(
        self,
        feedback: List[FeedbackWithDetails],
        is_manager: bool,
        key: str,
        on_edit: Optional[Callable[[int, UpdateFeedbackData], None]] = None,
        on_acknowledge: Optional[Callable[[int], bool]] = None
    ):
        self.feedback = feedback
        self.is_manager = is_manager
        self.key = key
        self.on_edit = on_edit
        self.on_acknowledge = on_acknowledge

    @property
    def _editing_key(self) -> str:
        return f"{self.key}_editing_id"

    def render(self):
        if not self.feedback:
            st.info("No feedback available yet.")
            return

        editing_id = st.session_state.get(self._editing_key)

        for item in self.feedback:
            with st.container(border=True):
                self._render_header(item)

                if editing_id == item.id:
                    self._render_edit_form(item)
                else:
                    self._render_body(item, editing_id)

    def _render_header(self, item: FeedbackWithDetails):
        col1, col2 = st.columns([3, 2])

        with col1:
            title = (
                f"Feedback for {item.employee_name}" if self.is_manager
                else f"Feedback from {item.manager_name}"
            )
            if not self.is_manager and not item.is_acknowledged:
                title = f"🟠 {title}"
            st.markdown(f"**{title}**")

            dates = f"📅 {format_datetime(item.created_at)}"
            if was_updated(item.created_at, item.updated_at):
                dates += f" (Updated: {format_datetime(item.updated_at)})"
            st.caption(dates)

        with col2:
            badges = sentiment_badge(item.sentiment)
            if item.is_acknowledged:
                badges += "  ·  ✅ Acknowledged"
            st.markdown(badges)

    def _render_body(self, item: FeedbackWithDetails, editing_id: Optional[int]):
        st.markdown("**Strengths**")
        st.success(item.strengths)

        st.markdown("**Areas to Improve**")
        st.info(item.areas_to_improve)

        col1, col2 = st.columns([3, 1])
        with col1:
            st.caption(f"Feedback ID: #{item.id}")

        with col2:
            if self.is_manager and self.on_edit is not None:
                if st.button(
                    "✏️ Edit",
                    key=f"{self.key}_edit_{item.id}",
                    disabled=editing_id is not None,
                    use_container_width=True
                ):
                    st.session_state[self._editing_key] = item.id
                    st.rerun()

            if not self.is_manager and not item.is_acknowledged and self.on_acknowledge is not None:
                if st.button(
                    "✅ Acknowledge",
                    key=f"{self.key}_ack_{item.id}",
                    type="primary",
                    use_container_width=True
                ):
                    self.on_acknowledge(item.id)
                    st.rerun()

    def _render_edit_form(self, item: FeedbackWithDetails):
        with st.form(f"{self.key}_edit_form_{item.id}"):
            strengths = st.text_area(
                "Strengths",
                value=item.strengths,
                placeholder="What are this person's key strengths?",
                height=110
            )
            areas_to_improve = st.text_area(
                "Areas to Improve",
                value=item.areas_to_improve,
                placeholder="What areas could they focus on for improvement?",
                height=110
            )
            sentiment = sentiment_selector(key=f"{self.key}_edit_sentiment_{item.id}", value=item.sentiment)

            col1, col2 = st.columns(2)
            with col1:
                saved = st.form_submit_button("💾 Save Changes", type="primary", use_container_width=True)
            with col2:
                cancelled = st.form_submit_button("✖️ Cancel", use_container_width=True)

        if cancelled:
            self._stop_editing()
            st.rerun()

        if saved:
            self._handle_save(item, strengths, areas_to_improve, sentiment)

    def _handle_save(self, item, strengths, areas_to_improve, sentiment):
        error = validate_feedback_edit(strengths, areas_to_improve, sentiment)
        if error:
            st.error(error, icon="⚠️")
            return

        updates = UpdateFeedbackData(
            strengths=strengths.strip(),
            areas_to_improve=areas_to_improve.strip(),
            sentiment=sentiment
        )

        try:
            with st.spinner("Saving..."):
                self.on_edit(item.id, updates)
        except ActionError as e:
            st.error(e.message, icon="⚠️")
            return

        self._stop_editing()
        st.rerun()

    def _stop_editing(self):
        st.session_state.pop(self._editing_key, None)
