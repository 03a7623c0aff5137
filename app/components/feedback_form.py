"""
New-feedback form shown to managers.
"""
import streamlit as st
import logging
from typing import Callable, List

from config.settings import settings
from src.api.models import CreateFeedbackData, User
from src.dashboard.base import ActionError
from src.utils.validation import validate_feedback_form

from .selectors import sentiment_selector, team_member_selector

logger = logging.getLogger(__name__)


class FeedbackForm:
    """
    Collects structured feedback for one team member.

    Validation runs before anything is sent; `on_submit` is only called with
    a complete, trimmed payload.
    """

    def __init__(
        self,
        team_members: List[User],
        on_submit: Callable[[CreateFeedbackData], None],
        on_cancel: Callable[[], None]
    ):
        self.team_members = team_members
        self.on_submit = on_submit
        self.on_cancel = on_cancel

    def render(self):
        st.markdown("### Submit Feedback")
        st.caption("Provide structured feedback for your team member")

        with st.form("new_feedback_form"):
            employee_id = team_member_selector(self.team_members, key="feedback_employee")

            strengths = st.text_area(
                "Strengths",
                placeholder="What are this person's key strengths? What did they do well?",
                height=120,
                key="feedback_strengths"
            )
            st.caption(f"Minimum {settings.MIN_FEEDBACK_LENGTH} characters")

            areas_to_improve = st.text_area(
                "Areas to Improve",
                placeholder="What areas could they focus on for improvement? Be constructive and specific.",
                height=120,
                key="feedback_areas"
            )
            st.caption(f"Minimum {settings.MIN_FEEDBACK_LENGTH} characters")

            sentiment = sentiment_selector(key="feedback_sentiment")

            col1, col2 = st.columns(2)
            with col1:
                submitted = st.form_submit_button("Submit Feedback", type="primary", use_container_width=True)
            with col2:
                cancelled = st.form_submit_button("Cancel", use_container_width=True)

        if cancelled:
            self.on_cancel()
            st.rerun()

        if submitted:
            self._handle_submit(employee_id, strengths, areas_to_improve, sentiment)

    def _handle_submit(self, employee_id, strengths, areas_to_improve, sentiment):
        error = validate_feedback_form(employee_id, strengths, areas_to_improve, sentiment)
        if error:
            st.error(error, icon="⚠️")
            return

        data = CreateFeedbackData(
            employee_id=int(employee_id),
            strengths=strengths.strip(),
            areas_to_improve=areas_to_improve.strip(),
            sentiment=sentiment
        )

        try:
            with st.spinner("Submitting..."):
                self.on_submit(data)
        except ActionError as e:
            st.error(e.message, icon="⚠️")
            return

        st.toast("Feedback submitted")
        st.rerun()
