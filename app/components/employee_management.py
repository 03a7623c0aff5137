"""
Team management: overview, create-employee form, edit dialog and status toggle.
"""
import streamlit as st
import logging
from typing import Dict

from src.api.errors import SessionExpiredError
from src.api.models import UpdateUserData, User
from src.dashboard.base import ActionError
from src.dashboard.manager import ManagerDashboard
from src.utils.helpers import format_datetime
from src.utils.validation import validate_new_employee, validate_user_edit

from .common import expire_session

logger = logging.getLogger(__name__)

SHOW_CREATE_FORM = "team_show_create_form"
CREATE_ERRORS = "team_create_errors"
CREATE_SUCCESS = "team_create_success"


class EmployeeManagement:
    """
    Manager-facing team administration.

    All mutations go through the ManagerDashboard controller so the team
    list and stats stay in step with the backend.
    """

    def __init__(self, dashboard: ManagerDashboard):
        self.dashboard = dashboard

    def render(self):
        if st.session_state.get(CREATE_SUCCESS):
            self._render_create_success()
            return

        if st.session_state.get(SHOW_CREATE_FORM):
            self._render_create_form()
            return

        col1, col2 = st.columns([4, 1])
        with col1:
            st.title("Team Management")
            st.caption("Manage your team members and their accounts")
        with col2:
            if st.button("➕ Add Team Member", type="primary", use_container_width=True):
                self._open_create_form()

        self._render_overview()
        st.divider()
        self._render_members()

    def _render_overview(self):
        team = self.dashboard.team_members
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Team Members", len(team))
        with col2:
            st.metric("Active Members", len(self.dashboard.active_team_members))
        with col3:
            st.metric("Inactive Members", len(self.dashboard.inactive_team_members))

    def _render_members(self):
        st.subheader("Team Members")

        if not self.dashboard.team_members:
            st.info(
                "**No team members yet**\n\n"
                "Start building your team by adding your first team member."
            )
            if st.button("➕ Add First Team Member"):
                self._open_create_form()
            return

        for member in self.dashboard.team_members:
            with st.container(border=True):
                col1, col2, col3 = st.columns([4, 1, 1])

                with col1:
                    status = "🟢 Active" if member.is_active else "⚪ Inactive"
                    st.markdown(f"**{member.username}**  ·  {status}")
                    details = []
                    if member.email:
                        details.append(f"✉️ {member.email}")
                    details.append(f"📅 Joined {format_datetime(member.created_at, 'date')}")
                    st.caption("   ".join(details))

                with col2:
                    if st.button("✏️ Edit", key=f"edit_member_{member.id}", use_container_width=True):
                        edit_user_dialog(self.dashboard, member)

                with col3:
                    label = "Deactivate" if member.is_active else "Activate"
                    if st.button(label, key=f"toggle_member_{member.id}", use_container_width=True):
                        self._toggle_status(member)

    def _toggle_status(self, member: User):
        try:
            with st.spinner("Updating status..."):
                updated = self.dashboard.toggle_employee_status(member.id)
        except ActionError as e:
            st.error(e.message, icon="⚠️")
            return

        st.toast(f"{updated.username} is now {'active' if updated.is_active else 'inactive'}")
        st.rerun()

    # ----------------------------
    # Create employee
    # ----------------------------
    def _open_create_form(self):
        st.session_state[SHOW_CREATE_FORM] = True
        st.session_state[CREATE_ERRORS] = {}
        st.rerun()

    def _close_create_form(self):
        for key in (SHOW_CREATE_FORM, CREATE_ERRORS, CREATE_SUCCESS):
            st.session_state.pop(key, None)

    def _render_create_form(self):
        errors: Dict[str, str] = st.session_state.get(CREATE_ERRORS, {})

        st.markdown("### 👤 Create Employee Account")
        st.caption("Add a new team member to your team")

        if errors.get("submit"):
            st.error(errors["submit"], icon="⚠️")

        with st.form("create_employee_form"):
            username = st.text_input("Username", placeholder="Enter username", key="new_employee_username")
            self._field_error(errors, "username")

            email = st.text_input("Email", placeholder="Enter email address", key="new_employee_email")
            self._field_error(errors, "email")

            password = st.text_input(
                "Password", type="password", placeholder="Enter password", key="new_employee_password"
            )
            self._field_error(errors, "password")

            confirm_password = st.text_input(
                "Confirm Password", type="password", placeholder="Confirm password", key="new_employee_confirm"
            )
            self._field_error(errors, "confirm_password")

            col1, col2 = st.columns(2)
            with col1:
                submitted = st.form_submit_button("Create Account", type="primary", use_container_width=True)
            with col2:
                cancelled = st.form_submit_button("Cancel", use_container_width=True)

        if cancelled:
            self._close_create_form()
            st.rerun()

        if submitted:
            self._handle_create(username, email, password, confirm_password)

    @staticmethod
    def _field_error(errors: Dict[str, str], field: str):
        if errors.get(field):
            st.caption(f":red[{errors[field]}]")

    def _handle_create(self, username, email, password, confirm_password):
        errors = validate_new_employee(
            username,
            email,
            password,
            confirm_password,
            manager_id=self.dashboard.user.id,
            created_by_manager=True
        )

        if not errors:
            try:
                with st.spinner("Creating account..."):
                    self.dashboard.create_employee(username.strip(), email.strip(), password)
            except ActionError as e:
                errors = {"submit": e.message}

        if errors:
            st.session_state[CREATE_ERRORS] = errors
            st.rerun()

        st.session_state[CREATE_SUCCESS] = True
        st.session_state[CREATE_ERRORS] = {}
        st.rerun()

    def _render_create_success(self):
        st.success(
            "**Account Created Successfully!**\n\n"
            "The employee account has been created and they can now log in with their credentials.",
            icon="✅"
        )
        if st.button("Continue", type="primary"):
            self._close_create_form()
            st.rerun()


@st.dialog("Edit User Details")
def edit_user_dialog(dashboard: ManagerDashboard, member: User):
    """Edit a member's username and email; only changed fields are sent."""
    st.caption("Update the user information below. Click save when you're done.")

    with st.form(f"edit_user_form_{member.id}"):
        username = st.text_input("Username", value=member.username)
        email = st.text_input("Email", value=member.email or "", placeholder="Optional")

        col1, col2 = st.columns(2)
        with col1:
            saved = st.form_submit_button("Save Changes", type="primary", use_container_width=True)
        with col2:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        st.rerun()

    if not saved:
        return

    error = validate_user_edit(username, email)
    if error:
        st.error(error, icon="⚠️")
        return

    updates = {}
    if username != member.username:
        updates["username"] = username.strip()
    if email != (member.email or ""):
        updates["email"] = email.strip() or None

    if updates:
        try:
            dashboard.update_employee(member.id, UpdateUserData(**updates))
        except SessionExpiredError:
            expire_session()
        except ActionError as e:
            st.error(e.message, icon="⚠️")
            return

    st.rerun()
