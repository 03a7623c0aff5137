"""
Client-side form validation.

Every validator runs before a request is built. A non-empty result means
the form must not be submitted. Single-message validators return the first
failing rule; the create-employee validator collects one message per field
so each input can show its own error.
"""
import re
from typing import Dict, Optional

from config.settings import Settings as settings


USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9_]+$')
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def validate_feedback_form(
    employee_id: Optional[int],
    strengths: str,
    areas_to_improve: str,
    sentiment: Optional[str]
) -> Optional[str]:
    """
    Validate the new-feedback form.

    Rules are checked in the order the form presents them and the first
    failure is returned.

    Returns:
        Error message, or None if the form may be submitted
    """
    strengths = (strengths or "").strip()
    areas_to_improve = (areas_to_improve or "").strip()
    min_length = settings.MIN_FEEDBACK_LENGTH

    if not employee_id:
        return "Please select a team member"
    if not strengths:
        return "Please provide strengths feedback"
    if not areas_to_improve:
        return "Please provide areas to improve feedback"
    if sentiment not in settings.SENTIMENTS:
        return "Please select a sentiment"
    if len(strengths) < min_length:
        return f"Strengths feedback must be at least {min_length} characters"
    if len(areas_to_improve) < min_length:
        return f"Areas to improve feedback must be at least {min_length} characters"
    return None


def validate_feedback_edit(
    strengths: str,
    areas_to_improve: str,
    sentiment: Optional[str]
) -> Optional[str]:
    """Validate an inline feedback edit. Returns an error message or None."""
    strengths = (strengths or "").strip()
    areas_to_improve = (areas_to_improve or "").strip()
    min_length = settings.MIN_FEEDBACK_LENGTH

    if not strengths or not areas_to_improve or sentiment not in settings.SENTIMENTS:
        return "All fields are required"
    if len(strengths) < min_length:
        return f"Strengths must be at least {min_length} characters long"
    if len(areas_to_improve) < min_length:
        return f"Areas to improve must be at least {min_length} characters long"
    return None


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def validate_new_employee(
    username: str,
    email: str,
    password: str,
    confirm_password: str,
    manager_id: Optional[int] = None,
    created_by_manager: bool = True
) -> Dict[str, str]:
    """
    Validate the create-employee form.

    Args:
        created_by_manager: When True the new employee joins the creating
            manager's team, so no manager selection is required

    Returns:
        Dict of field name -> error message; empty when the form is valid
    """
    errors: Dict[str, str] = {}

    # Username
    if not (username or "").strip():
        errors["username"] = "Username is required"
    elif len(username) < settings.MIN_USERNAME_LENGTH:
        errors["username"] = f"Username must be at least {settings.MIN_USERNAME_LENGTH} characters"
    elif not USERNAME_PATTERN.match(username):
        errors["username"] = "Username can only contain letters, numbers, and underscores"

    # Email
    if not (email or "").strip():
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"

    # Password
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < settings.MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters"

    # Confirmation
    if not confirm_password:
        errors["confirm_password"] = "Please confirm your password"
    elif password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"

    if not created_by_manager and not manager_id:
        errors["manager_id"] = "Please select a manager"

    return errors


def validate_user_edit(username: str, email: str) -> Optional[str]:
    """Validate the edit-user dialog. Email is optional but must be well formed."""
    if not (username or "").strip():
        return "Username is required"
    if len(username) < settings.MIN_USERNAME_LENGTH:
        return f"Username must be at least {settings.MIN_USERNAME_LENGTH} characters"
    if email and not is_valid_email(email):
        return "Please enter a valid email address"
    return None
