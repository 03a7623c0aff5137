# ============= src/utils/__init__.py =============
'''Utilities package for formatting and form validation.'''

from .helpers import (
    parse_timestamp,
    format_datetime,
    was_updated,
    sentiment_label,
    sentiment_badge,
    pluralize
)
from .validation import (
    validate_feedback_form,
    validate_feedback_edit,
    validate_new_employee,
    validate_user_edit,
    is_valid_email
)

__all__ = [
    'parse_timestamp',
    'format_datetime',
    'was_updated',
    'sentiment_label',
    'sentiment_badge',
    'pluralize',
    'validate_feedback_form',
    'validate_feedback_edit',
    'validate_new_employee',
    'validate_user_edit',
    'is_valid_email'
]
