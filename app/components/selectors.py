"""
Input widgets for sentiment and team member selection.
"""
from typing import List, Optional

import streamlit as st

from config.settings import settings
from src.api.models import User
from src.utils.helpers import sentiment_badge


def sentiment_selector(key: str, value: Optional[str] = None, disabled: bool = False) -> Optional[str]:
    """
    Three-way sentiment choice. Starts unselected unless `value` is given,
    so a missing choice can be caught by validation.
    """
    options = list(settings.SENTIMENTS)
    index = options.index(value) if value in options else None

    return st.radio(
        "Overall Sentiment",
        options=options,
        index=index,
        format_func=sentiment_badge,
        horizontal=True,
        key=key,
        disabled=disabled
    )


def team_member_selector(team_members: List[User], key: str, disabled: bool = False) -> Optional[int]:
    """Pick one team member; returns the member's id or None."""
    if not team_members:
        st.info("👥 No team members found")
        return None

    names = {member.id: f"{member.username} ({member.role})" for member in team_members}

    return st.selectbox(
        "Team Member",
        options=list(names),
        index=None,
        format_func=lambda member_id: names[member_id],
        placeholder="Select a team member",
        key=key,
        disabled=disabled
    )
