"""
Persistent client state for the logged-in user.

Only two things are ever persisted: the bearer token and the user record.
Both live under fixed keys in a mutable mapping (Streamlit's session state
at runtime, a plain dict in tests) and are always cleared together.
"""
import json
import logging
from typing import MutableMapping, Optional, Any

from pydantic import ValidationError

from config.settings import Settings as settings
from src.api.models import User

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Reads and writes the token and user under fixed keys.

    The user is stored as a JSON string, the same shape the backend returns,
    so the store holds no live objects.
    """

    def __init__(
        self,
        storage: MutableMapping[str, Any],
        token_key: Optional[str] = None,
        user_key: Optional[str] = None
    ):
        self.storage = storage
        self.token_key = token_key or settings.TOKEN_KEY
        self.user_key = user_key or settings.USER_KEY

    def get_token(self) -> Optional[str]:
        token = self.storage.get(self.token_key)
        return token or None

    def set_token(self, token: str) -> None:
        self.storage[self.token_key] = token

    def get_user(self) -> Optional[User]:
        raw = self.storage.get(self.user_key)
        if not raw:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Discarding unreadable stored user: {e}")
            return None

    def set_user(self, user: User) -> None:
        self.storage[self.user_key] = user.model_dump_json()

    def is_authenticated(self) -> bool:
        """A session counts only when both the token and the user are present."""
        return self.get_token() is not None and self.get_user() is not None

    def clear(self) -> None:
        for key in (self.token_key, self.user_key):
            self.storage.pop(key, None)
