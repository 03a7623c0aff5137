"""
Unit tests for the session store.

These tests verify that the token and user are persisted under fixed keys
and always cleared together.
"""
import json

from src.storage.session_store import SessionStore

from conftest import make_user


def test_token_round_trip(store, storage):
    store.set_token("abc123")

    assert store.get_token() == "abc123"
    assert storage["authToken"] == "abc123"


def test_user_is_stored_as_json(store, storage):
    user = make_user(user_id=5, username="bob_employee")

    store.set_user(user)

    assert isinstance(storage["user"], str)
    assert store.get_user() == user


def test_empty_store():
    store = SessionStore({})

    assert store.get_token() is None
    assert store.get_user() is None
    assert store.is_authenticated() is False


def test_authenticated_requires_token_and_user(store):
    """A token alone is not a session."""
    store.set_token("abc123")
    assert store.is_authenticated() is False

    store.set_user(make_user())
    assert store.is_authenticated() is True


def test_unreadable_user_is_ignored(storage):
    storage["authToken"] = "abc123"
    storage["user"] = "{not json"
    store = SessionStore(storage)

    assert store.get_user() is None
    assert store.is_authenticated() is False


def test_clear_removes_both_keys(store, storage):
    storage["unrelated"] = "keep me"
    store.set_token("abc123")
    store.set_user(make_user())

    store.clear()

    assert "authToken" not in storage
    assert "user" not in storage
    assert storage["unrelated"] == "keep me"


def test_clear_on_empty_store_is_safe(store):
    store.clear()

    assert store.get_token() is None


def test_custom_keys(storage):
    store = SessionStore(storage, token_key="tok", user_key="usr")

    store.set_token("abc123")

    assert storage == {"tok": "abc123"}


class KeyVanishingDict(dict):
    """Reports every key as present, as if another thread removed it after the check."""

    def __contains__(self, key):
        return True


def test_clear_tolerates_keys_removed_concurrently():
    storage = KeyVanishingDict(authToken="abc123")
    store = SessionStore(storage)

    store.clear()

    assert dict(storage) == {}


def test_user_with_unknown_role_is_treated_as_absent(storage):
    storage["authToken"] = "abc123"
    storage["user"] = json.dumps({"id": 9, "username": "root", "role": "admin"})
    store = SessionStore(storage)

    assert store.get_user() is None
    assert store.is_authenticated() is False
