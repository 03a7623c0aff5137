# ============= src/storage/__init__.py =============
'''Storage package for the persisted login session.'''

from .session_store import SessionStore

__all__ = ['SessionStore']
