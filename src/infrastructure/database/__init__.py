"""Database infrastructure module."""

from .session import Base, get_engine, get_session_factory, session_scope, init_db, close_db

__all__ = [
    "Base",
    "get_engine",
    "session_scope",
    "get_session_factory",
    "init_db",
    "close_db",
]
