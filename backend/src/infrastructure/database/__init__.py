"""Database infrastructure module."""

from .session import Base, engine, get_session, init_db, close_db
from .models import ApplicationModel

__all__ = [
    "Base",
    "engine",
    "get_session",
    "init_db",
    "close_db",
    "ApplicationModel",
]
