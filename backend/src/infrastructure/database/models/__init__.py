"""SQLAlchemy ORM models."""

from .application_model import ApplicationModel

__all__ = ["ApplicationModel"]
