"""Repository implementations."""

from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository

__all__ = ["SQLAlchemyApplicationRepository"]
