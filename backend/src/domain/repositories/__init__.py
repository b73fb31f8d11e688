"""Domain Repository Interfaces - Abstract definitions."""

from .application_repository import IApplicationRepository

__all__ = ["IApplicationRepository"]
