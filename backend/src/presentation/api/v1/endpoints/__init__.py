"""API v1 routers."""

from . import admin, applications, health, uploads

__all__ = ["admin", "applications", "health", "uploads"]
