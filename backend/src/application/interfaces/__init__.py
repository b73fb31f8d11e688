"""Application interfaces - Port definitions for external services."""

from .file_storage import IFileStorage

__all__ = ["IFileStorage"]
