"""Local filesystem storage for uploaded application documents."""

from pathlib import Path
from typing import Optional
from uuid import uuid4

import aiofiles

from application.interfaces import IFileStorage
from domain.exceptions import UpstreamFailure, ValidationError
from infrastructure.config import get_settings, get_logger

logger = get_logger(__name__)


class LocalFileStorage(IFileStorage):
    """Writes uploads to a local directory that is served as static files."""

    def __init__(
        self,
        base_path: Optional[str] = None,
        url_prefix: Optional[str] = None,
        max_size_bytes: Optional[int] = None,
    ):
        """
        Initialize file storage.

        Args:
            base_path: Directory files are written to (default from settings)
            url_prefix: Public URL prefix the directory is mounted under
            max_size_bytes: Largest accepted upload
        """
        settings = get_settings()
        self.base_path = Path(base_path or settings.upload_dir)
        self.url_prefix = (url_prefix or settings.upload_url_prefix).rstrip("/")
        self.max_size_bytes = max_size_bytes or settings.max_upload_size_bytes

    async def store(self, content: bytes, filename: str) -> str:
        """Save bytes under a UUID name, keeping the original extension."""
        if len(content) > self.max_size_bytes:
            raise ValidationError(
                f"File exceeds the maximum upload size of {self.max_size_bytes} bytes"
            )

        stored_name = self.generate_name(filename)
        file_path = self.base_path / stored_name

        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error(f"Error saving file {stored_name}: {e}", exc_info=True)
            raise UpstreamFailure("Upload failed") from e

        logger.info(f"File saved: {file_path} ({len(content)} bytes)")
        return f"{self.url_prefix}/{stored_name}"

    @staticmethod
    def generate_name(filename: Optional[str]) -> str:
        """
        Collision-free name for an upload.

        ``report.final.pdf`` becomes ``<uuid>.pdf``; names without a dot
        get no extension, nor do extensions with path characters.
        """
        original = filename or "file"
        extension = original.rsplit(".", 1)[-1] if "." in original else ""
        if not extension.isalnum():
            extension = ""
        name = str(uuid4())
        return f"{name}.{extension}" if extension else name
