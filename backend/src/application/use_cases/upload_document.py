"""Use case for storing an uploaded application document."""

from typing import Optional

from application.interfaces import IFileStorage
from domain.exceptions import ValidationError
from infrastructure.config import get_logger


class UploadDocumentUseCase:
    """Store a document and hand back the URL to attach to a document field."""

    def __init__(self, file_storage: IFileStorage):
        self.file_storage = file_storage
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, content: Optional[bytes], filename: Optional[str]) -> str:
        """
        Args:
            content: File bytes, None when no file was sent
            filename: Original file name

        Returns:
            URL of the stored file

        Raises:
            ValidationError: If no file was provided
            UpstreamFailure: If the storage write fails
        """
        if content is None:
            raise ValidationError("No file provided")

        url = await self.file_storage.store(content, filename or "file")
        self.logger.info(f"Document stored at {url}")
        return url
