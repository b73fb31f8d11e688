"""File storage interface for uploaded application documents."""

from abc import ABC, abstractmethod


class IFileStorage(ABC):
    """
    Abstract interface for document storage.

    The workflow only needs a retrievable URL back; where and how the bytes
    are kept is up to the implementation.
    """

    @abstractmethod
    async def store(self, content: bytes, filename: str) -> str:
        """
        Persist a file under a generated unique name.

        Args:
            content: Raw file bytes
            filename: Original file name, its extension is preserved

        Returns:
            URL the stored file can be retrieved from
        """
        pass
