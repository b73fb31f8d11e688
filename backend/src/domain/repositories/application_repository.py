"""Application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from domain.entities import VendorApplication


class IApplicationRepository(ABC):
    """
    Abstract repository interface for VendorApplication entity.

    This interface defines the contract for application persistence.
    Concrete implementations will be in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, application: VendorApplication) -> VendorApplication:
        """
        Create a new application.

        Args:
            application: VendorApplication entity with its code already assigned

        Returns:
            Created VendorApplication
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[VendorApplication]:
        """
        Retrieve an application by ID.

        Args:
            application_id: Application UUID

        Returns:
            VendorApplication if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_code_and_email(
        self,
        application_code: str,
        email: str,
    ) -> Optional[VendorApplication]:
        """
        Retrieve an application by its code and primary contact email.

        Args:
            application_code: Human-readable application code
            email: Primary contact email, matched case-insensitively

        Returns:
            VendorApplication if both match, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[VendorApplication]:
        """
        Retrieve all applications, newest first.

        Returns:
            Applications ordered by created_date descending
        """
        pass

    @abstractmethod
    async def update(
        self,
        application_id: UUID,
        fields: dict[str, Any],
    ) -> Optional[VendorApplication]:
        """
        Overwrite the given fields of an application.

        Args:
            application_id: Application UUID
            fields: Field values to store

        Returns:
            Updated VendorApplication, None if not found
        """
        pass

    @abstractmethod
    async def delete(self, application_id: UUID) -> bool:
        """
        Delete an application.

        Args:
            application_id: Application UUID

        Returns:
            True if deleted, False if not found
        """
        pass
