"""Use case for the administrative delete escape hatch."""

from uuid import UUID

from domain.exceptions import NotFoundError
from domain.repositories import IApplicationRepository
from infrastructure.config import get_logger


class DeleteApplicationUseCase:
    """Hard-delete an application."""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, application_id: UUID) -> None:
        deleted = await self.application_repo.delete(application_id)
        if not deleted:
            raise NotFoundError("Application not found")
        self.logger.warning("🗑️ Application deleted", extra={"application_id": application_id})
