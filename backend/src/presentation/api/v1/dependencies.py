"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.config import Settings, get_settings
from infrastructure.database import get_session
from infrastructure.database.repositories import SQLAlchemyApplicationRepository
from infrastructure.storage import LocalFileStorage
from application.interfaces import IFileStorage
from application.use_cases import (
    CheckSubmissionUseCase,
    CreateApplicationUseCase,
    DeleteApplicationUseCase,
    GetApplicationUseCase,
    GetDashboardStatsUseCase,
    ListApplicationsUseCase,
    ReviewApplicationUseCase,
    SubmitApplicationUseCase,
    UpdateApplicationUseCase,
    UploadDocumentUseCase,
)
from domain.repositories import IApplicationRepository


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Gateway dependencies
def get_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IApplicationRepository:
    """Get application repository dependency."""
    return SQLAlchemyApplicationRepository(session)


def get_file_storage(settings: Settings = Depends(get_settings)) -> IFileStorage:
    """Get document storage dependency."""
    return LocalFileStorage(
        base_path=settings.upload_dir,
        url_prefix=settings.upload_url_prefix,
        max_size_bytes=settings.max_upload_size_bytes,
    )


# Use case dependencies
def get_create_application_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
    settings: Settings = Depends(get_settings),
) -> CreateApplicationUseCase:
    return CreateApplicationUseCase(repository, settings.enforce_submission_requirements)


def get_update_application_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
    settings: Settings = Depends(get_settings),
) -> UpdateApplicationUseCase:
    return UpdateApplicationUseCase(repository, settings.enforce_submission_requirements)


def get_submit_application_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
    settings: Settings = Depends(get_settings),
) -> SubmitApplicationUseCase:
    return SubmitApplicationUseCase(repository, settings.enforce_submission_requirements)


def get_check_submission_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
) -> CheckSubmissionUseCase:
    return CheckSubmissionUseCase(repository)


def get_application_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
) -> GetApplicationUseCase:
    return GetApplicationUseCase(repository)


def get_list_applications_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
) -> ListApplicationsUseCase:
    return ListApplicationsUseCase(repository)


def get_dashboard_stats_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
) -> GetDashboardStatsUseCase:
    return GetDashboardStatsUseCase(repository)


def get_review_application_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
) -> ReviewApplicationUseCase:
    return ReviewApplicationUseCase(repository)


def get_delete_application_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
) -> DeleteApplicationUseCase:
    return DeleteApplicationUseCase(repository)


def get_upload_document_use_case(
    file_storage: IFileStorage = Depends(get_file_storage),
) -> UploadDocumentUseCase:
    return UploadDocumentUseCase(file_storage)
