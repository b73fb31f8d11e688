"""Use case for fetching a single application."""

from typing import Optional
from uuid import UUID

from domain.entities import VendorApplication
from domain.exceptions import NotFoundError, ValidationError
from domain.repositories import IApplicationRepository
from infrastructure.config import get_logger


class GetApplicationUseCase:
    """Fetch an application by id, or by code and email for applicants."""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
        self.logger = get_logger(self.__class__.__name__)

    async def by_id(self, application_id: UUID) -> VendorApplication:
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")
        return application

    async def by_code_and_email(
        self,
        application_code: Optional[str],
        email: Optional[str],
    ) -> VendorApplication:
        """
        Applicant self-service lookup.

        Both values are required together; the email is matched
        case-insensitively. A wrong email reports the same not-found as a
        wrong code.

        Raises:
            ValidationError: If only one of code and email is given
            NotFoundError: If no application matches both
        """
        code = (application_code or "").strip()
        email = (email or "").strip()
        if code and not email:
            raise ValidationError("Email is required when querying by application code")
        if email and not code:
            raise ValidationError("Application code is required when querying by email")
        if not code:
            raise ValidationError("Application code and email are required")

        application = await self.application_repo.get_by_code_and_email(code, email)
        if application is None:
            self.logger.info("Lookup by code and email found nothing", extra={"application_code": code})
            raise NotFoundError("Application not found")
        return application
