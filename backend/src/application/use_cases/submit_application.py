"""Use cases for applicant submission and the pre-submission check."""

from typing import Any, Optional
from uuid import UUID

from domain.entities import VendorApplication, PROTECTED_FIELDS
from domain.enums import ApplicationStatus
from domain.exceptions import NotFoundError
from domain.repositories import IApplicationRepository
from application.workflow import (
    SubmissionCheck,
    apply_transition,
    check_submission,
    ensure_applicant_can_submit,
    ensure_submittable,
)
from infrastructure.config import get_logger


class SubmitApplicationUseCase:
    """Submit a draft, or resubmit a rejected application after edits."""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        enforce_submission_requirements: bool = True,
    ):
        self.application_repo = application_repository
        self.enforce_submission_requirements = enforce_submission_requirements
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        application_id: UUID,
        changes: Optional[dict[str, Any]] = None,
    ) -> VendorApplication:
        """
        Move an application to pending review.

        Args:
            application_id: Application UUID
            changes: Last edits to save together with the submission

        Returns:
            The stored application

        Raises:
            NotFoundError: If the application does not exist
            InvalidTransitionError: If the application is not draft or rejected
            ValidationError: If required fields are missing and enforcement is on
        """
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")

        ensure_applicant_can_submit(application)

        if changes:
            edits = {
                name: value for name, value in changes.items()
                if name not in PROTECTED_FIELDS | {"vendor_type", "status", "approved_date"}
            }
            application.update_fields(edits)

        missing = ensure_submittable(application, enforce=self.enforce_submission_requirements)
        apply_transition(application, ApplicationStatus.PENDING_REVIEW)

        saved = await self.application_repo.update(application_id, application.mutable_fields())
        if saved is None:
            raise NotFoundError("Application not found")

        self.logger.info(
            f"📨 Application submitted for review ({len(missing)} fields missing)",
            extra={"application_id": saved.id, "application_code": saved.application_code},
        )
        return saved


class CheckSubmissionUseCase:
    """Report what an application still lacks before it can be submitted."""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository

    async def execute(self, application_id: UUID) -> SubmissionCheck:
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")
        return check_submission(application)
