"""Use case for partial updates, routing status changes through the workflow."""

from typing import Any
from uuid import UUID

from domain.entities import VendorApplication, PROTECTED_FIELDS, APPLICANT_EDITABLE_STATUSES
from domain.enums import ApplicationStatus
from domain.exceptions import NotFoundError
from domain.repositories import IApplicationRepository
from application.workflow import (
    UNSET,
    TransitionFields,
    apply_transition,
    ensure_submittable,
    validate_transition,
)
from infrastructure.config import get_logger


class UpdateApplicationUseCase:
    """
    Update any fields of an application.

    The status graph is not restricted here; any status may be set, but the
    approved date and rejection reason side effects always apply.
    """

    def __init__(
        self,
        application_repository: IApplicationRepository,
        enforce_submission_requirements: bool = True,
    ):
        self.application_repo = application_repository
        self.enforce_submission_requirements = enforce_submission_requirements
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, application_id: UUID, data: dict[str, Any]) -> VendorApplication:
        """
        Apply a partial update.

        Args:
            application_id: Application UUID
            data: Supplied fields only; an ``approved_date`` key, even with a
                None value, overrides the transition's own choice

        Returns:
            The stored application

        Raises:
            ValidationError: If rejecting without a reason, or resubmitting
                with required fields missing
            NotFoundError: If the application does not exist
        """
        data = dict(data)
        for name in PROTECTED_FIELDS | {"vendor_type"}:
            data.pop(name, None)

        target_status = ApplicationStatus.normalize(data.pop("status", None))
        approved_date = data.pop("approved_date", UNSET)

        transition_fields = None
        if target_status is not None:
            transition_fields = TransitionFields(
                admin_notes=data.pop("admin_notes", None),
                rejection_reason=data.pop("rejection_reason", None),
                approved_date=approved_date,
            )
            # Before any read so a refused rejection never reaches the database
            validate_transition(target_status, transition_fields)

        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")

        previous_status = application.status
        application.update_fields(data)

        if target_status is None:
            if approved_date is not UNSET:
                application.approved_date = approved_date
        else:
            if (
                target_status == ApplicationStatus.PENDING_REVIEW
                and previous_status in APPLICANT_EDITABLE_STATUSES
            ):
                ensure_submittable(application, enforce=self.enforce_submission_requirements)
            apply_transition(application, target_status, transition_fields)

        saved = await self.application_repo.update(application_id, application.mutable_fields())
        if saved is None:
            raise NotFoundError("Application not found")

        self.logger.info(
            f"Application updated ({previous_status.value} -> {saved.status.value})",
            extra={"application_id": saved.id, "status": saved.status.value},
        )
        return saved
