"""Use case for administrator review actions."""

from typing import Optional
from uuid import UUID

from domain.entities import VendorApplication
from domain.enums import ReviewAction
from domain.exceptions import NotFoundError, ValidationError
from domain.repositories import IApplicationRepository
from application.workflow import (
    REVIEW_ACTION_TARGETS,
    TransitionFields,
    apply_transition,
    ensure_review_action_allowed,
    validate_transition,
)
from infrastructure.config import get_logger


class ReviewApplicationUseCase:
    """Mark under review, approve, reject or hold a submitted application."""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        application_id: UUID,
        action: ReviewAction,
        admin_notes: Optional[str] = None,
        rejection_reason: Optional[str] = None,
    ) -> VendorApplication:
        """
        Apply an administrator action.

        Args:
            application_id: Application UUID
            action: Review action to take
            admin_notes: Notes to store with the decision, None keeps existing
            rejection_reason: Required when rejecting

        Returns:
            The stored application

        Raises:
            ValidationError: If rejecting without a reason
            NotFoundError: If the application does not exist
            InvalidTransitionError: If the action is not offered in the
                application's current status
        """
        fields = TransitionFields(admin_notes=admin_notes, rejection_reason=rejection_reason)
        try:
            validate_transition(REVIEW_ACTION_TARGETS[action], fields)
        except ValidationError:
            self.logger.warning(
                "Review action refused before reaching the database",
                extra={"application_id": application_id, "action": action.value},
            )
            raise

        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")

        target_status = ensure_review_action_allowed(application, action)
        apply_transition(application, target_status, fields)

        saved = await self.application_repo.update(application_id, application.mutable_fields())
        if saved is None:
            raise NotFoundError("Application not found")

        self.logger.info(
            f"Review action applied, application is now {saved.status.value}",
            extra={"application_id": saved.id, "action": action.value, "status": saved.status.value},
        )
        return saved
