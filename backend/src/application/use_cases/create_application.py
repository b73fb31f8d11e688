"""Use case for creating a vendor application as a draft or a submission."""

from typing import Any

from domain.entities import VendorApplication, PROTECTED_FIELDS
from domain.enums import ApplicationStatus, VendorType
from domain.exceptions import InvalidTransitionError
from domain.repositories import IApplicationRepository
from domain.value_objects import ApplicationCode
from application.workflow import ensure_submittable
from infrastructure.config import get_logger

CREATABLE_STATUSES = frozenset({ApplicationStatus.DRAFT, ApplicationStatus.PENDING_REVIEW})


class CreateApplicationUseCase:
    """Create an application with a freshly generated code."""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        enforce_submission_requirements: bool = True,
    ):
        self.application_repo = application_repository
        self.enforce_submission_requirements = enforce_submission_requirements
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, data: dict[str, Any]) -> VendorApplication:
        """
        Create an application from applicant input.

        Args:
            data: Field values; ``status`` selects save-draft (default) or
                submit, ``application_code`` is an optional caller-chosen code

        Returns:
            The stored application

        Raises:
            InvalidTransitionError: If asked to create in a status other than
                draft or pending review
            ValidationError: If submitting with required fields missing
        """
        data = dict(data)
        provided_code = data.pop("application_code", None)
        status = ApplicationStatus.normalize(data.pop("status", None)) or ApplicationStatus.DRAFT
        vendor_type = VendorType(data.pop("vendor_type", None) or VendorType.DOMESTIC)
        for name in PROTECTED_FIELDS | {"approved_date"}:
            data.pop(name, None)

        if status not in CREATABLE_STATUSES:
            raise InvalidTransitionError(
                f"New applications must be draft or pending_review, not {status.value}"
            )

        code = ApplicationCode.generate(
            provided_code=provided_code,
            company_name=data.get("company_name"),
        )
        application = VendorApplication(
            application_code=code.value,
            vendor_type=vendor_type,
            status=status,
        )
        application.update_fields(data)
        application.created_date = application.updated_at

        if status == ApplicationStatus.PENDING_REVIEW:
            ensure_submittable(application, enforce=self.enforce_submission_requirements)

        created = await self.application_repo.create(application)
        self.logger.info(
            f"✅ Application created as {created.status.value}",
            extra={"application_id": created.id, "application_code": created.application_code},
        )
        return created
