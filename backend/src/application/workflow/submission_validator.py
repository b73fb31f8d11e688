"""Submission gate: checks an application against its vendor type's field-set."""

from dataclasses import dataclass, field

from domain.entities import VendorApplication
from domain.enums import VendorType
from domain.exceptions import ValidationError
from domain.value_objects import field_set_for, is_blank
from infrastructure.config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubmissionCheck:
    """
    Result of checking an application for submission.

    Attributes:
        vendor_type: Vendor type the check was made against
        missing_fields: Required fields that are absent or blank
        extraneous_fields: Filled fields that belong to the other vendor type
    """

    vendor_type: VendorType
    missing_fields: list[str] = field(default_factory=list)
    extraneous_fields: list[str] = field(default_factory=list)

    @property
    def is_eligible(self) -> bool:
        return not self.missing_fields


def missing_submission_fields(application: VendorApplication) -> list[str]:
    """Required fields the application still lacks, in form order."""
    return application.field_set.missing(application.to_dict())


def is_eligible_for_submission(application: VendorApplication) -> bool:
    return not missing_submission_fields(application)


def check_submission(application: VendorApplication) -> SubmissionCheck:
    """Full report used by the submission check endpoint."""
    values = application.to_dict()
    own = application.field_set
    other_type = (
        VendorType.INTERNATIONAL
        if application.vendor_type == VendorType.DOMESTIC
        else VendorType.DOMESTIC
    )
    extraneous = [
        name for name in field_set_for(other_type).exclusive
        if name not in own.relevant and not is_blank(values.get(name))
    ]
    return SubmissionCheck(
        vendor_type=application.vendor_type,
        missing_fields=own.missing(values),
        extraneous_fields=extraneous,
    )


def ensure_submittable(application: VendorApplication, enforce: bool = True) -> list[str]:
    """
    Gate a move to pending review.

    Args:
        application: Application about to be submitted
        enforce: Block the submission when fields are missing, otherwise
            only log them

    Returns:
        Missing field identifiers (empty when eligible)

    Raises:
        ValidationError: If fields are missing and ``enforce`` is set
    """
    missing = missing_submission_fields(application)
    if not missing:
        return missing

    if enforce:
        raise ValidationError(
            f"Application is missing required fields: {', '.join(missing)}",
            missing_fields=missing,
        )

    logger.warning(
        f"Submitting {application.application_code or application.id} with missing fields: {missing}"
    )
    return missing
