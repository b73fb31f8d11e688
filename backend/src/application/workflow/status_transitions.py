"""Status state machine for vendor applications.

Every status change goes through :func:`apply_transition` so that the
approved date and rejection reason always agree with the status.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from domain.entities import VendorApplication, APPLICANT_EDITABLE_STATUSES
from domain.enums import ApplicationStatus, ReviewAction
from domain.exceptions import InvalidTransitionError, ValidationError
from domain.value_objects import is_blank


class _Unset:
    """Marker for "caller did not supply a value"."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()

REVIEWABLE_STATUSES = frozenset({
    ApplicationStatus.PENDING_REVIEW,
    ApplicationStatus.UNDER_REVIEW,
    ApplicationStatus.ON_HOLD,
})

REVIEW_ACTION_TARGETS: dict[ReviewAction, ApplicationStatus] = {
    ReviewAction.MARK_UNDER_REVIEW: ApplicationStatus.UNDER_REVIEW,
    ReviewAction.APPROVE: ApplicationStatus.APPROVED,
    ReviewAction.REJECT: ApplicationStatus.REJECTED,
    ReviewAction.HOLD: ApplicationStatus.ON_HOLD,
}

REVIEW_ACTION_SOURCES: dict[ReviewAction, frozenset[ApplicationStatus]] = {
    ReviewAction.MARK_UNDER_REVIEW: frozenset({ApplicationStatus.PENDING_REVIEW}),
    ReviewAction.APPROVE: REVIEWABLE_STATUSES,
    ReviewAction.REJECT: REVIEWABLE_STATUSES,
    ReviewAction.HOLD: frozenset({ApplicationStatus.PENDING_REVIEW, ApplicationStatus.UNDER_REVIEW}),
}


@dataclass(frozen=True)
class TransitionFields:
    """
    Values that may accompany a status change.

    Attributes:
        admin_notes: New administrator notes, None keeps the current notes
        rejection_reason: Reason shown to the applicant, required for rejection
        approved_date: Explicit approved date override; UNSET lets the
            transition decide, None clears it
    """

    admin_notes: Optional[str] = None
    rejection_reason: Optional[str] = None
    approved_date: Union[datetime, None, _Unset] = UNSET


def validate_transition(target_status: ApplicationStatus, fields: TransitionFields) -> None:
    """
    Check a transition's preconditions without touching the application.

    Raises:
        ValidationError: If rejecting without a reason
    """
    if target_status == ApplicationStatus.REJECTED and is_blank(fields.rejection_reason):
        raise ValidationError("rejection reason required")


def apply_transition(
    application: VendorApplication,
    target_status: ApplicationStatus,
    fields: Optional[TransitionFields] = None,
    now: Optional[datetime] = None,
) -> VendorApplication:
    """
    Move an application to ``target_status`` and apply the side effects.

    Entering approved stamps the approved date and clears the rejection
    reason; every other target clears the approved date. An explicit
    approved date in ``fields`` always wins.

    Args:
        application: Application to change in place
        target_status: Status to move to
        fields: Values accompanying the transition
        now: Transition time, defaults to the current UTC time

    Returns:
        The same application, updated

    Raises:
        ValidationError: If rejecting without a reason
    """
    fields = fields or TransitionFields()
    validate_transition(target_status, fields)
    now = now or datetime.utcnow()

    if target_status == ApplicationStatus.APPROVED:
        application.approved_date = now
        application.rejection_reason = None
    else:
        application.approved_date = None
        if target_status == ApplicationStatus.REJECTED:
            application.rejection_reason = fields.rejection_reason.strip()
        elif fields.rejection_reason is not None:
            application.rejection_reason = fields.rejection_reason

    if not isinstance(fields.approved_date, _Unset):
        application.approved_date = fields.approved_date

    if fields.admin_notes is not None:
        application.admin_notes = fields.admin_notes

    application.status = target_status
    application.updated_at = now
    return application


def ensure_review_action_allowed(application: VendorApplication, action: ReviewAction) -> ApplicationStatus:
    """
    Resolve the target status of an administrator action.

    Returns:
        Status the action moves the application to

    Raises:
        InvalidTransitionError: If the action is not offered in the current status
    """
    if application.status not in REVIEW_ACTION_SOURCES[action]:
        raise InvalidTransitionError(
            f"Cannot {action.value.replace('_', ' ')} an application that is {application.status.value}"
        )
    return REVIEW_ACTION_TARGETS[action]


def ensure_applicant_can_submit(application: VendorApplication) -> None:
    """
    Raises:
        InvalidTransitionError: If the application is past draft or rejected
    """
    if application.status not in APPLICANT_EDITABLE_STATUSES:
        raise InvalidTransitionError(
            f"Only draft or rejected applications can be submitted, this one is {application.status.value}"
        )


def available_review_actions(status: ApplicationStatus) -> list[ReviewAction]:
    """Administrator actions offered for an application in ``status``."""
    return [action for action in ReviewAction if status in REVIEW_ACTION_SOURCES[action]]
