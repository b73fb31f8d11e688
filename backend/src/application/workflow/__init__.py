"""Workflow core - status transitions and the submission gate."""

from .status_transitions import (
    UNSET,
    REVIEW_ACTION_TARGETS,
    TransitionFields,
    apply_transition,
    validate_transition,
    ensure_review_action_allowed,
    ensure_applicant_can_submit,
    available_review_actions,
)
from .submission_validator import (
    SubmissionCheck,
    check_submission,
    ensure_submittable,
    is_eligible_for_submission,
    missing_submission_fields,
)

__all__ = [
    "UNSET",
    "REVIEW_ACTION_TARGETS",
    "TransitionFields",
    "apply_transition",
    "validate_transition",
    "ensure_review_action_allowed",
    "ensure_applicant_can_submit",
    "available_review_actions",
    "SubmissionCheck",
    "check_submission",
    "ensure_submittable",
    "is_eligible_for_submission",
    "missing_submission_fields",
]
