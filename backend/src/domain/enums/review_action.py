"""Administrator review actions and dashboard tabs."""

from enum import Enum


class ReviewAction(str, Enum):
    """Actions an administrator can take on a submitted application."""

    MARK_UNDER_REVIEW = "mark_under_review"
    APPROVE = "approve"
    REJECT = "reject"
    HOLD = "hold"

    def __str__(self) -> str:
        return self.value


class ApplicationTab(str, Enum):
    """Filters offered by the administrator dashboard."""

    ALL = "all"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    def __str__(self) -> str:
        return self.value
