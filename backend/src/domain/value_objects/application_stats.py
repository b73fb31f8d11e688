"""Dashboard counters derived from a collection of applications."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from domain.enums import ApplicationStatus

if TYPE_CHECKING:
    from domain.entities import VendorApplication


PENDING_STATUSES = frozenset({ApplicationStatus.PENDING_REVIEW, ApplicationStatus.UNDER_REVIEW})


@dataclass(frozen=True)
class ApplicationStats:
    """
    Immutable snapshot of the administrator dashboard counters.

    Attributes:
        total: Number of applications
        pending: Applications waiting for or in review
        approved: Approved applications
        rejected: Rejected applications
    """

    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0

    @classmethod
    def from_applications(cls, applications: Iterable["VendorApplication"]) -> "ApplicationStats":
        """Count applications per dashboard bucket."""
        total = pending = approved = rejected = 0
        for application in applications:
            total += 1
            if application.status in PENDING_STATUSES:
                pending += 1
            elif application.status == ApplicationStatus.APPROVED:
                approved += 1
            elif application.status == ApplicationStatus.REJECTED:
                rejected += 1
        return cls(total=total, pending=pending, approved=approved, rejected=rejected)

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "pending": self.pending,
            "approved": self.approved,
            "rejected": self.rejected,
        }
