"""Lifecycle states of a vendor application."""

from enum import Enum
from typing import Optional


class ApplicationStatus(str, Enum):
    """Status of a vendor application, exposed in lower case."""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    ON_HOLD = "on_hold"

    @property
    def storage_value(self) -> str:
        """Canonical upper-case form used by the database."""
        return self.value.upper()

    @classmethod
    def normalize(cls, value: Optional[str]) -> Optional["ApplicationStatus"]:
        """
        Parse a caller-supplied status in any letter case.

        Unknown or empty values yield None so that they are treated as
        "no status supplied".
        """
        if not value:
            return None
        candidate = value.strip().lower()
        for status in cls:
            if status.value == candidate:
                return status
        return None

    @classmethod
    def from_storage(cls, value: str) -> "ApplicationStatus":
        return cls(value.lower())

    def __str__(self) -> str:
        return self.value
