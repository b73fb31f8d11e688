"""Domain exceptions surfaced to the presentation layer."""

from typing import Optional


class VendorOnboardingError(Exception):
    """Base class for all expected service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(VendorOnboardingError):
    """Raised when an application lookup by id or code and email fails."""


class ValidationError(VendorOnboardingError):
    """
    Raised when a request cannot be applied as given.

    Attributes:
        message: Human readable reason
        missing_fields: Field identifiers that blocked a submission, if any
    """

    def __init__(self, message: str, missing_fields: Optional[list[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class InvalidTransitionError(ValidationError):
    """Raised when a workflow action is not available from the current status."""


class UpstreamFailure(VendorOnboardingError):
    """
    Raised when the persistence or storage gateway fails.

    The message is generic and safe to return to callers; the original
    exception is kept as ``__cause__`` for logging.
    """
