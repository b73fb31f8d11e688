"""Domain Entities - Objects with identity."""

from .vendor_application import (
    VendorApplication,
    PROTECTED_FIELDS,
    APPLICANT_EDITABLE_STATUSES,
)

__all__ = ["VendorApplication", "PROTECTED_FIELDS", "APPLICANT_EDITABLE_STATUSES"]
