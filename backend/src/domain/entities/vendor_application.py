"""Vendor application entity, the aggregate the workflow operates on."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from domain.enums import ApplicationStatus, VendorType
from domain.value_objects import FieldSet, field_set_for


# Set by the system, never accepted from callers
PROTECTED_FIELDS = frozenset({"id", "application_code", "created_date", "updated_at"})

APPLICANT_EDITABLE_STATUSES = frozenset({ApplicationStatus.DRAFT, ApplicationStatus.REJECTED})


@dataclass
class VendorApplication:
    """
    Entity representing a vendor's onboarding submission.

    This is a mutable entity with identity (id). The application code and
    vendor type are fixed once the application exists.
    """

    id: UUID = field(default_factory=uuid4)
    application_code: str = ""
    vendor_type: VendorType = VendorType.DOMESTIC
    status: ApplicationStatus = ApplicationStatus.DRAFT
    created_date: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    # Company profile
    company_name: Optional[str] = None
    business_type: Optional[str] = None
    industry: Optional[str] = None
    years_in_business: Optional[int] = None
    annual_revenue_range: Optional[str] = None
    website: Optional[str] = None
    services_offered: Optional[str] = None

    # Contact and address
    primary_contact_name: Optional[str] = None
    primary_contact_email: Optional[str] = None
    primary_contact_phone: Optional[str] = None
    business_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = "United States"

    # Tax identifiers
    tax_id: Optional[str] = None
    vat_number: Optional[str] = None
    country_of_incorporation: Optional[str] = None

    # Documents
    business_license_url: Optional[str] = None
    tax_document_url: Optional[str] = None
    insurance_certificate_url: Optional[str] = None
    business_registration_url: Optional[str] = None
    vat_registration_url: Optional[str] = None
    certificate_of_good_standing_url: Optional[str] = None
    bank_details_document_url: Optional[str] = None
    import_export_license_url: Optional[str] = None
    compliance_certificates_url: Optional[str] = None

    # Banking
    bank_name: Optional[str] = None
    bank_account_number: Optional[str] = None
    swift_code: Optional[str] = None
    iban: Optional[str] = None
    preferred_currency: Optional[str] = None

    # Review
    admin_notes: Optional[str] = None
    rejection_reason: Optional[str] = None
    approved_date: Optional[datetime] = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def editable_field_names(cls) -> tuple[str, ...]:
        """Fields a caller may set through a create or update request."""
        return tuple(name for name in cls.field_names() if name not in PROTECTED_FIELDS)

    @property
    def field_set(self) -> FieldSet:
        return field_set_for(self.vendor_type)

    def update_fields(self, changes: dict[str, Any]) -> None:
        """
        Apply profile changes from a caller.

        Protected fields, vendor type, status and approved date are left
        alone; status changes go through the transition function.

        Raises:
            ValueError: If a change names an unknown field
        """
        known = set(self.field_names())
        for name, value in changes.items():
            if name not in known:
                raise ValueError(f"Unknown application field: {name}")
            if name in PROTECTED_FIELDS or name in ("vendor_type", "status", "approved_date"):
                continue
            setattr(self, name, value)
        self._mark_updated()

    def is_applicant_editable(self) -> bool:
        """Check if the applicant may still edit and resubmit."""
        return self.status in APPLICANT_EDITABLE_STATUSES

    def matches_email(self, email: str) -> bool:
        """Case-insensitive comparison with the primary contact email."""
        if not self.primary_contact_email or not email:
            return False
        return self.primary_contact_email.strip().lower() == email.strip().lower()

    def to_dict(self) -> dict[str, Any]:
        """Plain field mapping, used for persistence and field-set checks."""
        return {name: getattr(self, name) for name in self.field_names()}

    def mutable_fields(self) -> dict[str, Any]:
        """Everything a repository update may overwrite."""
        return {
            name: value
            for name, value in self.to_dict().items()
            if name not in ("id", "application_code", "created_date", "vendor_type")
        }

    def _mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()

    def __str__(self) -> str:
        return f"VendorApplication(id={self.id}, code={self.application_code}, status={self.status})"
