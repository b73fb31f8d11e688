"""Vendor application Pydantic schemas."""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities import VendorApplication
from domain.enums import ReviewAction, VendorType
from application.workflow import SubmissionCheck, available_review_actions


class ApplicationFields(BaseModel):
    """Profile, document and banking fields shared by create and update."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    company_name: Optional[str] = Field(None, max_length=255)
    business_type: Optional[str] = Field(None, max_length=255)
    industry: Optional[str] = Field(None, max_length=255)
    years_in_business: Optional[int] = Field(None, ge=0)
    annual_revenue_range: Optional[str] = Field(None, max_length=100)
    website: Optional[str] = Field(None, max_length=500)
    services_offered: Optional[str] = None

    primary_contact_name: Optional[str] = Field(None, max_length=255)
    primary_contact_email: Optional[str] = Field(None, max_length=255)
    primary_contact_phone: Optional[str] = Field(None, max_length=50)
    business_address: Optional[str] = Field(None, max_length=500)
    city: Optional[str] = Field(None, max_length=255)
    state: Optional[str] = Field(None, max_length=255)
    zip_code: Optional[str] = Field(None, max_length=20)
    country: Optional[str] = Field(None, max_length=255)

    tax_id: Optional[str] = Field(None, max_length=100)
    vat_number: Optional[str] = Field(None, max_length=100)
    country_of_incorporation: Optional[str] = Field(None, max_length=255)

    business_license_url: Optional[str] = Field(None, max_length=1000)
    tax_document_url: Optional[str] = Field(None, max_length=1000)
    insurance_certificate_url: Optional[str] = Field(None, max_length=1000)
    business_registration_url: Optional[str] = Field(None, max_length=1000)
    vat_registration_url: Optional[str] = Field(None, max_length=1000)
    certificate_of_good_standing_url: Optional[str] = Field(None, max_length=1000)
    bank_details_document_url: Optional[str] = Field(None, max_length=1000)
    import_export_license_url: Optional[str] = Field(None, max_length=1000)
    compliance_certificates_url: Optional[str] = Field(None, max_length=1000)

    bank_name: Optional[str] = Field(None, max_length=255)
    bank_account_number: Optional[str] = Field(None, max_length=100)
    swift_code: Optional[str] = Field(None, max_length=20)
    iban: Optional[str] = Field(None, max_length=50)
    preferred_currency: Optional[str] = Field(None, max_length=10)

    @field_validator("years_in_business", mode="before")
    @classmethod
    def empty_years_is_none(cls, value: Any) -> Any:
        # Forms send "" for an untouched number input
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ApplicationCreateRequest(ApplicationFields):
    """Request schema for creating an application."""

    vendor_type: VendorType = VendorType.DOMESTIC
    status: Optional[str] = Field(None, description="draft (default) or pending_review")
    application_code: Optional[str] = Field(None, alias="applicationCode", max_length=255)
    country: Optional[str] = Field("United States", max_length=255)

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "vendor_type": "domestic",
                    "company_name": "Acme Corp",
                    "business_type": "LLC",
                    "industry": "Manufacturing",
                    "primary_contact_name": "Jane Doe",
                    "primary_contact_email": "jane@acme.example",
                    "country": "United States",
                    "status": "draft",
                }
            ]
        },
    )


class ApplicationUpdateRequest(ApplicationFields):
    """
    Request schema for a partial update.

    Only supplied keys are applied; ``approved_date: null`` is an explicit
    override, distinct from leaving the key out.
    """

    status: Optional[str] = None
    admin_notes: Optional[str] = None
    rejection_reason: Optional[str] = None
    approved_date: Optional[datetime] = None

    @field_validator("approved_date", mode="before")
    @classmethod
    def empty_date_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("approved_date")
    @classmethod
    def naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Stored columns are naive UTC
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def to_changes(self) -> dict[str, Any]:
        """Supplied fields only."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class ApplicationSubmitRequest(ApplicationFields):
    """Last edits sent together with a submission."""

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ReviewActionRequest(BaseModel):
    """Request schema for an administrator review action."""

    action: ReviewAction
    admin_notes: Optional[str] = None
    rejection_reason: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "action": "reject",
                    "admin_notes": "Insurance certificate expired",
                    "rejection_reason": "Please upload a current insurance certificate",
                }
            ]
        }
    }


class ApplicationResponse(ApplicationFields):
    """Response schema for an application."""

    id: UUID
    application_code: str = Field(..., alias="applicationCode")
    vendor_type: VendorType
    status: str = Field(..., description="Lower-case status")
    admin_notes: Optional[str] = None
    rejection_reason: Optional[str] = None
    approved_date: Optional[datetime] = None
    created_date: datetime
    updated_at: datetime
    available_actions: list[ReviewAction] = Field(
        default_factory=list,
        description="Review actions offered in the current status",
    )

    @classmethod
    def from_entity(cls, application: VendorApplication) -> "ApplicationResponse":
        values = application.to_dict()
        values["status"] = application.status.value
        values["available_actions"] = available_review_actions(application.status)
        return cls.model_validate(values)


class SubmissionCheckResponse(BaseModel):
    """Response schema for the pre-submission check."""

    vendor_type: VendorType
    is_eligible: bool
    missing_fields: list[str]
    extraneous_fields: list[str]

    @classmethod
    def from_check(cls, check: SubmissionCheck) -> "SubmissionCheckResponse":
        return cls(
            vendor_type=check.vendor_type,
            is_eligible=check.is_eligible,
            missing_fields=check.missing_fields,
            extraneous_fields=check.extraneous_fields,
        )
