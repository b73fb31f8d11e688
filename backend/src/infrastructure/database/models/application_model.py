"""Vendor application SQLAlchemy model."""

import uuid
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from infrastructure.database.session import Base


class ApplicationModel(Base):
    """SQLAlchemy model for vendor applications."""
    
    __tablename__ = "vendor_applications"
    
    # Primary key
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    
    # Identity and classification
    application_code: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False
    )
    vendor_type: Mapped[str] = mapped_column(String(32), nullable=False, default="domestic")
    # Upper-case canonical form, e.g. PENDING_REVIEW
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="DRAFT", index=True)
    
    # Timestamps
    created_date: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )
    
    # Company profile
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    business_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    industry: Mapped[str | None] = mapped_column(String(255), nullable=True)
    years_in_business: Mapped[int | None] = mapped_column(Integer, nullable=True)
    annual_revenue_range: Mapped[str | None] = mapped_column(String(100), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    services_offered: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Contact and address
    primary_contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    primary_contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    primary_contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    business_address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True)
    
    # Tax identifiers
    tax_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    vat_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country_of_incorporation: Mapped[str | None] = mapped_column(String(255), nullable=True)
    
    # Document URLs
    business_license_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    tax_document_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    insurance_certificate_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    business_registration_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    vat_registration_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    certificate_of_good_standing_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    bank_details_document_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    import_export_license_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    compliance_certificates_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    
    # Banking
    bank_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bank_account_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    swift_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    iban: Mapped[str | None] = mapped_column(String(50), nullable=True)
    preferred_currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    
    # Review
    admin_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    approved_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, application_code={self.application_code})>"
