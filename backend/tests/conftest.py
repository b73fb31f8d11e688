"""Pytest configuration and shared fixtures."""

import copy
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

import pytest

from domain.entities import VendorApplication
from domain.enums import ApplicationStatus, VendorType
from domain.exceptions import ValidationError
from domain.repositories import IApplicationRepository


class InMemoryApplicationRepository(IApplicationRepository):
    """Repository double that keeps copies, like a real database would."""

    def __init__(self):
        self.records: dict[UUID, VendorApplication] = {}
        self.calls: list[str] = []

    async def create(self, application: VendorApplication) -> VendorApplication:
        self.calls.append("create")
        if any(a.application_code == application.application_code for a in self.records.values()):
            raise ValidationError("Application code already exists")
        self.records[application.id] = copy.deepcopy(application)
        return copy.deepcopy(application)

    async def get_by_id(self, application_id: UUID) -> Optional[VendorApplication]:
        self.calls.append("get_by_id")
        found = self.records.get(application_id)
        return copy.deepcopy(found) if found else None

    async def get_by_code_and_email(self, application_code: str, email: str) -> Optional[VendorApplication]:
        self.calls.append("get_by_code_and_email")
        for application in self.records.values():
            if application.application_code == application_code and application.matches_email(email):
                return copy.deepcopy(application)
        return None

    async def list_all(self) -> list[VendorApplication]:
        self.calls.append("list_all")
        ordered = sorted(self.records.values(), key=lambda a: a.created_date, reverse=True)
        return [copy.deepcopy(a) for a in ordered]

    async def update(self, application_id: UUID, fields: dict[str, Any]) -> Optional[VendorApplication]:
        self.calls.append("update")
        stored = self.records.get(application_id)
        if stored is None:
            return None
        for name, value in fields.items():
            setattr(stored, name, value)
        return copy.deepcopy(stored)

    async def delete(self, application_id: UUID) -> bool:
        self.calls.append("delete")
        return self.records.pop(application_id, None) is not None

    async def add(self, application: VendorApplication) -> VendorApplication:
        """Seed a record without counting it as a gateway call."""
        self.records[application.id] = copy.deepcopy(application)
        return application


@pytest.fixture
def repository():
    """Fixture for an empty in-memory repository."""
    return InMemoryApplicationRepository()


def make_domestic_application(**overrides) -> VendorApplication:
    """Domestic application with every required field filled."""
    values = dict(
        application_code="ACMECORP-1A2B3C4D",
        vendor_type=VendorType.DOMESTIC,
        company_name="Acme Corp",
        business_type="LLC",
        industry="Manufacturing",
        primary_contact_name="Jane Doe",
        primary_contact_email="vendor@co.com",
        country="United States",
        tax_id="12-3456789",
        business_license_url="/uploads/license.pdf",
        tax_document_url="/uploads/w9.pdf",
        insurance_certificate_url="/uploads/insurance.pdf",
    )
    values.update(overrides)
    return VendorApplication(**values)


def make_international_application(**overrides) -> VendorApplication:
    """International application with every required field filled."""
    values = dict(
        application_code="GLOBEX-5E6F7A8B",
        vendor_type=VendorType.INTERNATIONAL,
        company_name="Globex GmbH",
        business_type="GmbH",
        industry="Logistics",
        primary_contact_name="Hans Meier",
        primary_contact_email="hans@globex.example",
        country="Germany",
        vat_number="DE123456789",
        country_of_incorporation="Germany",
        business_registration_url="/uploads/registration.pdf",
        tax_document_url="/uploads/tax.pdf",
        vat_registration_url="/uploads/vat.pdf",
        certificate_of_good_standing_url="/uploads/good-standing.pdf",
        bank_details_document_url="/uploads/bank.pdf",
    )
    values.update(overrides)
    return VendorApplication(**values)


@pytest.fixture
def domestic_application():
    """Fixture for a complete domestic draft."""
    return make_domestic_application()


@pytest.fixture
def international_application():
    """Fixture for a complete international draft."""
    return make_international_application()


@pytest.fixture
def applications_by_status():
    """One application per dashboard-relevant status, oldest first."""
    start = datetime(2024, 1, 1)
    statuses = [
        ApplicationStatus.PENDING_REVIEW,
        ApplicationStatus.UNDER_REVIEW,
        ApplicationStatus.APPROVED,
        ApplicationStatus.REJECTED,
    ]
    return [
        make_domestic_application(
            application_code=f"APP-0000000{index}",
            status=status,
            created_date=start + timedelta(days=index),
        )
        for index, status in enumerate(statuses)
    ]


@pytest.fixture
def make_domestic():
    """Factory fixture for domestic applications with overrides."""
    return make_domestic_application


@pytest.fixture
def make_international():
    """Factory fixture for international applications with overrides."""
    return make_international_application
