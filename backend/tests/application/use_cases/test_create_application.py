"""Tests for CreateApplicationUseCase."""

import re

import pytest
from application.use_cases import CreateApplicationUseCase, GetApplicationUseCase
from domain.enums import ApplicationStatus, VendorType
from domain.exceptions import InvalidTransitionError, ValidationError


def acme_submission(**overrides):
    data = {
        "vendor_type": "domestic",
        "company_name": "Acme Corp",
        "business_type": "LLC",
        "industry": "Manufacturing",
        "primary_contact_name": "Jane Doe",
        "primary_contact_email": "Vendor@Co.com",
        "country": "United States",
        "tax_id": "12-3456789",
        "business_license_url": "/uploads/license.pdf",
        "tax_document_url": "/uploads/w9.pdf",
        "insurance_certificate_url": "/uploads/insurance.pdf",
    }
    data.update(overrides)
    return data


class TestCreateApplication:
    """Test creating drafts and submissions."""

    async def test_defaults_to_draft_with_generated_code(self, repository):
        use_case = CreateApplicationUseCase(repository)
        created = await use_case.execute({"company_name": "Acme Corp"})

        assert created.status == ApplicationStatus.DRAFT
        assert created.vendor_type == VendorType.DOMESTIC
        assert re.fullmatch(r"ACMECORP-[0-9A-F]{8}", created.application_code)
        assert created.country == "United States"
        assert created.created_date == created.updated_at

    async def test_draft_may_be_incomplete(self, repository):
        use_case = CreateApplicationUseCase(repository)
        created = await use_case.execute({"status": "draft"})
        assert created.application_code.startswith("APP-")
        assert repository.calls == ["create"]

    async def test_provided_code_is_kept(self, repository):
        use_case = CreateApplicationUseCase(repository)
        created = await use_case.execute({"application_code": "VENDOR-42", "company_name": "Acme"})
        assert created.application_code == "VENDOR-42"

    async def test_caller_identity_fields_are_ignored(self, repository):
        use_case = CreateApplicationUseCase(repository)
        created = await use_case.execute({
            "id": "not-a-uuid",
            "created_date": "1999-01-01",
            "approved_date": "1999-01-01",
            "company_name": "Acme",
        })
        assert created.approved_date is None
        assert created.id in repository.records

    async def test_missing_license_blocks_submission(self, repository):
        use_case = CreateApplicationUseCase(repository)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(acme_submission(status="pending_review", business_license_url=None))

        assert exc_info.value.missing_fields == ["business_license_url"]
        assert repository.calls == []

    async def test_complete_submission_is_pending_review(self, repository):
        use_case = CreateApplicationUseCase(repository)
        created = await use_case.execute(acme_submission(status="PENDING_REVIEW"))
        assert created.status == ApplicationStatus.PENDING_REVIEW
        assert created.application_code.startswith("ACMECORP-")

    async def test_missing_fields_logged_when_not_enforced(self, repository):
        use_case = CreateApplicationUseCase(repository, enforce_submission_requirements=False)
        created = await use_case.execute(acme_submission(status="pending_review", tax_id=""))
        assert created.status == ApplicationStatus.PENDING_REVIEW

    @pytest.mark.parametrize("status", ["approved", "under_review", "rejected"])
    async def test_cannot_create_past_submission(self, repository, status):
        use_case = CreateApplicationUseCase(repository)
        with pytest.raises(InvalidTransitionError):
            await use_case.execute(acme_submission(status=status))

    async def test_unknown_status_falls_back_to_draft(self, repository):
        use_case = CreateApplicationUseCase(repository)
        created = await use_case.execute({"status": "archived", "company_name": "Acme"})
        assert created.status == ApplicationStatus.DRAFT


class TestCreateThenLookup:
    """Test the applicant round trip."""

    async def test_lookup_with_differently_cased_email(self, repository):
        created = await CreateApplicationUseCase(repository).execute(acme_submission(status="pending_review"))

        found = await GetApplicationUseCase(repository).by_code_and_email(
            created.application_code, "vendor@co.com"
        )

        assert found.id == created.id
        assert found.company_name == "Acme Corp"
        assert found.tax_id == "12-3456789"
        assert found.status == ApplicationStatus.PENDING_REVIEW
