"""Tests for SubmitApplicationUseCase and CheckSubmissionUseCase."""

from uuid import uuid4

import pytest
from application.use_cases import CheckSubmissionUseCase, SubmitApplicationUseCase
from domain.enums import ApplicationStatus
from domain.exceptions import InvalidTransitionError, NotFoundError, ValidationError


class TestSubmitApplication:
    """Test applicant submission and resubmission."""

    async def test_submit_complete_draft(self, repository, domestic_application):
        await repository.add(domestic_application)

        saved = await SubmitApplicationUseCase(repository).execute(domestic_application.id)

        assert saved.status == ApplicationStatus.PENDING_REVIEW

    async def test_incomplete_draft_is_blocked(self, repository, make_domestic):
        application = make_domestic(tax_id=None)
        await repository.add(application)

        with pytest.raises(ValidationError) as exc_info:
            await SubmitApplicationUseCase(repository).execute(application.id)

        assert exc_info.value.missing_fields == ["tax_id"]
        assert repository.records[application.id].status == ApplicationStatus.DRAFT

    async def test_changes_are_saved_with_the_submission(self, repository, make_domestic):
        application = make_domestic(tax_id=None)
        await repository.add(application)

        saved = await SubmitApplicationUseCase(repository).execute(
            application.id, {"tax_id": "12-3456789", "status": "approved"}
        )

        assert saved.tax_id == "12-3456789"
        assert saved.status == ApplicationStatus.PENDING_REVIEW
        assert saved.approved_date is None

    async def test_rejected_application_can_be_resubmitted(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.REJECTED, rejection_reason="Blurry scan")
        await repository.add(application)

        saved = await SubmitApplicationUseCase(repository).execute(
            application.id, {"business_license_url": "/uploads/license-v2.pdf"}
        )

        assert saved.status == ApplicationStatus.PENDING_REVIEW
        assert saved.business_license_url == "/uploads/license-v2.pdf"

    async def test_under_review_cannot_be_resubmitted(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.UNDER_REVIEW)
        await repository.add(application)

        with pytest.raises(InvalidTransitionError):
            await SubmitApplicationUseCase(repository).execute(application.id)

    async def test_advisory_mode_lets_incomplete_draft_through(self, repository, make_domestic):
        application = make_domestic(tax_id=None)
        await repository.add(application)

        saved = await SubmitApplicationUseCase(
            repository, enforce_submission_requirements=False
        ).execute(application.id)

        assert saved.status == ApplicationStatus.PENDING_REVIEW


class TestCheckSubmission:
    """Test the pre-submission report."""

    async def test_reports_missing_fields(self, repository, make_international):
        application = make_international(vat_number=None)
        await repository.add(application)

        check = await CheckSubmissionUseCase(repository).execute(application.id)

        assert check.is_eligible is False
        assert check.missing_fields == ["vat_number"]

    async def test_missing_application(self, repository):
        with pytest.raises(NotFoundError):
            await CheckSubmissionUseCase(repository).execute(uuid4())
