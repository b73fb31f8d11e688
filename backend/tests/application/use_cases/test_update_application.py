"""Tests for UpdateApplicationUseCase."""

from datetime import datetime
from uuid import uuid4

import pytest
from application.use_cases import UpdateApplicationUseCase
from domain.enums import ApplicationStatus, VendorType
from domain.exceptions import NotFoundError, ValidationError


class TestFieldUpdates:
    """Test plain field edits."""

    async def test_updates_fields_and_keeps_identity(self, repository, domestic_application):
        await repository.add(domestic_application)
        use_case = UpdateApplicationUseCase(repository)

        saved = await use_case.execute(domestic_application.id, {
            "website": "https://acme.example",
            "application_code": "HIJACK-1",
            "vendor_type": "international",
            "created_date": datetime(1999, 1, 1),
        })

        assert saved.website == "https://acme.example"
        assert saved.application_code == "ACMECORP-1A2B3C4D"
        assert saved.vendor_type == VendorType.DOMESTIC
        assert saved.created_date == domestic_application.created_date
        assert saved.updated_at > domestic_application.updated_at

    async def test_missing_application(self, repository):
        with pytest.raises(NotFoundError):
            await UpdateApplicationUseCase(repository).execute(uuid4(), {"website": "x"})

    async def test_approved_date_override_without_status(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.APPROVED, approved_date=datetime(2024, 1, 1))
        await repository.add(application)

        saved = await UpdateApplicationUseCase(repository).execute(application.id, {"approved_date": None})

        assert saved.status == ApplicationStatus.APPROVED
        assert saved.approved_date is None


class TestStatusUpdates:
    """Test status changes routed through the workflow."""

    async def test_blank_rejection_never_reaches_persistence(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.UNDER_REVIEW)
        await repository.add(application)

        with pytest.raises(ValidationError, match="rejection reason required"):
            await UpdateApplicationUseCase(repository).execute(
                application.id, {"status": "rejected", "rejection_reason": "   "}
            )

        assert repository.calls == []
        assert repository.records[application.id].status == ApplicationStatus.UNDER_REVIEW

    async def test_approve_stamps_date(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.UNDER_REVIEW)
        await repository.add(application)

        saved = await UpdateApplicationUseCase(repository).execute(
            application.id, {"status": "approved", "admin_notes": "All good"}
        )

        assert saved.status == ApplicationStatus.APPROVED
        assert saved.approved_date is not None
        assert saved.admin_notes == "All good"

    async def test_moving_away_from_approved_clears_date(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.APPROVED, approved_date=datetime(2024, 1, 1))
        await repository.add(application)

        saved = await UpdateApplicationUseCase(repository).execute(application.id, {"status": "on_hold"})

        assert saved.status == ApplicationStatus.ON_HOLD
        assert saved.approved_date is None

    async def test_explicit_approved_date_wins(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.UNDER_REVIEW)
        await repository.add(application)
        explicit = datetime(2023, 12, 31)

        saved = await UpdateApplicationUseCase(repository).execute(
            application.id, {"status": "approved", "approved_date": explicit}
        )

        assert saved.approved_date == explicit

    async def test_any_status_may_be_set(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.APPROVED)
        await repository.add(application)

        saved = await UpdateApplicationUseCase(repository).execute(application.id, {"status": "draft"})

        assert saved.status == ApplicationStatus.DRAFT

    async def test_resubmitting_incomplete_draft_is_blocked(self, repository, make_domestic):
        application = make_domestic(tax_id=None)
        await repository.add(application)

        with pytest.raises(ValidationError) as exc_info:
            await UpdateApplicationUseCase(repository).execute(application.id, {"status": "pending_review"})

        assert exc_info.value.missing_fields == ["tax_id"]
        assert "update" not in repository.calls

    async def test_resubmit_with_missing_field_supplied(self, repository, make_domestic):
        application = make_domestic(status=ApplicationStatus.REJECTED, tax_id=None, rejection_reason="No tax id")
        await repository.add(application)

        saved = await UpdateApplicationUseCase(repository).execute(
            application.id, {"status": "pending_review", "tax_id": "12-3456789"}
        )

        assert saved.status == ApplicationStatus.PENDING_REVIEW
        # Only rejection and explicit reasons touch the stored reason
        assert saved.rejection_reason == "No tax id"
