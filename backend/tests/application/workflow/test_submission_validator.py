"""Unit tests for the submission gate."""

import logging

import pytest
from application.workflow import (
    check_submission,
    ensure_submittable,
    is_eligible_for_submission,
    missing_submission_fields,
)
from domain.enums import VendorType
from domain.exceptions import ValidationError
from infrastructure.config import ROOT_LOGGER_NAME


class TestDomesticSubmission:
    """Test the domestic field-set."""

    def test_complete_domestic_application_is_eligible(self, domestic_application):
        assert missing_submission_fields(domestic_application) == []
        assert is_eligible_for_submission(domestic_application) is True

    def test_missing_tax_id_is_ineligible(self, make_domestic):
        application = make_domestic(tax_id=None)
        assert missing_submission_fields(application) == ["tax_id"]
        assert is_eligible_for_submission(application) is False

        application.tax_id = "12-3456789"
        assert is_eligible_for_submission(application) is True

    def test_missing_business_license_is_reported(self, make_domestic):
        application = make_domestic(business_license_url="")
        assert "business_license_url" in missing_submission_fields(application)

    def test_international_fields_not_required_for_domestic(self, domestic_application):
        assert domestic_application.vat_number is None
        assert is_eligible_for_submission(domestic_application) is True


class TestInternationalSubmission:
    """Test the international field-set."""

    def test_complete_international_application_is_eligible(self, international_application):
        assert is_eligible_for_submission(international_application) is True

    def test_missing_vat_documents_are_reported(self, make_international):
        application = make_international(vat_registration_url=None, bank_details_document_url="  ")
        assert missing_submission_fields(application) == [
            "vat_registration_url",
            "bank_details_document_url",
        ]

    def test_insurance_certificate_is_not_required(self, make_international):
        application = make_international(insurance_certificate_url=None)
        assert is_eligible_for_submission(application) is True

    def test_tax_id_is_not_required(self, international_application):
        assert international_application.tax_id is None
        assert "tax_id" not in missing_submission_fields(international_application)


class TestSubmissionCheck:
    """Test the full submission report."""

    def test_reports_fields_of_the_other_vendor_type(self, make_domestic):
        application = make_domestic(vat_number="DE123", iban="DE89370400440532013000")
        check = check_submission(application)
        assert check.vendor_type == VendorType.DOMESTIC
        assert check.is_eligible is True
        assert check.extraneous_fields == ["vat_number", "iban"]

    def test_international_with_tax_id_reports_it(self, make_international):
        check = check_submission(make_international(tax_id="12-3456789"))
        assert check.extraneous_fields == ["tax_id"]


class TestEnsureSubmittable:
    """Test enforced and advisory gating."""

    def test_enforced_gate_raises_with_missing_fields(self, make_domestic):
        application = make_domestic(tax_id=None, industry=" ")
        with pytest.raises(ValidationError) as exc_info:
            ensure_submittable(application, enforce=True)
        assert exc_info.value.missing_fields == ["industry", "tax_id"]

    def test_advisory_gate_logs_and_returns_missing(self, make_domestic, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger(ROOT_LOGGER_NAME), "propagate", True)
        application = make_domestic(tax_id=None)
        with caplog.at_level(logging.WARNING):
            missing = ensure_submittable(application, enforce=False)
        assert missing == ["tax_id"]
        assert "missing fields" in caplog.text

    def test_eligible_application_passes(self, domestic_application):
        assert ensure_submittable(domestic_application) == []
