"""Unit tests for ApplicationStatus enum."""

import pytest
from domain.enums import ApplicationStatus


class TestApplicationStatusNormalization:
    """Test status parsing from caller input and storage."""

    @pytest.mark.parametrize("raw", ["approved", "APPROVED", "  Approved "])
    def test_normalize_is_case_insensitive(self, raw):
        assert ApplicationStatus.normalize(raw) == ApplicationStatus.APPROVED

    @pytest.mark.parametrize("raw", [None, "", "archived"])
    def test_unknown_or_empty_status_is_none(self, raw):
        assert ApplicationStatus.normalize(raw) is None

    def test_storage_value_is_upper_case(self):
        assert ApplicationStatus.PENDING_REVIEW.storage_value == "PENDING_REVIEW"

    def test_from_storage_round_trips(self):
        for status in ApplicationStatus:
            assert ApplicationStatus.from_storage(status.storage_value) is status

    def test_str_is_lower_case_value(self):
        assert str(ApplicationStatus.ON_HOLD) == "on_hold"
