"""
Unit tests for credit summary extraction.
"""

import pytest

from degreeaudit.extractors import CreditSummary, CreditSummaryExtractor


@pytest.fixture
def extractor() -> CreditSummaryExtractor:
    return CreditSummaryExtractor()


class TestCreditSummaryExtractor:
    """Test the composite required/applied pattern."""

    def test_required_and_applied(self, extractor):
        summary = extractor.extract("Credits required: 120 Credits applied: 55")
        assert summary == CreditSummary(required=120, applied=55)
        assert summary.remaining == 65

    def test_arbitrary_whitespace(self, extractor):
        """Labels and numbers may be separated by any whitespace."""
        summary = extractor.extract("Credits required 120 \n\n  Credits applied\t55")
        assert summary.required == 120
        assert summary.applied == 55

    def test_case_insensitive(self, extractor):
        summary = extractor.extract("CREDITS REQUIRED: 60 CREDITS APPLIED: 12")
        assert (summary.required, summary.applied) == (60, 12)

    def test_first_summary_wins(self, extractor):
        """The degree-level summary comes first in the audit."""
        text = (
            "Credits required: 120 Credits applied: 55\n"
            "Major in Computer Science Credits required: 36 Credits applied: 20"
        )
        assert extractor.extract(text).required == 120

    def test_wrong_order_not_matched(self, extractor):
        summary = extractor.extract("Credits applied: 55 Credits required: 120")
        assert not summary.found

    def test_missing(self, extractor):
        summary = extractor.extract("no credit information")
        assert summary == CreditSummary()
        assert not summary.found
        assert summary.total_required == 0
        assert summary.completed == 0
        assert summary.remaining == 0


class TestCreditSummary:
    """Test the not-found versus zero distinction and derived remaining."""

    def test_zero_is_found(self, extractor):
        summary = extractor.extract("Credits required: 0 Credits applied: 0")
        assert summary.found
        assert summary.required == 0

    def test_not_found_differs_from_zero(self):
        assert CreditSummary() != CreditSummary(required=0, applied=0)
        assert CreditSummary().total_required == CreditSummary(0, 0).total_required

    def test_remaining_not_clamped(self, extractor):
        """Applied above required surfaces as negative remaining."""
        summary = extractor.extract("Credits required: 30 Credits applied: 45")
        assert summary.remaining == -15

    @pytest.mark.parametrize("required,applied", [(120, 55), (36, 36), (1, 0), (60, 90)])
    def test_remaining_is_difference(self, required, applied):
        assert CreditSummary(required, applied).remaining == required - applied
