"""
Credit summary extraction.

The audit states the program's required credits and the credits
applied so far in one line ("Credits required: 120 Credits applied: 55").
Remaining credits are always derived from those two numbers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from degreeaudit.extractors.patterns import CREDIT_SUMMARY_PATTERN, to_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreditSummary:
    """Required/applied credit pair.

    None means the audit had no credit summary, which is distinct
    from an audit stating zero credits. The public record collapses
    both to 0 via total_required/completed.
    """

    required: int | None = None
    applied: int | None = None

    @property
    def found(self) -> bool:
        return self.required is not None and self.applied is not None

    @property
    def total_required(self) -> int:
        return self.required or 0

    @property
    def completed(self) -> int:
        return self.applied or 0

    @property
    def remaining(self) -> int:
        """Required minus applied. Not clamped: a malformed audit can go negative."""
        return self.total_required - self.completed


class CreditSummaryExtractor:
    """Finds the composite required/applied credit line."""

    name = "credit_summary"

    def extract(self, text: str) -> CreditSummary:
        match = CREDIT_SUMMARY_PATTERN.search(text)
        if not match:
            logger.debug("No credit summary found")
            return CreditSummary()

        summary = CreditSummary(required=to_int(match.group(1)), applied=to_int(match.group(2)))
        logger.debug("Credit summary: required=%s applied=%s", summary.required, summary.applied)
        return summary
