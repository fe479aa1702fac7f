"""
Scalar field extraction: student name, masked ID, program, GPA.

Each field has a fixed, ordered pattern list (see patterns.py). The
first pattern whose regex matches decides the field; later patterns
are not attempted. A missing field is None, never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from degreeaudit.extractors.patterns import FIELD_PATTERNS, FieldPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedFields:
    """Scalar facts found in an audit. None means not found."""

    student_name: str | None = None
    student_id: str | None = None
    degree_program: str | None = None
    gpa: float | None = None
    expected_graduation: str | None = None


def first_match(patterns: Sequence[FieldPattern], text: str) -> tuple[FieldPattern, Any] | None:
    """Apply patterns in priority order.

    Returns:
        (pattern, post-processed value) for the first regex that
        matches, or None when no pattern matches. The value itself may
        be None if the post-processor rejected the captured text.
    """
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return pattern, pattern.post(match.group(1))
    return None


class FieldExtractor:
    """Extracts the scalar fields of an audit.

    Usage:
        extractor = FieldExtractor()
        fields = extractor.extract(text)
        print(fields.student_name, fields.gpa)
    """

    name = "fields"

    def __init__(self, patterns: Mapping[str, Sequence[FieldPattern]] | None = None):
        """Initialize the extractor.

        Args:
            patterns: Field name -> ordered patterns. Defaults to
                FIELD_PATTERNS; missing fields are never extracted.
        """
        self.patterns = dict(patterns) if patterns is not None else dict(FIELD_PATTERNS)

    def extract_field(self, field_name: str, text: str) -> Any:
        """Extract a single field, or None."""
        patterns = self.patterns.get(field_name, ())
        found = first_match(patterns, text)
        if found is None:
            logger.debug("No pattern matched for %s", field_name)
            return None

        pattern, value = found
        if value is None:
            logger.debug(
                "Pattern %s matched for %s but the value was unusable", pattern.name, field_name
            )
        else:
            logger.debug("Pattern %s matched for %s: %r", pattern.name, field_name, value)
        return value

    def extract(self, text: str) -> ExtractedFields:
        """Extract every scalar field from the full text."""
        return ExtractedFields(
            student_name=self.extract_field("student_name", text),
            student_id=self.extract_field("student_id", text),
            degree_program=self.extract_field("degree_program", text),
            gpa=self.extract_field("gpa", text),
            expected_graduation=self.extract_field("expected_graduation", text),
        )
