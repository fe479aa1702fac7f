"""
Extraction module.

Each extractor is a pure function of the audit text:
- FieldExtractor: student name, masked ID, program, GPA, graduation term
- CreditSummaryExtractor: required/applied credit pair
- CourseRequirementExtractor: outstanding courses, deduplicated and ordered

Patterns are kept as data in extractors.patterns so each one can be
tested on its own.
"""

from degreeaudit.extractors.courses import (
    CourseRequirementExtractor,
    RequirementResult,
    RequirementTuple,
    extract_required_courses,
    split_options,
)
from degreeaudit.extractors.credits import CreditSummary, CreditSummaryExtractor
from degreeaudit.extractors.fields import ExtractedFields, FieldExtractor, first_match
from degreeaudit.extractors.patterns import FIELD_PATTERNS, FieldPattern

__all__ = [
    # Extractors
    "FieldExtractor",
    "CreditSummaryExtractor",
    "CourseRequirementExtractor",
    # Results
    "ExtractedFields",
    "CreditSummary",
    "RequirementResult",
    "RequirementTuple",
    # Patterns
    "FieldPattern",
    "FIELD_PATTERNS",
    # Helpers
    "first_match",
    "split_options",
    "extract_required_courses",
]
