"""
degreeaudit: Extract academic progress from degree-audit documents.

This library reads the text of a degree audit and extracts a
structured record: student identity, GPA, credit totals, and the
ordered list of courses still needed.

Example:
    >>> import degreeaudit
    >>> result = degreeaudit.parse_document("audit.pdf")
    >>> if result.success:
    ...     for course in result.data.required_courses:
    ...         print(course.course_code, course.course_title, course.credits)

    >>> # Or straight from text
    >>> evaluation = degreeaudit.parse_text(text)
    >>> print(evaluation.credits_remaining)
"""

from degreeaudit.assembler import EvaluationAssembler
from degreeaudit.config import ParserConfig
from degreeaudit.exceptions import (
    ConfigurationError,
    DegreeAuditError,
    ExtractionError,
    UnsupportedFormatError,
)
from degreeaudit.lookups import LookupTables, default_tables, normalize_course_code
from degreeaudit.models import (
    AcademicEvaluation,
    ParseResult,
    RequiredCourse,
    StoredEvaluationData,
)
from degreeaudit.parse import (
    detect_format,
    parse_batch,
    parse_document,
    parse_text,
    supported_formats,
)
from degreeaudit.storage import EvaluationStore

__version__ = "0.1.0"
__all__ = [
    # Main API
    "parse_text",
    "parse_document",
    "parse_batch",
    "detect_format",
    "supported_formats",
    "EvaluationAssembler",
    # Configuration
    "ParserConfig",
    # Lookup data
    "LookupTables",
    "default_tables",
    "normalize_course_code",
    # Models
    "AcademicEvaluation",
    "RequiredCourse",
    "ParseResult",
    "StoredEvaluationData",
    # Persistence
    "EvaluationStore",
    # Exceptions
    "DegreeAuditError",
    "UnsupportedFormatError",
    "ExtractionError",
    "ConfigurationError",
]
