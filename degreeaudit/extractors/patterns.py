"""
Regular patterns used by the extractors, kept as data.

Each scalar field has an ordered tuple of FieldPattern entries: a
compiled regex whose first group holds the raw value, and a
post-processor that turns that value into the field value (None when
the captured text is unusable). Extractors try the entries in order
and stop at the first regex that matches.

The course patterns operate on whitespace-collapsed text (single
spaces, newlines kept).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldPattern:
    """A named regex plus the post-processor for its first group."""

    name: str
    regex: re.Pattern[str]
    post: Callable[[str], Any]

    def search(self, text: str) -> re.Match[str] | None:
        return self.regex.search(text)


# ============================================================
# Post-processors
# ============================================================


def clean_text(value: str) -> str | None:
    """Collapse whitespace and trim separators; empty becomes None."""
    cleaned = re.sub(r"\s+", " ", value).strip(" ,")
    return cleaned or None


def to_float(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None


def to_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


# Status qualifiers and labels that can trail a program name on the same line
_PROGRAM_TAIL = re.compile(
    r"\s+(?:INCOMPLETE|COMPLETE|IN[- ]PROGRESS|Catalog|Credits|GPA|Still)\b.*$",
    re.DOTALL,
)


def clean_program(value: str) -> str | None:
    """Program name without trailing status qualifier."""
    return clean_text(_PROGRAM_TAIL.sub("", value))


# ============================================================
# Scalar fields
# ============================================================

# Labels that follow the student name on the audit header line
_HEADER_LABELS = (
    r"(?:Student\s+ID|ID|Degree|Major|Program|Level|Classification|Advisor"
    r"|Catalog|GSU\s+GPA|GPA|Overall|Credits|Expected)\b"
)
_NAME_STOP = rf"(?=[ \t]+{_HEADER_LABELS}|[ \t]*(?:\n|$))"

NAME_PATTERNS: tuple[FieldPattern, ...] = (
    FieldPattern(
        "student_name_label",
        re.compile(rf"(?i:student\s+name)\s*:?[ \t]*([A-Za-z,][A-Za-z, \t]*?){_NAME_STOP}"),
        clean_text,
    ),
    FieldPattern(
        "name_colon",
        re.compile(rf"\bName\s*:[ \t]*([A-Za-z,][A-Za-z, \t]*?){_NAME_STOP}"),
        clean_text,
    ),
)

# Mask characters followed by the visible digits, e.g. "****1234"
_MASKED_ID = r"([*Xx#]+\d+)"

STUDENT_ID_PATTERNS: tuple[FieldPattern, ...] = (
    FieldPattern(
        "student_id_label",
        re.compile(rf"(?i:student\s+id)\s*:?\s*{_MASKED_ID}"),
        str.strip,
    ),
    FieldPattern(
        "id_colon",
        re.compile(rf"\bID\s*:\s*{_MASKED_ID}"),
        str.strip,
    ),
)

DEGREE_TYPES = ("BS", "BA", "BBA", "BFA", "BM", "BSN", "BIS", "BAS")

PROGRAM_PATTERNS: tuple[FieldPattern, ...] = (
    FieldPattern(
        "degree_in_program",
        re.compile(rf"\b(?:{'|'.join(DEGREE_TYPES)})\s+(?i:in)\s+([A-Za-z&,\- \t]+)"),
        clean_program,
    ),
    FieldPattern(
        "major_colon",
        re.compile(r"\b(?:Major|Program)\s*:[ \t]*([A-Za-z&,\- \t]+)"),
        clean_program,
    ),
)

_DECIMAL = r"(\d+(?:\.\d+)?)"

GPA_PATTERNS: tuple[FieldPattern, ...] = (
    FieldPattern(
        "institution_gpa",
        re.compile(rf"\bGSU\s+GPA\s*:?\s*{_DECIMAL}"),
        to_float,
    ),
    FieldPattern(
        "gpa",
        re.compile(rf"(?:\b(?i:overall|cumulative)\s+)?\bGPA\s*:?\s*{_DECIMAL}"),
        to_float,
    ),
)

GRADUATION_PATTERNS: tuple[FieldPattern, ...] = (
    FieldPattern(
        "expected_graduation",
        re.compile(
            r"(?i:expected\s+graduation(?:\s+date)?)\s*:?\s*"
            r"((?:Spring|Summer|Fall|Winter)\s+\d{4}|\d{1,2}/\d{1,2}/\d{2,4})"
        ),
        clean_text,
    ),
)

FIELD_PATTERNS: dict[str, tuple[FieldPattern, ...]] = {
    "student_name": NAME_PATTERNS,
    "student_id": STUDENT_ID_PATTERNS,
    "degree_program": PROGRAM_PATTERNS,
    "gpa": GPA_PATTERNS,
    "expected_graduation": GRADUATION_PATTERNS,
}


# ============================================================
# Credit summary
# ============================================================

CREDIT_SUMMARY_PATTERN = re.compile(
    r"Credits\s+required\s*:?\s*(\d+)\s+Credits\s+applied\s*:?\s*(\d+)",
    re.IGNORECASE,
)


# ============================================================
# Course requirements
# ============================================================

# "CSC 4320", "PHYS 2211K"
COURSE_CODE = r"\b[A-Z]{2,4}\s+\d{4}[A-Z]?\b"

# An option after "or" may omit the subject: "CSC 4320 or 4330"
COURSE_OPTION = r"(?:\b[A-Z]{2,4}\s+)?\d{4}[A-Z]?\b"

CREDIT_UNIT = r"(?i:credits?|hours?)"

ANNOUNCEMENT = r"(?i:still\s+needed)\s*:?"

CREDIT_SUMMARY_PHRASE = r"(?i:credits\s+(?:required|applied))"

# A course code that is not part of a requirement group (e.g. a course row).
# "in" and "or" match in any case, as in REQUIREMENT_TUPLE.
BARE_COURSE_CODE = rf"(?<!\b(?i:in|or)\s){COURSE_CODE}"

# Credit count, optionally printed as "3.0"
_CREDIT_COUNT = r"(?<![\d.])(\d+)(?:\.0+)?"

REQUIREMENT_TUPLE = re.compile(
    rf"{_CREDIT_COUNT}\s+{CREDIT_UNIT}\s+(?i:in)\s+"
    rf"({COURSE_CODE}(?:\s+(?i:or)\s+{COURSE_OPTION})*)"
)

OPTION_SEPARATOR = re.compile(r"\s+(?i:or)\s+")

NAMED_REQUIREMENT = re.compile(
    rf"([A-Z][A-Za-z&/\-]*(?:[ ][A-Za-z&/\-]+){{0,5}})[\s:]+{ANNOUNCEMENT}\s*"
    rf"{_CREDIT_COUNT}\s+{CREDIT_UNIT}\s+(?i:in)\s+({COURSE_CODE})(?!\s+(?i:or)\b)"
)


def build_segment_pattern(header_phrases: tuple[str, ...]) -> re.Pattern[str]:
    """Pattern whose group 1 is the body of one requirement segment.

    A segment starts after an announcement and runs to the next
    announcement, header phrase, credit-summary phrase, bare course
    code, or the end of the text.
    """
    boundaries = "|".join(
        f"(?:{b})"
        for b in (ANNOUNCEMENT, *header_phrases, CREDIT_SUMMARY_PHRASE, BARE_COURSE_CODE)
    )
    return re.compile(rf"{ANNOUNCEMENT}(.*?)(?={boundaries}|\Z)", re.DOTALL)
