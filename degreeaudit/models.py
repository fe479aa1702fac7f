"""
Data models for degreeaudit.

These models represent the output of parsing a degree audit.
Records are frozen value objects: a re-parse replaces them wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class RequiredCourse:
    """One outstanding course requirement."""

    course_code: str  # Canonical "<SUBJECT> <NUMBER>", e.g. "CSC 4320"
    course_title: str
    credits: int
    category: str

    @property
    def subject(self) -> str:
        """Subject prefix of the course code."""
        return self.course_code.split(" ", 1)[0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "course_code": self.course_code,
            "course_title": self.course_title,
            "credits": self.credits,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RequiredCourse:
        return cls(
            course_code=data["course_code"],
            course_title=data["course_title"],
            credits=int(data["credits"]),
            category=data["category"],
        )


@dataclass(frozen=True)
class AcademicEvaluation:
    """
    The assembled academic-progress record.

    Scalar identity fields are None when no pattern matched. Credit
    figures collapse "not found" to 0; ``credits_remaining`` is always
    derived from the other two and may be negative for a malformed audit.

    ``required_courses`` is already in its final order (credits
    descending, then course code) and holds one entry per course code.

    Example:
        >>> evaluation = degreeaudit.parse_text(text)
        >>> print(evaluation.credits_remaining)
        >>> for course in evaluation.required_courses:
        ...     print(course.course_code, course.course_title)
    """

    total_credits_required: int = 0
    credits_completed: int = 0
    credits_remaining: int = 0
    required_courses: tuple[RequiredCourse, ...] = ()

    student_name: str | None = None
    student_id: str | None = None  # Masked form, as printed
    degree_program: str | None = None
    gpa: float | None = None
    expected_graduation: str | None = None

    last_updated: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation; the timestamp is ISO-8601.
        """
        return {
            "student_name": self.student_name,
            "student_id": self.student_id,
            "degree_program": self.degree_program,
            "total_credits_required": self.total_credits_required,
            "credits_completed": self.credits_completed,
            "credits_remaining": self.credits_remaining,
            "required_courses": [c.to_dict() for c in self.required_courses],
            "gpa": self.gpa,
            "expected_graduation": self.expected_graduation,
            "last_updated": self.last_updated.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AcademicEvaluation:
        """
        Rebuild an evaluation from ``to_dict()`` output.

        Args:
            data: Dictionary as produced by to_dict()

        Returns:
            An equal AcademicEvaluation, with the timestamp as a datetime
        """
        gpa = data.get("gpa")
        return cls(
            student_name=data.get("student_name"),
            student_id=data.get("student_id"),
            degree_program=data.get("degree_program"),
            total_credits_required=int(data.get("total_credits_required", 0)),
            credits_completed=int(data.get("credits_completed", 0)),
            credits_remaining=int(data.get("credits_remaining", 0)),
            required_courses=tuple(
                RequiredCourse.from_dict(c) for c in data.get("required_courses", [])
            ),
            gpa=float(gpa) if gpa is not None else None,
            expected_graduation=data.get("expected_graduation"),
            last_updated=datetime.fromisoformat(data["last_updated"]),
        )


@dataclass(frozen=True)
class StoredEvaluationData:
    """An evaluation as kept by the persistence layer."""

    evaluation: AcademicEvaluation | None
    uploaded_at: datetime | None
    file_name: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "evaluation": self.evaluation.to_dict() if self.evaluation else None,
            "uploaded_at": self.uploaded_at.isoformat() if self.uploaded_at else None,
            "file_name": self.file_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoredEvaluationData:
        evaluation = data.get("evaluation")
        uploaded_at = data.get("uploaded_at")
        return cls(
            evaluation=AcademicEvaluation.from_dict(evaluation) if evaluation else None,
            uploaded_at=datetime.fromisoformat(uploaded_at) if uploaded_at else None,
            file_name=data.get("file_name"),
        )


@dataclass
class ParseResult:
    """
    Outcome of parsing a document.

    On success ``data`` holds the evaluation; on failure ``error`` holds
    the reason the document could not be read.
    """

    success: bool
    data: AcademicEvaluation | None = None
    error: str | None = None
    processing_log: list[str] = field(default_factory=list)
