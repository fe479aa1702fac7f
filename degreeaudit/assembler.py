"""
Evaluation assembly.

Runs the extractors over one text and merges their output into a
single frozen AcademicEvaluation stamped with the capture time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from degreeaudit.config import ParserConfig
from degreeaudit.extractors.courses import CourseRequirementExtractor
from degreeaudit.extractors.credits import CreditSummary, CreditSummaryExtractor
from degreeaudit.extractors.fields import ExtractedFields, FieldExtractor
from degreeaudit.lookups import LookupTables
from degreeaudit.models import AcademicEvaluation, RequiredCourse

logger = logging.getLogger(__name__)


@dataclass
class AssemblyContext:
    """Context accumulated while assembling one evaluation."""

    text: str
    processing_log: list[str] = field(default_factory=list)

    fields: ExtractedFields = field(default_factory=ExtractedFields)
    credits: CreditSummary = field(default_factory=CreditSummary)
    courses: list[RequiredCourse] = field(default_factory=list)


class EvaluationAssembler:
    """
    Builds an AcademicEvaluation from audit text.

    The scalar and credit extractors are independent; course
    extraction runs last. No validation happens here beyond what each
    extractor guarantees.

    Usage:
        assembler = EvaluationAssembler()
        evaluation = assembler.assemble(text)
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        *,
        tables: LookupTables | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the assembler.

        Args:
            config: Parser configuration (uses defaults if None).
            tables: Lookup tables. Defaults to config.lookup_path when
                set, otherwise the bundled catalog.
            clock: Source of the capture timestamp.
        """
        self.config = config or ParserConfig()
        self.field_extractor = FieldExtractor()
        self.credit_extractor = CreditSummaryExtractor()
        self.course_extractor = CourseRequirementExtractor(tables, config=self.config)
        self.clock = clock

    def assemble(self, text: str) -> AcademicEvaluation:
        """Parse audit text into an evaluation."""
        evaluation, _ = self.assemble_with_log(text)
        return evaluation

    def assemble_with_log(self, text: str) -> tuple[AcademicEvaluation, list[str]]:
        """Parse audit text and return the processing log alongside."""
        ctx = AssemblyContext(text=text)
        ctx.processing_log.append(f"Assembling evaluation from {len(text)} chars")

        # Step 1: Scalar fields
        ctx.fields = self.field_extractor.extract(text)
        found = [name for name, value in vars(ctx.fields).items() if value is not None]
        ctx.processing_log.append(f"Fields found: {', '.join(found) or 'none'}")

        # Step 2: Credit summary
        ctx.credits = self.credit_extractor.extract(text)
        if ctx.credits.found:
            ctx.processing_log.append(
                f"Credits: {ctx.credits.required} required, {ctx.credits.applied} applied"
            )
        else:
            ctx.processing_log.append("No credit summary found")

        # Step 3: Outstanding courses
        result = self.course_extractor.extract_with_log(text)
        ctx.courses = result.courses
        ctx.processing_log.extend(result.processing_log)

        evaluation = self._build(ctx)
        logger.debug(
            "Assembled evaluation: %d courses, %d credits remaining",
            len(evaluation.required_courses),
            evaluation.credits_remaining,
        )
        return evaluation, ctx.processing_log

    def _build(self, ctx: AssemblyContext) -> AcademicEvaluation:
        return AcademicEvaluation(
            student_name=ctx.fields.student_name,
            student_id=ctx.fields.student_id,
            degree_program=ctx.fields.degree_program,
            gpa=ctx.fields.gpa,
            expected_graduation=ctx.fields.expected_graduation,
            total_credits_required=ctx.credits.total_required,
            credits_completed=ctx.credits.completed,
            credits_remaining=ctx.credits.remaining,
            required_courses=tuple(ctx.courses),
            last_updated=self.clock(),
        )
