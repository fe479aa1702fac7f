"""
Outstanding course requirement extraction.

The audit announces unmet requirements as "Still needed:" followed by
one or more "<n> Credits in <course> [or <course> ...]" groups. The
extractor works in passes:

1. Segment discovery: split out the text after every announcement.
2. Tuple extraction: (credits, codes) groups inside each segment.
3. Expansion: one course per code; codes after the first are
   alternatives and get a title suffix. Titles and categories come
   from the injected lookup tables.
4. Named requirements: "<label> Still needed: <n> Credits in <code>"
   over the whole text, single code only.
5. Deduplication by course code, first occurrence wins.
6. Ordering: credits descending, then course code.

Nothing here raises on text input; unmatched text contributes nothing.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from degreeaudit.config import ParserConfig
from degreeaudit.extractors.patterns import (
    NAMED_REQUIREMENT,
    OPTION_SEPARATOR,
    REQUIREMENT_TUPLE,
    build_segment_pattern,
    to_int,
)
from degreeaudit.lookups import LookupTables, default_tables, normalize_course_code
from degreeaudit.models import RequiredCourse

logger = logging.getLogger(__name__)

_BARE_NUMBER = re.compile(r"^\d{4}[A-Z]?$")


@dataclass(frozen=True)
class RequirementTuple:
    """One "<n> Credits in A or B" group. codes[0] is the primary option."""

    credits: int
    codes: tuple[str, ...]


@dataclass
class RequirementResult:
    """Result of course requirement extraction."""

    courses: list[RequiredCourse]
    segments: list[str] = field(default_factory=list)
    processing_log: list[str] = field(default_factory=list)


def collapse_whitespace(text: str) -> str:
    """Single spaces within lines, bare newlines between them."""
    text = re.sub(r"[ \t\r\f\v]+", " ", text)
    return re.sub(r" ?\n[\s]*", "\n", text)


def split_options(group: str) -> tuple[str, ...]:
    """Split "CSC 4320 or 4330" into canonical codes.

    An option given as a bare number inherits the subject of the
    option before it.
    """
    codes: list[str] = []
    subject = ""
    for option in OPTION_SEPARATOR.split(group.strip()):
        option = normalize_course_code(option)
        if _BARE_NUMBER.match(option):
            if not subject:
                continue
            option = f"{subject} {option}"
        else:
            subject = option.split(" ", 1)[0]
        codes.append(option)
    return tuple(codes)


class CourseRequirementExtractor:
    """Extracts the ordered list of outstanding course requirements.

    Usage:
        extractor = CourseRequirementExtractor()
        for course in extractor.extract(text):
            print(course.course_code, course.credits)

    Custom catalog:
        tables = LookupTables.from_yaml("catalog-2026.yaml")
        extractor = CourseRequirementExtractor(tables)
    """

    name = "course_requirements"

    def __init__(
        self,
        tables: LookupTables | None = None,
        *,
        config: ParserConfig | None = None,
    ):
        """Initialize the extractor.

        Args:
            tables: Title and category lookup tables. Defaults to
                config.lookup_path when set, otherwise the bundled catalog.
            config: Parser configuration (default: ParserConfig()).

        Raises:
            ConfigurationError: If config.lookup_path cannot be loaded.
        """
        self.config = config or ParserConfig()
        if tables is None and self.config.lookup_path is not None:
            tables = LookupTables.from_yaml(
                self.config.lookup_path, default_category=self.config.default_category
            )
        tables = tables or default_tables()
        self.tables = tables.with_default_category(self.config.default_category)
        self.segment_pattern = build_segment_pattern(self.config.header_phrases)

    def extract(self, text: str) -> list[RequiredCourse]:
        """Outstanding courses, deduplicated and ordered."""
        return self.extract_with_log(text).courses

    def extract_with_log(self, text: str) -> RequirementResult:
        """Run every pass and keep a processing log."""
        log: list[str] = []
        text = collapse_whitespace(text)

        # Passes 1-3: announced segments
        segments = self.find_segments(text)
        log.append(f"Found {len(segments)} requirement segments")

        courses: list[RequiredCourse] = []
        for segment in segments:
            for requirement in self.extract_tuples(segment):
                courses.extend(self.expand(requirement))
        log.append(f"Expanded {len(courses)} courses from segments")

        # Pass 4: labelled single-course requirements
        named = self.extract_named(text)
        if named:
            log.append(f"Found {len(named)} named requirements")
        courses.extend(named)

        # Passes 5-6
        unique = self.deduplicate(courses)
        if len(unique) < len(courses):
            log.append(f"Dropped {len(courses) - len(unique)} duplicate courses")

        ordered = self.order(unique)
        log.append(f"Extracted {len(ordered)} required courses")
        for line in log:
            logger.debug(line)

        return RequirementResult(courses=ordered, segments=segments, processing_log=log)

    def find_segments(self, text: str) -> list[str]:
        """Bodies of all requirement announcements, in document order."""
        return [m.group(1) for m in self.segment_pattern.finditer(text)]

    def extract_tuples(self, segment: str) -> list[RequirementTuple]:
        """All (credits, codes) groups in a segment."""
        requirements = []
        for match in REQUIREMENT_TUPLE.finditer(segment):
            credits = to_int(match.group(1))
            if not credits or credits <= 0:
                logger.debug("Skipping requirement without credits: %r", match.group(0))
                continue
            codes = split_options(match.group(2))
            if codes:
                requirements.append(RequirementTuple(credits=credits, codes=codes))
        return requirements

    def expand(self, requirement: RequirementTuple) -> list[RequiredCourse]:
        """One enriched course per option; options after the first are alternatives."""
        return [
            self.make_course(code, requirement.credits, alternative=index > 0)
            for index, code in enumerate(requirement.codes)
        ]

    def make_course(
        self, code: str, credits: int, *, alternative: bool = False
    ) -> RequiredCourse:
        """Build a RequiredCourse with title and category from the lookup tables."""
        code = normalize_course_code(code)
        title = self.tables.title_for(code) or self.config.placeholder_title.format(code=code)
        if alternative:
            title += self.config.alternative_suffix
        return RequiredCourse(
            course_code=code,
            course_title=title,
            credits=credits,
            category=self.tables.category_for(code),
        )

    def extract_named(self, text: str) -> list[RequiredCourse]:
        """Labelled requirements naming exactly one course, over the whole text."""
        courses = []
        for match in NAMED_REQUIREMENT.finditer(text):
            credits = to_int(match.group(2))
            if not credits or credits <= 0:
                continue
            logger.debug("Named requirement %r: %s", match.group(1).strip(), match.group(3))
            courses.append(self.make_course(match.group(3), credits))
        return courses

    @staticmethod
    def deduplicate(courses: Iterable[RequiredCourse]) -> list[RequiredCourse]:
        """Keep the first course seen for each course code."""
        seen: dict[str, RequiredCourse] = {}
        for course in courses:
            seen.setdefault(course.course_code, course)
        return list(seen.values())

    @staticmethod
    def order(courses: Iterable[RequiredCourse]) -> list[RequiredCourse]:
        """Credits descending, ties by course code ascending."""
        return sorted(courses, key=lambda c: (-c.credits, c.course_code))


def extract_required_courses(
    text: str, tables: LookupTables | None = None
) -> list[RequiredCourse]:
    """Convenience function for course requirement extraction.

    Args:
        text: Full audit text.
        tables: Lookup tables (default: bundled catalog).

    Returns:
        Ordered list of outstanding courses.
    """
    return CourseRequirementExtractor(tables).extract(text)
