"""
Configuration for degree-audit parsing.

All options have sensible defaults; the defaults reproduce the
behaviour expected for the standard audit layout.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from degreeaudit.exceptions import ConfigurationError

# Headings that open a new requirement block in the audit.
# Regex fragments, matched case-sensitively.
DEFAULT_HEADER_PHRASES: tuple[str, ...] = (
    r"[A-Z][A-Za-z]*\s+Requirements\b",
    r"Core\s+Curriculum\b",
    r"Fallthrough\s+Courses\b",
    r"Insufficient\b",
    r"In-progress\b",
    r"Not\s+Counted\b",
)


@dataclass
class ParserConfig:
    """
    Configuration for parsing a degree audit.

    Example:
        >>> config = ParserConfig(
        ...     lookup_path=Path("catalog-2026.yaml"),
        ...     on_extraction_error="raise",
        ... )
        >>> result = degreeaudit.parse_document("audit.pdf", config)
    """

    # Lookup data (None = bundled catalog)
    lookup_path: Path | None = None
    default_category: str = "Elective"

    # Course enrichment
    alternative_suffix: str = " (Alternative)"
    placeholder_title: str = "Course {code}"

    # Segment boundaries
    header_phrases: tuple[str, ...] = DEFAULT_HEADER_PHRASES

    # Error handling for the document-reading step
    on_extraction_error: Literal["raise", "warn"] = "warn"

    def __post_init__(self):
        """Validate configuration."""
        valid_error_modes = ("raise", "warn")
        if self.on_extraction_error not in valid_error_modes:
            raise ConfigurationError(
                f"on_extraction_error must be one of {valid_error_modes}, "
                f"got {self.on_extraction_error!r}"
            )

        if "{code}" not in self.placeholder_title:
            raise ConfigurationError(
                f"placeholder_title must contain '{{code}}', got {self.placeholder_title!r}"
            )

        if not self.default_category.strip():
            raise ConfigurationError("default_category must not be empty")

        if self.lookup_path is not None:
            self.lookup_path = Path(self.lookup_path)

        self.header_phrases = tuple(self.header_phrases)
