"""
Lookup tables for course enrichment.

Maps canonical course codes to catalog titles and subject prefixes to
category labels. The data lives in a versioned YAML file so catalog
updates do not need a code change; the bundled catalog is loaded once
per process and injected into the course extractor.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import yaml

from degreeaudit.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = Path(__file__).parent / "data" / "catalog.yaml"

DEFAULT_CATEGORY = "Elective"


def normalize_course_code(raw: str) -> str:
    """Canonical form of a course code: single space, uppercase.

    Example:
        >>> normalize_course_code("csc   4320")
        'CSC 4320'
    """
    return re.sub(r"\s+", " ", raw.strip()).upper()


@dataclass(frozen=True)
class LookupTables:
    """Course title and subject category tables.

    Attributes:
        course_titles: Canonical course code -> catalog title.
        subject_categories: Subject prefix -> category label.
        version: Version string of the catalog data.
        default_category: Label for subjects with no entry.
    """

    course_titles: Mapping[str, str] = field(default_factory=dict)
    subject_categories: Mapping[str, str] = field(default_factory=dict)
    version: str = "unversioned"
    default_category: str = DEFAULT_CATEGORY

    def title_for(self, code: str) -> str | None:
        """Catalog title for an exact canonical code, or None."""
        return self.course_titles.get(code)

    def category_for(self, code: str) -> str:
        """Category label for the code's subject prefix."""
        subject = code.split(" ", 1)[0]
        return self.subject_categories.get(subject, self.default_category)

    def with_default_category(self, default_category: str) -> LookupTables:
        """Copy of these tables with another fallback category."""
        if default_category == self.default_category:
            return self
        return LookupTables(
            course_titles=self.course_titles,
            subject_categories=self.subject_categories,
            version=self.version,
            default_category=default_category,
        )

    @classmethod
    def from_yaml(
        cls, path: str | Path, default_category: str = DEFAULT_CATEGORY
    ) -> LookupTables:
        """Load tables from a catalog YAML file.

        Args:
            path: File with ``version``, ``course_titles`` and
                ``subject_categories`` keys.
            default_category: Label for unrecognized subjects.

        Returns:
            LookupTables with course codes normalized.

        Raises:
            ConfigurationError: If the file is missing or malformed.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load lookup tables from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Lookup file {path} must contain a mapping")

        titles = data.get("course_titles") or {}
        categories = data.get("subject_categories") or {}
        if not isinstance(titles, dict) or not isinstance(categories, dict):
            raise ConfigurationError(
                f"Lookup file {path}: course_titles and subject_categories must be mappings"
            )

        tables = cls(
            course_titles={normalize_course_code(str(k)): str(v) for k, v in titles.items()},
            subject_categories={str(k).upper(): str(v) for k, v in categories.items()},
            version=str(data.get("version", "unversioned")),
            default_category=default_category,
        )
        logger.info(
            "Loaded %d course titles and %d subject categories from %s (version %s)",
            len(tables.course_titles),
            len(tables.subject_categories),
            path,
            tables.version,
        )
        return tables


@lru_cache(maxsize=1)
def default_tables() -> LookupTables:
    """Bundled catalog, loaded once per process."""
    return LookupTables.from_yaml(BUNDLED_CATALOG)
