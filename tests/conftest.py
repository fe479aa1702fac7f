"""
Pytest configuration and fixtures for degreeaudit tests.
"""

from datetime import datetime
from pathlib import Path

import fitz
import pytest

SAMPLE_AUDIT = """\
Student View
Student name Doe, Jane Student ID ****1234
Degree Bachelor of Science
BS in Computer Science INCOMPLETE
Catalog year 2022-2023
GSU GPA 3.50
Expected graduation Spring 2026
Degree in Bachelor of Science
Credits required: 120 Credits applied: 55
Core Curriculum
Area A Essential Skills
ENGL 1101 English Composition I A 3 Fall 2022
Still needed: 3 Credits in MATH 1113 or MATH 2211
Major Requirements
Still needed: 4 Credits in CSC 4320 or 4330
Still needed: 4 Credits in CSC 4520 and 3 Credits in CSC 4350
Senior Capstone Still needed: 3 Credits in CSC 4980
Still needed: 3 Credits in PSYC 1101
Electives
Still needed: 3 Credits in MATH 2211 or ARTS 1010
Fallthrough Courses
CSC 1301 Principles of Computer Science I A 4 Fall 2022
"""


@pytest.fixture(scope="session")
def sample_audit_text() -> str:
    """Flattened text of a typical degree audit."""
    return SAMPLE_AUDIT


@pytest.fixture
def fixed_clock():
    """Clock returning a constant timestamp."""
    stamp = datetime(2026, 1, 15, 9, 30)
    return lambda: stamp


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a PDF with one list of text lines per page."""

    def _make(pages: list[list[str]], name: str = "audit.pdf") -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for lines in pages:
            page = doc.new_page()
            y = 72
            for line in lines:
                page.insert_text((72, y), line, fontsize=10)
                y += 14
        doc.save(path)
        doc.close()
        return path

    return _make
