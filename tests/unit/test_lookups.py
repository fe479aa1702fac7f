"""
Unit tests for course lookup tables.
"""

import pytest

from degreeaudit import ConfigurationError, LookupTables, default_tables, normalize_course_code


class TestNormalizeCourseCode:
    """Test canonical course code form."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("CSC 4320", "CSC 4320"),
            ("csc 4320", "CSC 4320"),
            ("CSC   4320", "CSC 4320"),
            ("  PHYS\t2211k ", "PHYS 2211K"),
            ("MATH\n2211", "MATH 2211"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_course_code(raw) == expected


class TestBundledCatalog:
    """Test the bundled catalog data."""

    def test_known_titles(self):
        """Bundled catalog resolves common course titles."""
        tables = default_tables()
        assert tables.title_for("CSC 4320") == "Operating Systems"
        assert tables.title_for("CSC 4330") == "Programming Language Concepts"

    def test_unknown_title(self):
        assert default_tables().title_for("ZZZ 9999") is None

    def test_loaded_once(self):
        """Bundled catalog is cached for the process."""
        assert default_tables() is default_tables()

    def test_has_version(self):
        assert default_tables().version != "unversioned"


class TestLookupTables:
    """Test lookup behaviour."""

    def test_category_by_subject(self):
        tables = LookupTables(subject_categories={"CSC": "Major"})
        assert tables.category_for("CSC 4320") == "Major"

    def test_category_fallback(self):
        """Unknown subjects get the default category."""
        tables = LookupTables(subject_categories={"CSC": "Major"})
        assert tables.category_for("ARTS 1010") == "Elective"

    def test_title_exact_match_only(self):
        tables = LookupTables(course_titles={"CSC 4320": "Operating Systems"})
        assert tables.title_for("CSC 4320") == "Operating Systems"
        assert tables.title_for("CSC 4320L") is None

    def test_with_default_category(self):
        tables = LookupTables(subject_categories={"CSC": "Major"})
        general = tables.with_default_category("General")
        assert general.category_for("ARTS 1010") == "General"
        assert general.category_for("CSC 1301") == "Major"
        assert tables.with_default_category("Elective") is tables


class TestFromYaml:
    """Test loading tables from YAML files."""

    def test_load_custom_file(self, tmp_path):
        """Keys are normalized on load."""
        path = tmp_path / "catalog.yaml"
        path.write_text(
            'version: "2026.2"\n'
            "course_titles:\n"
            "  csc  4320: Operating Systems\n"
            "subject_categories:\n"
            "  csc: Computer Science\n"
        )
        tables = LookupTables.from_yaml(path)

        assert tables.version == "2026.2"
        assert tables.title_for("CSC 4320") == "Operating Systems"
        assert tables.category_for("CSC 4320") == "Computer Science"

    def test_missing_sections_are_empty(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("version: '1'\n")
        tables = LookupTables.from_yaml(path)
        assert tables.course_titles == {}
        assert tables.category_for("CSC 4320") == "Elective"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to load"):
            LookupTables.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("course_titles: [unclosed\n")
        with pytest.raises(ConfigurationError):
            LookupTables.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("- CSC 4320\n- CSC 4330\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            LookupTables.from_yaml(path)

    def test_sections_must_be_mappings(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("course_titles:\n  - CSC 4320\n")
        with pytest.raises(ConfigurationError, match="must be mappings"):
            LookupTables.from_yaml(path)
