"""
Unit tests for JSON-file persistence of evaluations.
"""

import json
import logging
from datetime import datetime

import pytest

from degreeaudit import AcademicEvaluation, EvaluationStore, RequiredCourse
from degreeaudit.storage import EVALUATION_KEY


@pytest.fixture
def store(tmp_path) -> EvaluationStore:
    return EvaluationStore(tmp_path / "state" / "store.json")


@pytest.fixture
def evaluation() -> AcademicEvaluation:
    return AcademicEvaluation(
        student_name="Doe, Jane",
        total_credits_required=120,
        credits_completed=55,
        credits_remaining=65,
        required_courses=(RequiredCourse("CSC 4320", "Operating Systems", 4, "Major"),),
        gpa=3.5,
        last_updated=datetime(2026, 1, 15, 9, 30),
    )


class TestEvaluationStore:
    """Test save/load/clear."""

    def test_load_without_file(self, store):
        assert store.load() is None
        assert not store.has_evaluation()

    def test_save_and_load(self, store, evaluation):
        saved = store.save(evaluation, "audit.pdf")
        loaded = store.load()

        assert loaded == saved
        assert loaded.evaluation == evaluation
        assert loaded.file_name == "audit.pdf"
        assert isinstance(loaded.uploaded_at, datetime)
        assert isinstance(loaded.evaluation.last_updated, datetime)
        assert store.has_evaluation()

    def test_save_creates_parent_directory(self, store, evaluation):
        store.save(evaluation, "audit.pdf")
        assert store.path.exists()

    def test_file_layout(self, store, evaluation):
        store.save(evaluation, "audit.pdf")
        data = json.loads(store.path.read_text())
        assert data[EVALUATION_KEY]["file_name"] == "audit.pdf"
        assert data[EVALUATION_KEY]["evaluation"]["last_updated"] == "2026-01-15T09:30:00"

    def test_save_replaces_previous(self, store, evaluation):
        store.save(evaluation, "old.pdf")
        store.save(evaluation, "new.pdf")
        assert store.load().file_name == "new.pdf"

    def test_save_keeps_other_keys(self, store, evaluation):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"preferences": {"morning": True}}))
        store.save(evaluation, "audit.pdf")
        data = json.loads(store.path.read_text())
        assert data["preferences"] == {"morning": True}

    def test_clear(self, store, evaluation):
        store.save(evaluation, "audit.pdf")
        store.clear()
        assert store.load() is None
        assert not store.has_evaluation()

    def test_clear_without_data(self, store):
        store.clear()
        assert not store.path.exists()

    def test_corrupt_file(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        assert store.load() is None

    @pytest.mark.parametrize("contents", ["{not json", "[1, 2]"])
    def test_save_over_unreadable_file(self, store, evaluation, caplog, contents):
        """Replacing an unreadable file is logged, then the save goes through."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text(contents)

        with caplog.at_level(logging.WARNING, logger="degreeaudit.storage"):
            store.save(evaluation, "audit.pdf")

        assert "Replacing unreadable store file" in caplog.text
        assert store.load().evaluation == evaluation

    def test_save_over_readable_file_is_quiet(self, store, evaluation, caplog):
        store.save(evaluation, "old.pdf")
        with caplog.at_level(logging.WARNING, logger="degreeaudit.storage"):
            store.save(evaluation, "new.pdf")
        assert "Replacing unreadable" not in caplog.text

    def test_unreadable_record(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({EVALUATION_KEY: {"evaluation": {"gpa": 3.0}}}))
        assert store.load() is None
