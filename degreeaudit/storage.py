"""
JSON-file persistence for parsed evaluations.

The store keeps one evaluation under a fixed key, together with the
upload time and source file name. Timestamps are written as ISO-8601
and converted back to datetime on load.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from degreeaudit.models import AcademicEvaluation, StoredEvaluationData

logger = logging.getLogger(__name__)

EVALUATION_KEY = "evaluationData"


class EvaluationStore:
    """Stores the latest evaluation in a JSON file.

    Usage:
        store = EvaluationStore(Path("~/.degreeaudit/store.json").expanduser())
        store.save(evaluation, "audit.pdf")
        stored = store.load()
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def save(self, evaluation: AcademicEvaluation, file_name: str) -> StoredEvaluationData:
        """
        Save an evaluation, replacing any stored one.

        Args:
            evaluation: Evaluation to persist.
            file_name: Name of the document it was parsed from.

        Returns:
            The stored record.

        Raises:
            OSError: If the file cannot be written.
        """
        data = StoredEvaluationData(
            evaluation=evaluation,
            uploaded_at=datetime.now(),
            file_name=file_name,
        )

        try:
            contents = self._read_all(strict=True)
        except (ValueError, OSError) as e:
            logger.warning("Replacing unreadable store file %s: %s", self.path, e)
            contents = {}
        contents[EVALUATION_KEY] = data.to_dict()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(contents, f, indent=2)
        except OSError as e:
            logger.error("Failed to save evaluation: %s", e)
            raise

        logger.info(
            "Saved evaluation from %s (%d courses) to %s",
            file_name,
            len(evaluation.required_courses),
            self.path,
        )
        return data

    def load(self) -> StoredEvaluationData | None:
        """Load the stored evaluation, or None if nothing is stored."""
        data = self._read_all().get(EVALUATION_KEY)
        if not data:
            return None

        try:
            return StoredEvaluationData.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Stored evaluation in %s is unreadable: %s", self.path, e)
            return None

    def clear(self) -> None:
        """Remove the stored evaluation."""
        contents = self._read_all()
        if contents.pop(EVALUATION_KEY, None) is None:
            return

        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(contents, f, indent=2)
        logger.info("Cleared stored evaluation in %s", self.path)

    def has_evaluation(self) -> bool:
        """Whether an evaluation is stored."""
        stored = self.load()
        return stored is not None and stored.evaluation is not None

    def _read_all(self, *, strict: bool = False) -> dict:
        """Contents of the store file; {} when missing.

        An unreadable file also reads as {} unless strict is set, in which
        case the error propagates.
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                contents = json.load(f)
            if not isinstance(contents, dict):
                raise ValueError(f"expected a JSON object, got {type(contents).__name__}")
        except (ValueError, OSError) as e:
            if strict:
                raise
            logger.warning("Failed to read %s: %s", self.path, e)
            return {}

        return contents
