"""
Parsing entry points.

This module wires the text-extraction collaborator (PDFReader) to the
EvaluationAssembler:
- parse_text(): audit text -> AcademicEvaluation (pure, never raises)
- parse_document(): audit file -> ParseResult
- parse_batch(): several files, yielding results as they complete
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from degreeaudit.assembler import EvaluationAssembler
from degreeaudit.config import ParserConfig
from degreeaudit.exceptions import ExtractionError, UnsupportedFormatError
from degreeaudit.models import AcademicEvaluation, ParseResult
from degreeaudit.readers.pdf_reader import PDFReader

logger = logging.getLogger(__name__)

_EXTENSION_FORMATS = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".doc": "doc",
    ".html": "html",
    ".htm": "html",
    ".txt": "text",
}
_PDF_MAGIC = b"%PDF"


def parse_text(text: str, config: ParserConfig | None = None) -> AcademicEvaluation:
    """
    Parse the flattened text of a degree audit.

    Args:
        text: All pages' text, in page order
        config: Parser configuration (uses defaults if None)

    Returns:
        AcademicEvaluation; fields that were not found are None or 0

    Example:
        >>> evaluation = parse_text("Credits required: 120 Credits applied: 55")
        >>> evaluation.credits_remaining
        65
    """
    return EvaluationAssembler(config).assemble(text)


def parse_document(
    source: str | Path,
    config: ParserConfig | None = None,
) -> ParseResult:
    """
    Parse a degree-audit document.

    Args:
        source: Path to the audit file
        config: Parser configuration (uses defaults if None)

    Returns:
        ParseResult with the evaluation, or success=False and the error
        when the document could not be read

    Raises:
        FileNotFoundError: If source doesn't exist
        UnsupportedFormatError: If format not supported
        ExtractionError: If reading fails (when on_extraction_error="raise")
    """
    source = Path(source)
    config = config or ParserConfig()

    if not source.exists():
        raise FileNotFoundError(f"Source file not found: {source}")

    fmt = detect_format(source)
    if fmt not in supported_formats():
        raise UnsupportedFormatError(
            f"Format '{fmt}' is not supported. Supported: {', '.join(supported_formats())}"
        )

    try:
        raw_doc = PDFReader().read(source)
    except Exception as e:
        if config.on_extraction_error == "raise":
            raise ExtractionError(f"Failed to read {source}: {e}") from e
        logger.warning("Extraction error for %s: %s", source, e)
        return ParseResult(
            success=False,
            error=str(e),
            processing_log=[f"Extraction failed: {e}"],
        )

    log = [f"Read {raw_doc.page_count} pages from {source.name}"]
    if raw_doc.is_empty:
        logger.warning("No text found in %s; the audit may be a scanned image", source)
        log.append("No text layer found")

    evaluation, assembly_log = EvaluationAssembler(config).assemble_with_log(raw_doc.text)
    log.extend(assembly_log)
    return ParseResult(success=True, data=evaluation, processing_log=log)


def parse_batch(
    sources: list[str | Path],
    config: ParserConfig | None = None,
) -> Iterator[tuple[Path, ParseResult | Exception]]:
    """
    Parse multiple documents, yielding results as completed.

    Args:
        sources: Paths to audit files
        config: Parser configuration

    Yields:
        (path, result) tuples where result is ParseResult or the Exception raised
    """
    config = config or ParserConfig()

    for source in sources:
        source = Path(source)
        try:
            yield (source, parse_document(source, config))
        except Exception as e:
            logger.warning("Failed to parse %s: %s", source, e)
            yield (source, e)


def detect_format(path: str | Path) -> str:
    """
    Detect the audit's format from its extension, then its leading bytes.

    Audit exports sometimes arrive without an extension, so a file whose
    first bytes are a PDF header is treated as a PDF.

    Args:
        path: Path to the audit file

    Returns:
        Format string: "pdf", "docx", "html", "text", ...

    Raises:
        UnsupportedFormatError: If the format cannot be detected
    """
    path = Path(path)

    fmt = _EXTENSION_FORMATS.get(path.suffix.lower())
    if fmt is not None:
        return fmt

    if _has_pdf_header(path):
        return "pdf"

    raise UnsupportedFormatError(f"Cannot detect format for: {path}")


def supported_formats() -> list[str]:
    """Return list of currently supported input formats."""
    return ["pdf"]


def _has_pdf_header(path: Path) -> bool:
    try:
        with open(path, "rb") as f:
            return f.read(len(_PDF_MAGIC)) == _PDF_MAGIC
    except OSError:
        return False
