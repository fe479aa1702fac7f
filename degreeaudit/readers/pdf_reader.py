"""
PDF Reader using PyMuPDF (fitz).

Recovers the plain text of a degree-audit PDF, page by page. The
extraction core only ever sees the flattened text (RawDocument.text);
layout is not analysed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import fitz  # PyMuPDF

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class PageData:
    """Raw text extracted from a single PDF page."""

    index: int  # 0-based page index
    label: str  # Page label as printed, falls back to the 1-based number
    text: str


@dataclass
class RawDocument:
    """Text recovered from an audit PDF, before any extraction."""

    source_path: Path
    page_count: int
    pages: list[PageData]
    metadata: dict[str, str | None]

    _text_cache: str | None = field(default=None, repr=False)

    @property
    def text(self) -> str:
        """All page text in page order, one newline between pages (cached)."""
        if self._text_cache is None:
            self._text_cache = "\n".join(page.text for page in self.pages)
        return self._text_cache

    @property
    def is_empty(self) -> bool:
        """True when no page produced any text (e.g. a scanned audit)."""
        return not any(page.text.strip() for page in self.pages)


class PDFReader:
    """Extracts page text from PDFs using PyMuPDF.

    Usage:
        reader = PDFReader()
        raw = reader.read("/path/to/audit.pdf")
        text = raw.text
    """

    def __init__(self, *, sort_blocks: bool = True):
        """Initialize the PDF reader.

        Args:
            sort_blocks: Reorder text blocks top-to-bottom, left-to-right
                instead of using the PDF's content-stream order.
        """
        self.sort_blocks = sort_blocks

    def read(self, path: str | Path) -> RawDocument:
        """Read a PDF file and extract its text.

        Args:
            path: Path to PDF file.

        Returns:
            RawDocument with per-page text and metadata.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If file is not a valid PDF.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {path}")

        try:
            doc = fitz.open(path)
        except Exception as e:
            raise ValueError(f"Failed to open PDF: {e}") from e

        try:
            pages = list(self._extract_pages(doc))
            return RawDocument(
                source_path=path,
                page_count=len(doc),
                pages=pages,
                metadata=self._extract_metadata(doc),
            )
        finally:
            doc.close()

    def _extract_pages(self, doc: fitz.Document) -> Iterator[PageData]:
        """Extract text from each page."""
        for page_idx in range(len(doc)):
            page = doc[page_idx]
            yield PageData(
                index=page_idx,
                label=page.get_label() or str(page_idx + 1),
                text=page.get_text("text", sort=self.sort_blocks).strip(),
            )

    def _extract_metadata(self, doc: fitz.Document) -> dict[str, str | None]:
        """Extract PDF metadata."""
        meta = doc.metadata or {}
        return {
            "title": meta.get("title") or None,
            "author": meta.get("author") or None,
            "creator": meta.get("creator") or None,
            "producer": meta.get("producer") or None,
            "creation_date": meta.get("creationDate") or None,
        }
