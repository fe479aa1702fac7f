"""Document reading module (PyMuPDF)."""

from degreeaudit.readers.pdf_reader import PageData, PDFReader, RawDocument

__all__ = [
    "PDFReader",
    "RawDocument",
    "PageData",
]
