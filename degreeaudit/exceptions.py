"""
Exception classes for degreeaudit.

All degreeaudit exceptions inherit from DegreeAuditError,
making it easy to catch all library errors.

The extraction core itself never raises: a field that cannot be found
is reported as absent. These exceptions come from the surrounding
collaborators (reading documents, loading lookup data, configuration).

Example:
    >>> try:
    ...     result = degreeaudit.parse_document("audit.docx")
    ... except degreeaudit.UnsupportedFormatError as e:
    ...     print(f"Format not supported: {e}")
    ... except degreeaudit.DegreeAuditError as e:
    ...     print(f"degreeaudit error: {e}")
"""


class DegreeAuditError(Exception):
    """
    Base exception for all degreeaudit errors.

    Catch this to handle any degreeaudit-specific error.
    """

    pass


class UnsupportedFormatError(DegreeAuditError):
    """
    Raised when document format is not supported.

    Example:
        >>> degreeaudit.parse_document("audit.docx")
        UnsupportedFormatError: Format 'docx' is not supported. Supported: pdf
    """

    pass


class ExtractionError(DegreeAuditError):
    """
    Raised when text cannot be extracted from a document.

    This is only raised when config.on_extraction_error == "raise".
    Otherwise, the failure is logged and returned as a failed ParseResult.
    """

    pass


class ConfigurationError(DegreeAuditError):
    """
    Raised for invalid configuration or unreadable lookup data.

    Example:
        >>> ParserConfig(on_extraction_error="ignore")
        ConfigurationError: on_extraction_error must be one of ('raise', 'warn')
    """

    pass
