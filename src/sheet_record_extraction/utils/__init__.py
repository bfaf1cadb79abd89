"""Utilities package for sheet record extraction.

This package provides:
- Centralized exception classes (exceptions.py)
- Structured logging utilities (logging.py)
"""

from sheet_record_extraction.utils.exceptions import (
    CellLookupError,
    ConfigurationError,
    ErrorCode,
    HeaderCountMismatchError,
    HeaderError,
    InvalidColumnError,
    InvalidHeaderError,
    MalformedCellError,
    MalformedRangeError,
    MissingTargetError,
    ReferenceSyntaxError,
    SheetExtractionError,
    SheetNotFoundError,
    WorkbookNotFoundError,
    WorksheetError,
)
from sheet_record_extraction.utils.logging import (
    LogContext,
    StructuredLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    # Exceptions
    "CellLookupError",
    "ConfigurationError",
    "ErrorCode",
    "HeaderCountMismatchError",
    "HeaderError",
    "InvalidColumnError",
    "InvalidHeaderError",
    "MalformedCellError",
    "MalformedRangeError",
    "MissingTargetError",
    "ReferenceSyntaxError",
    "SheetExtractionError",
    "SheetNotFoundError",
    "WorkbookNotFoundError",
    "WorksheetError",
    # Logging
    "LogContext",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
