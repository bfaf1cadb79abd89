"""Centralized exception classes for sheet record extraction.

This module provides a hierarchy of custom exceptions with error codes and
structured error details for consistent error handling throughout the
package.

Exception Hierarchy:
    SheetExtractionError (base)
    ├── ReferenceSyntaxError
    │   ├── MalformedRangeError
    │   ├── MalformedCellError
    │   └── InvalidColumnError
    ├── HeaderError
    │   ├── HeaderCountMismatchError
    │   └── InvalidHeaderError
    ├── WorksheetError
    │   ├── CellLookupError
    │   ├── WorkbookNotFoundError
    │   └── SheetNotFoundError
    └── ConfigurationError
        └── MissingTargetError

Error Codes:
    All errors have a unique error code (e.g., "E1001") that can be used
    for programmatic error handling and documentation.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Enumeration of all error codes used in the package.

    Error codes are grouped by category:
    - E1xxx: Reference syntax errors
    - E2xxx: Header errors
    - E3xxx: Worksheet access errors
    - E9xxx: Configuration/internal errors
    """

    # Reference syntax errors (E1xxx)
    MALFORMED_RANGE = "E1001"
    MALFORMED_CELL = "E1002"
    INVALID_COLUMN = "E1003"

    # Header errors (E2xxx)
    HEADER_COUNT_MISMATCH = "E2001"
    INVALID_HEADER = "E2002"

    # Worksheet errors (E3xxx)
    CELL_LOOKUP_FAILED = "E3001"
    WORKBOOK_NOT_FOUND = "E3002"
    SHEET_NOT_FOUND = "E3003"

    # Internal errors (E9xxx)
    INTERNAL_ERROR = "E9001"
    CONFIGURATION_ERROR = "E9002"


class SheetExtractionError(Exception):
    """Base exception for all sheet record extraction errors.

    All custom exceptions in the package inherit from this class.
    It provides:
    - Unique error codes for programmatic handling
    - Structured error details for logging and debugging

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Error code from ErrorCode enum.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary.

        Returns:
            Dictionary with error information.
        """
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# Reference Syntax Errors (E1xxx)
# =============================================================================


class ReferenceSyntaxError(SheetExtractionError):
    """Base class for errors in cell or range reference strings."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.MALFORMED_RANGE,
        reference: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending reference.

        Args:
            message: Error message.
            error_code: Error code.
            reference: The reference string that failed to parse.
            details: Additional details.
        """
        details = details or {}
        if reference is not None:
            details["reference"] = reference
        super().__init__(message, error_code, details)
        self.reference = reference


class MalformedRangeError(ReferenceSyntaxError):
    """Raised when a range reference such as ``A1:B7`` cannot be parsed."""

    def __init__(
        self,
        reference: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the range and the reason it was rejected.

        Args:
            reference: The range string.
            reason: Why the range was rejected.
            details: Additional details.
        """
        details = details or {}
        details["reason"] = reason
        super().__init__(
            message=f"Malformed range '{reference}': {reason}",
            error_code=ErrorCode.MALFORMED_RANGE,
            reference=reference,
            details=details,
        )
        self.reason = reason


class MalformedCellError(ReferenceSyntaxError):
    """Raised when a single cell reference such as ``B7`` cannot be parsed."""

    def __init__(
        self,
        reference: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the cell reference and the reason it was rejected.

        Args:
            reference: The cell reference string.
            reason: Why the reference was rejected.
            details: Additional details.
        """
        details = details or {}
        details["reason"] = reason
        super().__init__(
            message=f"Malformed cell reference '{reference}': {reason}",
            error_code=ErrorCode.MALFORMED_CELL,
            reference=reference,
            details=details,
        )
        self.reason = reason


class InvalidColumnError(ReferenceSyntaxError):
    """Raised when column letters or a column index are out of domain."""

    def __init__(
        self,
        column: str | int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending column.

        Args:
            column: The column letters or index that was rejected.
            message: Optional custom message.
            details: Additional details.
        """
        details = details or {}
        details["column"] = column
        message = message or f"Invalid column: {column!r}"
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_COLUMN,
            details=details,
        )
        self.column = column


# =============================================================================
# Header Errors (E2xxx)
# =============================================================================


class HeaderError(SheetExtractionError):
    """Base class for header configuration errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INVALID_HEADER,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class HeaderCountMismatchError(HeaderError):
    """Raised when explicit headers do not match the range's column count."""

    def __init__(
        self,
        expected: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with both counts.

        Args:
            expected: Number of columns in the range.
            actual: Number of headers supplied.
            details: Additional details.
        """
        details = details or {}
        details["expected_count"] = expected
        details["actual_count"] = actual
        super().__init__(
            message=(
                f"Expected {expected} header(s) for the range, "
                f"got {actual}"
            ),
            error_code=ErrorCode.HEADER_COUNT_MISMATCH,
            details=details,
        )
        self.expected = expected
        self.actual = actual


class InvalidHeaderError(HeaderError):
    """Raised when an explicit header is not a non-empty string."""

    def __init__(
        self,
        position: int,
        header: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the header position.

        Args:
            position: Zero-based index of the header in the supplied list.
            header: The rejected header value.
            details: Additional details.
        """
        details = details or {}
        details["position"] = position
        details["header"] = repr(header)
        super().__init__(
            message=f"Header at position {position} must be a non-empty string",
            error_code=ErrorCode.INVALID_HEADER,
            details=details,
        )
        self.position = position
        self.header = header


# =============================================================================
# Worksheet Errors (E3xxx)
# =============================================================================


class WorksheetError(SheetExtractionError):
    """Base class for failures raised while talking to a worksheet."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CELL_LOOKUP_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class CellLookupError(WorksheetError):
    """Raised when the worksheet cannot resolve a cell position."""

    def __init__(
        self,
        coordinate: str,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the cell coordinate.

        Args:
            coordinate: The A1-style coordinate that failed.
            reason: Optional description of the underlying failure.
            details: Additional details.
        """
        details = details or {}
        details["coordinate"] = coordinate
        message = f"Could not read cell {coordinate}"
        if reason:
            details["reason"] = reason
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            error_code=ErrorCode.CELL_LOOKUP_FAILED,
            details=details,
        )
        self.coordinate = coordinate


class WorkbookNotFoundError(WorksheetError):
    """Raised when a workbook file does not exist."""

    def __init__(
        self,
        file_path: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["file_path"] = file_path
        super().__init__(
            message=f"Workbook not found: {file_path}",
            error_code=ErrorCode.WORKBOOK_NOT_FOUND,
            details=details,
        )
        self.file_path = file_path


class SheetNotFoundError(WorksheetError):
    """Raised when a named sheet is missing from a workbook."""

    def __init__(
        self,
        sheet_name: str,
        available: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["sheet_name"] = sheet_name
        if available:
            details["available_sheets"] = available
        super().__init__(
            message=f"Sheet '{sheet_name}' not found in workbook",
            error_code=ErrorCode.SHEET_NOT_FOUND,
            details=details,
        )
        self.sheet_name = sheet_name


# =============================================================================
# Configuration Errors (E9xxx)
# =============================================================================


class ConfigurationError(SheetExtractionError):
    """Raised when an extraction call is configured inconsistently."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
        )


class MissingTargetError(ConfigurationError):
    """Raised when neither a cell nor a range was requested."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message="Either a cell reference or a range reference is required",
            details=details,
        )
