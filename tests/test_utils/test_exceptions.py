"""Tests for the centralized exception classes."""

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


class TestErrorCode:
    """Tests for ErrorCode enumeration."""

    def test_error_codes_are_unique(self) -> None:
        """All error codes should have unique values."""
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    def test_error_code_format(self) -> None:
        """Error codes should follow Exxxx format."""
        for code in ErrorCode:
            assert code.value.startswith("E")
            assert len(code.value) == 5
            assert code.value[1:].isdigit()

    def test_reference_errors_start_with_e1(self) -> None:
        """Reference syntax error codes should start with E1."""
        for code in (
            ErrorCode.MALFORMED_RANGE,
            ErrorCode.MALFORMED_CELL,
            ErrorCode.INVALID_COLUMN,
        ):
            assert code.value.startswith("E1")

    def test_header_errors_start_with_e2(self) -> None:
        """Header error codes should start with E2."""
        for code in (ErrorCode.HEADER_COUNT_MISMATCH, ErrorCode.INVALID_HEADER):
            assert code.value.startswith("E2")

    def test_worksheet_errors_start_with_e3(self) -> None:
        """Worksheet error codes should start with E3."""
        for code in (
            ErrorCode.CELL_LOOKUP_FAILED,
            ErrorCode.WORKBOOK_NOT_FOUND,
            ErrorCode.SHEET_NOT_FOUND,
        ):
            assert code.value.startswith("E3")


class TestSheetExtractionError:
    """Tests for the base exception."""

    def test_defaults(self) -> None:
        error = SheetExtractionError("Something broke")
        assert error.message == "Something broke"
        assert error.error_code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}

    def test_str_includes_error_code(self) -> None:
        """String form should be prefixed with the error code."""
        error = SheetExtractionError("Something broke")
        assert str(error) == "[E9001] Something broke"

    def test_to_dict(self) -> None:
        error = SheetExtractionError("Oops", details={"key": "value"})
        assert error.to_dict() == {
            "error_code": "E9001",
            "message": "Oops",
            "details": {"key": "value"},
        }

    def test_to_dict_without_details(self) -> None:
        assert "details" not in SheetExtractionError("Oops").to_dict()


class TestReferenceErrors:
    """Tests for reference syntax errors."""

    def test_malformed_range(self) -> None:
        error = MalformedRangeError("B7:A1", "end column A is left of start column B")
        assert isinstance(error, ReferenceSyntaxError)
        assert error.error_code == ErrorCode.MALFORMED_RANGE
        assert error.reference == "B7:A1"
        assert error.reason == "end column A is left of start column B"
        assert "B7:A1" in str(error)
        assert error.details == {
            "reason": "end column A is left of start column B",
            "reference": "B7:A1",
        }

    def test_malformed_cell(self) -> None:
        error = MalformedCellError("7B", "has no column letters")
        assert isinstance(error, ReferenceSyntaxError)
        assert error.error_code == ErrorCode.MALFORMED_CELL
        assert error.message == "Malformed cell reference '7B': has no column letters"

    def test_invalid_column_default_message(self) -> None:
        error = InvalidColumnError(0)
        assert isinstance(error, ReferenceSyntaxError)
        assert error.error_code == ErrorCode.INVALID_COLUMN
        assert error.column == 0
        assert error.details["column"] == 0
        assert error.message == "Invalid column: 0"

    def test_invalid_column_custom_message(self) -> None:
        error = InvalidColumnError("É", "Column letters must be A-Z")
        assert error.message == "Column letters must be A-Z"


class TestHeaderErrors:
    """Tests for header errors."""

    def test_count_mismatch(self) -> None:
        error = HeaderCountMismatchError(expected=3, actual=2)
        assert isinstance(error, HeaderError)
        assert error.error_code == ErrorCode.HEADER_COUNT_MISMATCH
        assert error.details["expected_count"] == 3
        assert error.details["actual_count"] == 2
        assert "Expected 3" in error.message

    def test_invalid_header(self) -> None:
        error = InvalidHeaderError(position=1, header="")
        assert isinstance(error, HeaderError)
        assert error.error_code == ErrorCode.INVALID_HEADER
        assert error.details["header"] == "''"


class TestWorksheetErrors:
    """Tests for worksheet errors."""

    def test_cell_lookup_without_reason(self) -> None:
        error = CellLookupError("A1")
        assert isinstance(error, WorksheetError)
        assert error.message == "Could not read cell A1"
        assert "reason" not in error.details

    def test_cell_lookup_with_reason(self) -> None:
        error = CellLookupError("A1", "sheet closed")
        assert error.message == "Could not read cell A1: sheet closed"
        assert error.details["reason"] == "sheet closed"

    def test_workbook_not_found(self) -> None:
        error = WorkbookNotFoundError("/missing.xlsx")
        assert error.error_code == ErrorCode.WORKBOOK_NOT_FOUND
        assert error.file_path == "/missing.xlsx"

    def test_sheet_not_found(self) -> None:
        error = SheetNotFoundError("Budget", available=["People"])
        assert error.error_code == ErrorCode.SHEET_NOT_FOUND
        assert error.details["available_sheets"] == ["People"]

    def test_sheet_not_found_without_available(self) -> None:
        assert "available_sheets" not in SheetNotFoundError("Budget").details


class TestConfigurationErrors:
    def test_missing_target(self) -> None:
        error = MissingTargetError()
        assert isinstance(error, ConfigurationError)
        assert error.error_code == ErrorCode.CONFIGURATION_ERROR
        assert "cell reference or a range reference" in error.message


class TestExceptionHierarchy:
    """Every error should be catchable through the base class."""

    def test_all_inherit_from_base(self) -> None:
        errors = [
            MalformedRangeError("x", "y"),
            MalformedCellError("x", "y"),
            InvalidColumnError("x"),
            HeaderCountMismatchError(1, 2),
            InvalidHeaderError(0, None),
            CellLookupError("A1"),
            WorkbookNotFoundError("f"),
            SheetNotFoundError("s"),
            MissingTargetError(),
        ]
        for error in errors:
            assert isinstance(error, SheetExtractionError)
            assert isinstance(error, Exception)
