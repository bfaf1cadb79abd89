"""Tests for the openpyxl worksheet adapter."""

from datetime import date, datetime, time
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from sheet_record_extraction import RecordExtractor, WarningKind
from sheet_record_extraction.models import CellPosition
from sheet_record_extraction.utils.exceptions import (
    ErrorCode,
    SheetNotFoundError,
    WorkbookNotFoundError,
)
from sheet_record_extraction.worksheet import (
    OpenpyxlWorksheet,
    Worksheet,
    display_text,
)


class TestDisplayText:
    """Tests for display_text."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            ("text", "text"),
            (True, "TRUE"),
            (False, "FALSE"),
            (42, "42"),
            (3.0, "3"),
            (2.5, "2.5"),
            (datetime(2024, 1, 15), "2024-01-15"),
            (datetime(2024, 1, 15, 9, 30), "2024-01-15 09:30:00"),
            (date(2024, 1, 15), "2024-01-15"),
            (time(9, 30), "09:30:00"),
        ],
    )
    def test_rendering(self, value: Any, expected: str) -> None:
        assert display_text(value) == expected


class TestOpenpyxlWorksheet:
    """Tests for OpenpyxlWorksheet."""

    def test_satisfies_protocol(self, openpyxl_sheet: OpenpyxlWorksheet) -> None:
        assert isinstance(openpyxl_sheet, Worksheet)

    def test_from_path_selects_sheet(self, workbook_path: Path) -> None:
        sheet = OpenpyxlWorksheet.from_path(workbook_path, sheet_name="Notes")
        assert sheet.title == "Notes"
        assert sheet.cell_text(CellPosition(1, 1)) == "memo"

    def test_from_path_defaults_to_active_sheet(self, workbook_path: Path) -> None:
        assert OpenpyxlWorksheet.from_path(str(workbook_path)).title == "People"

    def test_missing_workbook(self, tmp_path: Path) -> None:
        with pytest.raises(WorkbookNotFoundError) as exc_info:
            OpenpyxlWorksheet.from_path(tmp_path / "absent.xlsx")
        assert exc_info.value.error_code == ErrorCode.WORKBOOK_NOT_FOUND

    def test_missing_sheet(self, workbook_path: Path) -> None:
        with pytest.raises(SheetNotFoundError) as exc_info:
            OpenpyxlWorksheet.from_path(workbook_path, sheet_name="Budget")
        assert exc_info.value.details["available_sheets"] == ["People", "Notes"]

    def test_cell_access(self, openpyxl_sheet: OpenpyxlWorksheet) -> None:
        amount = CellPosition(row=2, column=2)
        assert openpyxl_sheet.cell_value(amount) == 123.5
        assert openpyxl_sheet.cell_text(amount) == "123.5"
        assert openpyxl_sheet.cell_display_format(amount) == "General"
        assert openpyxl_sheet.cell_text(CellPosition(row=9, column=9)) == ""

    def test_date_format_is_reported(self, openpyxl_sheet: OpenpyxlWorksheet) -> None:
        paid = CellPosition(row=2, column=3)
        assert openpyxl_sheet.cell_display_format(paid) == "yyyy-mm-dd"

    def test_used_range(self, openpyxl_sheet: OpenpyxlWorksheet) -> None:
        assert openpyxl_sheet.used_range() == (3, 3)

    def test_reads_outside_used_area(self, openpyxl_sheet: OpenpyxlWorksheet) -> None:
        outside = CellPosition(row=50, column=4)
        assert openpyxl_sheet.cell_value(outside) is None
        assert openpyxl_sheet.cell_display_format(outside) == "General"
        assert openpyxl_sheet.cell_text(outside) == ""
        assert openpyxl_sheet.used_range() == (3, 3)

    def test_extraction_does_not_grow_the_sheet(self) -> None:
        wb = Workbook()
        ws = wb.active
        ws["A1"] = "Name"
        ws["A2"] = "Alice"
        sheet = OpenpyxlWorksheet(ws)
        assert sheet.used_range() == (1, 2)

        result = RecordExtractor().extract_range(sheet, "A1:D50")

        assert sheet.used_range() == (1, 2)
        assert (ws.max_column, ws.max_row) == (1, 2)
        assert result.records[0] == {
            "Name": "Alice",
            "col_B": None,
            "col_C": None,
            "col_D": None,
        }
        assert len(result) == 49


class TestExtractionFromWorkbook:
    """End-to-end extraction through a saved workbook."""

    def test_extract_range(self, openpyxl_sheet: OpenpyxlWorksheet) -> None:
        result = RecordExtractor().extract_range(openpyxl_sheet, "A1:C3")

        assert result.headers == ["Name", "Amount", "Paid"]
        assert result.records[0] == {
            "Name": "Alice",
            "Amount": 123.5,
            "Paid": datetime(2021, 1, 1),
        }
        assert result.records[1]["Paid"] == "pending"
        (warning,) = result.warnings
        assert warning.kind is WarningKind.DATE_COERCION_FAILED
        assert warning.coordinate == "C3"

    def test_extract_cell(self, openpyxl_sheet: OpenpyxlWorksheet) -> None:
        assert RecordExtractor().extract_cell(openpyxl_sheet, "B3") == "10"

    def test_used_range_as_extraction_target(
        self, openpyxl_sheet: OpenpyxlWorksheet
    ) -> None:
        columns, rows = openpyxl_sheet.used_range()
        result = RecordExtractor().extract_range(openpyxl_sheet, f"A1:C{rows}")
        assert len(result) == rows - 1
        assert len(result.headers) == columns
