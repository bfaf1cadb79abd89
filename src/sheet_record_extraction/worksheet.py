"""Worksheet collaborator used by the extractors.

The extractors only read cells through the :class:`Worksheet` protocol, so any
spreadsheet backend can be plugged in. :class:`OpenpyxlWorksheet` adapts an
openpyxl worksheet.
"""

from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from openpyxl import load_workbook
from openpyxl.cell.cell import Cell
from openpyxl.worksheet.worksheet import Worksheet as OpenpyxlSheet

from sheet_record_extraction.models import CellPosition
from sheet_record_extraction.utils.exceptions import (
    SheetNotFoundError,
    WorkbookNotFoundError,
)


@runtime_checkable
class Worksheet(Protocol):
    """Read-only view of one worksheet."""

    def cell_text(self, position: CellPosition) -> str:
        """Display text of the cell; empty string for an empty cell."""
        ...

    def cell_value(self, position: CellPosition) -> Any:
        """Raw stored value: number, text, bool, datetime or None."""
        ...

    def cell_display_format(self, position: CellPosition) -> str:
        """Number-format string of the cell, e.g. ``"mm/dd/yyyy"``."""
        ...

    def used_range(self) -> tuple[int, int]:
        """``(column_count, row_count)`` of the used area."""
        ...


class OpenpyxlWorksheet:
    """:class:`Worksheet` implementation backed by an openpyxl worksheet."""

    def __init__(self, sheet: OpenpyxlSheet) -> None:
        self._sheet = sheet

    @classmethod
    def from_path(
        cls, file_path: Path | str, sheet_name: str | None = None
    ) -> OpenpyxlWorksheet:
        """Open a workbook and wrap one of its sheets.

        Cached formula results are read instead of formulas, since the
        extractor does not evaluate formulas.

        Args:
            file_path: Path to an ``.xlsx`` workbook.
            sheet_name: Sheet to wrap; the active sheet when omitted.

        Raises:
            WorkbookNotFoundError: If the file does not exist.
            SheetNotFoundError: If the named sheet is missing.
        """
        path = Path(file_path)
        if not path.exists():
            raise WorkbookNotFoundError(str(path))

        workbook = load_workbook(filename=path, data_only=True)
        if sheet_name is None:
            return cls(workbook.active)
        if sheet_name not in workbook.sheetnames:
            raise SheetNotFoundError(sheet_name, available=list(workbook.sheetnames))
        return cls(workbook[sheet_name])

    @property
    def title(self) -> str:
        return str(self._sheet.title)

    def _existing_cell(self, position: CellPosition) -> Cell | None:
        # Worksheet.cell() creates missing cells and grows the sheet's
        # dimensions, so positions outside the used area are never passed to it.
        if (
            position.row > self._sheet.max_row
            or position.column > self._sheet.max_column
        ):
            return None
        return self._sheet.cell(row=position.row, column=position.column)

    def cell_value(self, position: CellPosition) -> Any:
        cell = self._existing_cell(position)
        return None if cell is None else cell.value

    def cell_display_format(self, position: CellPosition) -> str:
        cell = self._existing_cell(position)
        if cell is None:
            return "General"
        return str(cell.number_format or "General")

    def cell_text(self, position: CellPosition) -> str:
        return display_text(self.cell_value(position))

    def used_range(self) -> tuple[int, int]:
        return self._sheet.max_column, self._sheet.max_row


def display_text(value: Any) -> str:
    """Render a raw cell value the way a spreadsheet shows it in General format."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)
