from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from openpyxl import Workbook

from sheet_record_extraction.config import Settings
from sheet_record_extraction.models import CellPosition
from sheet_record_extraction.services.column_codec import column_letters_to_index
from sheet_record_extraction.worksheet import OpenpyxlWorksheet, display_text


class FakeWorksheet:
    """In-memory worksheet keyed by A1 coordinates."""

    def __init__(
        self,
        values: dict[str, Any] | None = None,
        formats: dict[str, str] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self._values: dict[tuple[int, int], Any] = {}
        self._formats: dict[tuple[int, int], str] = {}
        self._failing: set[tuple[int, int]] = set()
        self.reads: list[CellPosition] = []
        for coordinate, value in (values or {}).items():
            self._values[self._key(coordinate)] = value
        for coordinate, number_format in (formats or {}).items():
            self._formats[self._key(coordinate)] = number_format
        for coordinate in failing or set():
            self._failing.add(self._key(coordinate))

    @staticmethod
    def _key(coordinate: str) -> tuple[int, int]:
        letters = coordinate.rstrip("0123456789")
        return int(coordinate[len(letters) :]), column_letters_to_index(letters)

    @classmethod
    def from_rows(
        cls, rows: list[list[Any]], start: str = "A1", **kwargs: Any
    ) -> FakeWorksheet:
        """Lay out ``rows`` with their top-left cell at ``start``."""
        start_row, start_column = cls._key(start)
        sheet = cls(**kwargs)
        for row_offset, row in enumerate(rows):
            for column_offset, value in enumerate(row):
                key = (start_row + row_offset, start_column + column_offset)
                sheet._values[key] = value
        return sheet

    def _check(self, position: CellPosition) -> tuple[int, int]:
        key = (position.row, position.column)
        self.reads.append(position)
        if key in self._failing:
            raise RuntimeError(f"backend error at {position.coordinate}")
        return key

    def cell_text(self, position: CellPosition) -> str:
        return display_text(self._values.get(self._check(position)))

    def cell_value(self, position: CellPosition) -> Any:
        return self._values.get(self._check(position))

    def cell_display_format(self, position: CellPosition) -> str:
        return self._formats.get(self._check(position), "General")

    def used_range(self) -> tuple[int, int]:
        if not self._values:
            return 0, 0
        rows = [row for row, _ in self._values]
        columns = [column for _, column in self._values]
        return max(columns), max(rows)


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only, ignoring the environment."""
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


@pytest.fixture
def people_sheet() -> FakeWorksheet:
    return FakeWorksheet.from_rows(
        [
            ["Name", "Age", "Joined"],
            ["Alice", 30, 44197],
            ["Bob", 41, 44562],
        ],
        formats={"C2": "mm/dd/yyyy", "C3": "mm/dd/yyyy"},
    )


@pytest.fixture
def workbook_path(tmp_path: Path) -> Iterator[Path]:
    wb = Workbook()
    ws = wb.active
    ws.title = "People"
    ws["A1"] = "Name"
    ws["B1"] = "Amount"
    ws["C1"] = "Paid"
    ws["A2"] = "Alice"
    ws["B2"] = 123.5
    ws["C2"] = 44197
    ws["C2"].number_format = "yyyy-mm-dd"
    ws["A3"] = "Bob"
    ws["B3"] = 10
    ws["C3"] = "pending"
    ws["C3"].number_format = "yyyy-mm-dd"

    other = wb.create_sheet("Notes")
    other["A1"] = "memo"

    path = tmp_path / "people.xlsx"
    wb.save(path)
    yield path


@pytest.fixture
def openpyxl_sheet(workbook_path: Path) -> OpenpyxlWorksheet:
    return OpenpyxlWorksheet.from_path(workbook_path, sheet_name="People")


@pytest.fixture
def make_sheet() -> type[FakeWorksheet]:
    """Factory for in-memory worksheets: ``make_sheet.from_rows([...])``."""
    return FakeWorksheet
