"""Data models for range references, diagnostics and extraction results."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

import pandas as pd

from sheet_record_extraction.services.column_codec import column_index_to_letters

Record = dict[str, Any]
"""One extracted row, keyed by header in header order."""


@dataclass(frozen=True)
class CellPosition:
    """A single cell, addressed by 1-based row and column."""

    row: int
    column: int

    @property
    def coordinate(self) -> str:
        """A1-style coordinate, e.g. ``"B7"``."""
        return f"{column_index_to_letters(self.column)}{self.row}"


@dataclass(frozen=True)
class RangeReference:
    """A parsed rectangular range. Bounds are inclusive and 1-based."""

    start_column: int
    end_column: int
    start_row: int
    end_row: int

    @property
    def column_count(self) -> int:
        return self.end_column - self.start_column + 1

    @property
    def row_count(self) -> int:
        return self.end_row - self.start_row + 1

    def columns(self) -> range:
        """Column indices covered by the range, in order."""
        return range(self.start_column, self.end_column + 1)

    def rows(self, start: int | None = None) -> range:
        """Row indices from ``start`` (default: first row) to the last row."""
        first = self.start_row if start is None else start
        return range(first, self.end_row + 1)

    def __str__(self) -> str:
        start = CellPosition(self.start_row, self.start_column).coordinate
        end = CellPosition(self.end_row, self.end_column).coordinate
        return f"{start}:{end}"


class WarningKind(str, Enum):
    """Categories of recoverable anomalies reported alongside a result."""

    DUPLICATE_HEADER = "duplicate_header"
    DATE_COERCION_FAILED = "date_coercion_failed"
    BLANK_HEADER = "blank_header"


@dataclass
class ExtractionWarning:
    """A non-fatal anomaly recorded during extraction.

    Attributes:
        kind: Category of the anomaly.
        message: Human-readable description.
        row: Worksheet row the anomaly occurred on, if any.
        column: Worksheet column index, if any.
        header: Header name involved, if any.
        value: The value that was kept or dropped, if any.
    """

    kind: WarningKind
    message: str
    row: int | None = None
    column: int | None = None
    header: str | None = None
    value: Any = None

    @property
    def coordinate(self) -> str | None:
        """A1 coordinate of the affected cell when both row and column are set."""
        if self.row is None or self.column is None:
            return None
        return CellPosition(self.row, self.column).coordinate

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.coordinate is not None:
            result["cell"] = self.coordinate
        elif self.row is not None:
            result["row"] = self.row
        if self.header is not None:
            result["header"] = self.header
        if self.value is not None:
            result["value"] = _jsonable(self.value)
        return result


@dataclass
class ExtractionResult:
    """Records extracted from a range, plus everything worth knowing about them.

    Attributes:
        records: One record per data row, in row order.
        headers: Unique headers in first-occurrence order; the keys of every
            record.
        warnings: Recoverable anomalies, in the order they were found.
        range_reference: The parsed range, when a range was extracted.
        cell_text: Display text of the requested single cell, if any.
    """

    records: list[Record] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    warnings: list[ExtractionWarning] = field(default_factory=list)
    range_reference: RangeReference | None = None
    cell_text: str | None = None

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def warnings_of(self, kind: WarningKind) -> list[ExtractionWarning]:
        """Return the warnings of one kind."""
        return [w for w in self.warnings if w.kind is kind]

    def to_dataframe(self) -> pd.DataFrame:
        """Return the records as a DataFrame with one column per header."""
        return pd.DataFrame(self.records, columns=self.headers)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        result: dict[str, Any] = {
            "headers": list(self.headers),
            "records": [
                {key: _jsonable(value) for key, value in record.items()}
                for record in self.records
            ],
            "warnings": [w.to_dict() for w in self.warnings],
        }
        if self.range_reference is not None:
            result["range"] = str(self.range_reference)
        if self.cell_text is not None:
            result["cell_text"] = self.cell_text
        return result


def _jsonable(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value
