"""Extraction of records and single cells from a worksheet.

:class:`RecordExtractor` is the entry point. It takes the worksheet on every
call and keeps no reference to it, so one extractor can serve any number of
sheets.

Example:
    worksheet = OpenpyxlWorksheet.from_path("people.xlsx")
    result = RecordExtractor().extract_range(worksheet, "A1:C20")
    for record in result.records:
        print(record["Name"], record["Joined"])
    for warning in result.warnings:
        print(warning.kind, warning.message)
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence

from sheet_record_extraction.config import Settings
from sheet_record_extraction.config import settings as default_settings
from sheet_record_extraction.models import ExtractionResult
from sheet_record_extraction.services.cell_fetcher import fetch_cell_text
from sheet_record_extraction.services.header_resolver import HeaderResolver
from sheet_record_extraction.services.range_parser import parse_cell, parse_range
from sheet_record_extraction.services.row_extractor import RowExtractor
from sheet_record_extraction.utils.exceptions import MissingTargetError
from sheet_record_extraction.utils.logging import (
    LogContext,
    get_logger,
    timed_operation,
)
from sheet_record_extraction.worksheet import Worksheet

logger = get_logger(__name__)


class RecordExtractor:
    """Extract header-keyed records from rectangular worksheet ranges."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else default_settings
        self._header_resolver = HeaderResolver(self._settings)
        self._row_extractor = RowExtractor(self._settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    def extract_cell(self, worksheet: Worksheet, reference: str) -> str:
        """Return the display text of a single cell.

        Raises:
            MalformedCellError: If ``reference`` is not a cell reference.
            InvalidColumnError: If its column letters are not A-Z.
            CellLookupError: If the worksheet cannot read the cell.
        """
        return fetch_cell_text(worksheet, reference)

    def extract_range(
        self,
        worksheet: Worksheet,
        range_ref: str,
        headers: Sequence[str] | None = None,
    ) -> ExtractionResult:
        """Extract one record per data row of ``range_ref``.

        Without ``headers`` the first row of the range supplies them. Parse
        and header errors abort the call; per-cell anomalies are collected in
        ``ExtractionResult.warnings``.

        Args:
            worksheet: Worksheet to read from.
            range_ref: Range such as ``"A1:C20"``.
            headers: Optional explicit headers, one per column.

        Returns:
            The records and their diagnostics.

        Raises:
            MalformedRangeError: If the range is malformed or inverted.
            InvalidColumnError: If column letters are not A-Z.
            HeaderCountMismatchError: If ``headers`` has the wrong length.
            InvalidHeaderError: If an explicit header is blank.
            CellLookupError: If the worksheet cannot read a cell.
        """
        parsed = parse_range(range_ref)

        with (
            LogContext(extraction_id=uuid.uuid4().hex[:8], range_ref=str(parsed)),
            timed_operation(logger, "extract_range") as metrics,
        ):
            resolved = self._header_resolver.resolve(worksheet, parsed, headers)
            rows = self._row_extractor.extract(worksheet, parsed, resolved)

            warnings = [*resolved.warnings, *rows.warnings]
            metrics.rows_processed = len(rows.records)
            metrics.cells_read = rows.cells_read
            metrics.warnings_emitted = len(warnings)

            logger.log_extraction_result(
                range_ref=str(parsed),
                records=len(rows.records),
                warnings=len(warnings),
            )

        return ExtractionResult(
            records=rows.records,
            headers=resolved.unique_headers,
            warnings=warnings,
            range_reference=parsed,
        )

    def extract(
        self,
        worksheet: Worksheet,
        *,
        cell: str | None = None,
        range_ref: str | None = None,
        headers: Sequence[str] | None = None,
    ) -> ExtractionResult:
        """Extract a single cell, a range, or both in one call.

        Raises:
            MissingTargetError: If neither ``cell`` nor ``range_ref`` is given,
                or if ``headers`` is given without ``range_ref``.
            MalformedCellError: If ``cell`` is malformed; raised before the
                range is read.
        """
        if cell is None and range_ref is None:
            raise MissingTargetError()
        if headers is not None and range_ref is None:
            raise MissingTargetError(
                details={"reason": "headers were supplied without a range"}
            )
        if cell is not None:
            # Reject a bad cell reference before any range reads.
            parse_cell(cell)

        if range_ref is not None:
            result = self.extract_range(worksheet, range_ref, headers)
        else:
            result = ExtractionResult()

        if cell is not None:
            result.cell_text = self.extract_cell(worksheet, cell)
        return result


def extract_cell(
    worksheet: Worksheet, reference: str, settings: Settings | None = None
) -> str:
    """Shortcut for :meth:`RecordExtractor.extract_cell`."""
    return RecordExtractor(settings).extract_cell(worksheet, reference)


def extract_range(
    worksheet: Worksheet,
    range_ref: str,
    headers: Sequence[str] | None = None,
    settings: Settings | None = None,
) -> ExtractionResult:
    """Shortcut for :meth:`RecordExtractor.extract_range`."""
    return RecordExtractor(settings).extract_range(worksheet, range_ref, headers)
