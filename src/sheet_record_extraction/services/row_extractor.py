"""Turning the data rows of a range into header-keyed records."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheet_record_extraction.config import Settings
from sheet_record_extraction.config import settings as default_settings
from sheet_record_extraction.models import (
    CellPosition,
    ExtractionWarning,
    RangeReference,
    Record,
    WarningKind,
)
from sheet_record_extraction.services.cell_fetcher import read_value
from sheet_record_extraction.services.date_coercion import coerce_cell_value
from sheet_record_extraction.services.header_resolver import ResolvedHeaders
from sheet_record_extraction.utils.logging import get_logger
from sheet_record_extraction.worksheet import Worksheet

logger = get_logger(__name__)


@dataclass
class RowExtraction:
    """Records built from a range together with the diagnostics they raised."""

    records: list[Record] = field(default_factory=list)
    warnings: list[ExtractionWarning] = field(default_factory=list)
    cells_read: int = 0


class RowExtractor:
    """Walk a range row by row and build one record per row."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else default_settings

    def extract(
        self,
        worksheet: Worksheet,
        range_ref: RangeReference,
        resolved: ResolvedHeaders,
    ) -> RowExtraction:
        """Extract every data row of ``range_ref``.

        Each record holds every unique header exactly once, in header order.
        When two columns share a header the leftmost value is kept and the
        other is reported as a ``DUPLICATE_HEADER`` warning.

        Raises:
            CellLookupError: If the worksheet cannot read a cell.
        """
        result = RowExtraction()
        headers = resolved.headers
        unique_headers = resolved.unique_headers

        for row in range_ref.rows(resolved.data_start_row):
            record: Record = dict.fromkeys(unique_headers)
            assigned: set[str] = set()

            for column, header in zip(range_ref.columns(), headers, strict=True):
                position = CellPosition(row=row, column=column)
                raw_value, number_format = read_value(worksheet, position)
                result.cells_read += 1

                if header in assigned:
                    result.warnings.append(
                        self._warn(
                            WarningKind.DUPLICATE_HEADER,
                            f"Dropped value at {position.coordinate}: header "
                            f"'{header}' already set by an earlier column",
                            position,
                            header,
                            raw_value,
                        )
                    )
                    continue

                outcome = coerce_cell_value(
                    raw_value,
                    number_format,
                    epoch=self._settings.date_epoch,
                    enabled=self._settings.coerce_dates,
                )
                if outcome.failure is not None:
                    result.warnings.append(
                        self._warn(
                            WarningKind.DATE_COERCION_FAILED,
                            f"Kept raw value at {position.coordinate}: "
                            f"{outcome.failure}",
                            position,
                            header,
                            raw_value,
                        )
                    )

                record[header] = outcome.value
                assigned.add(header)

            if self._settings.debug:
                logger.debug("Extracted row", row=row, fields=len(record))
            result.records.append(record)

        return result

    @staticmethod
    def _warn(
        kind: WarningKind,
        message: str,
        position: CellPosition,
        header: str,
        value: object,
    ) -> ExtractionWarning:
        logger.warning(message, kind=kind.value)
        return ExtractionWarning(
            kind=kind,
            message=message,
            row=position.row,
            column=position.column,
            header=header,
            value=value,
        )
