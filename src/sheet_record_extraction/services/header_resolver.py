"""Resolution of the header (field name) for each column of a range.

Headers are either read from the first row of the range or supplied by the
caller. Several columns may share a header; they are aliases of one logical
field whose leftmost column wins.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sheet_record_extraction.config import Settings
from sheet_record_extraction.config import settings as default_settings
from sheet_record_extraction.models import (
    CellPosition,
    ExtractionWarning,
    RangeReference,
    WarningKind,
)
from sheet_record_extraction.services.cell_fetcher import read_text
from sheet_record_extraction.services.column_codec import column_index_to_letters
from sheet_record_extraction.utils.exceptions import (
    HeaderCountMismatchError,
    InvalidHeaderError,
)
from sheet_record_extraction.utils.logging import get_logger
from sheet_record_extraction.worksheet import Worksheet

logger = get_logger(__name__)


@dataclass
class ResolvedHeaders:
    """Headers for one extraction call.

    Attributes:
        headers: One header per column of the range, duplicates included.
        data_start_row: First worksheet row holding data.
        warnings: Diagnostics raised while resolving.
    """

    headers: list[str]
    data_start_row: int
    warnings: list[ExtractionWarning] = field(default_factory=list)

    @property
    def unique_headers(self) -> list[str]:
        """Distinct headers in first-occurrence order."""
        return list(dict.fromkeys(self.headers))

    @property
    def duplicates(self) -> list[str]:
        """Headers that name more than one column."""
        seen: set[str] = set()
        repeated: dict[str, None] = {}
        for header in self.headers:
            if header in seen:
                repeated[header] = None
            seen.add(header)
        return list(repeated)


def data_start_row(range_ref: RangeReference, *, derived: bool) -> int:
    """Return the first data row of ``range_ref``.

    With derived headers the first row of the range is the header row, so
    data starts one row below it. With explicit headers every row is data,
    except that absolute row 1 is always treated as the sheet's header row.
    """
    if derived or range_ref.start_row == 1:
        return range_ref.start_row + 1
    return range_ref.start_row


class HeaderResolver:
    """Derive or validate the headers of a range."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else default_settings

    def resolve(
        self,
        worksheet: Worksheet,
        range_ref: RangeReference,
        headers: Sequence[str] | None = None,
    ) -> ResolvedHeaders:
        """Resolve headers from ``headers`` when given, else from the sheet.

        Raises:
            HeaderCountMismatchError: If explicit headers do not match the
                number of columns.
            InvalidHeaderError: If an explicit header is blank or not a string.
            CellLookupError: If the header row cannot be read.
        """
        if headers is not None:
            resolved = self.from_explicit(range_ref, headers)
        else:
            resolved = self.from_header_row(worksheet, range_ref)

        duplicates = resolved.duplicates
        if duplicates:
            logger.info(
                "Range has duplicate headers; leftmost column wins",
                duplicates=duplicates,
            )
        return resolved

    def from_explicit(
        self, range_ref: RangeReference, headers: Sequence[str]
    ) -> ResolvedHeaders:
        """Validate a caller-supplied header list against the range."""
        if isinstance(headers, str):
            # A bare string would otherwise be split into characters.
            headers = [headers]
        header_list = list(headers)
        if len(header_list) != range_ref.column_count:
            raise HeaderCountMismatchError(
                expected=range_ref.column_count, actual=len(header_list)
            )
        for position, header in enumerate(header_list):
            if not isinstance(header, str) or not header.strip():
                raise InvalidHeaderError(position, header)

        return ResolvedHeaders(
            headers=header_list,
            data_start_row=data_start_row(range_ref, derived=False),
        )

    def from_header_row(
        self, worksheet: Worksheet, range_ref: RangeReference
    ) -> ResolvedHeaders:
        """Read headers from the first row of the range.

        A blank header cell gets a synthesized name built from the configured
        prefix and the column letters, reported as a ``BLANK_HEADER`` warning.
        """
        header_row = range_ref.start_row
        headers: list[str] = []
        warnings: list[ExtractionWarning] = []

        for column in range_ref.columns():
            position = CellPosition(row=header_row, column=column)
            text = read_text(worksheet, position)
            if self._settings.strip_header_whitespace:
                text = text.strip()

            if not text.strip():
                letters = column_index_to_letters(column)
                text = f"{self._settings.blank_header_prefix}{letters}"
                warning = ExtractionWarning(
                    kind=WarningKind.BLANK_HEADER,
                    message=(
                        f"Header cell {position.coordinate} is blank; "
                        f"using '{text}'"
                    ),
                    row=header_row,
                    column=column,
                    header=text,
                )
                logger.warning(warning.message, cell=position.coordinate)
                warnings.append(warning)
            headers.append(text)

        return ResolvedHeaders(
            headers=headers,
            data_start_row=data_start_row(range_ref, derived=True),
            warnings=warnings,
        )
