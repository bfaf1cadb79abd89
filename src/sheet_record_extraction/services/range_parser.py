"""Parsing of A1-style cell and range references.

A cell reference is a run of column letters followed by a row number
(``B7``). A range is two cell references joined by a single ``:`` naming
the top-left and bottom-right corners (``A1:B7``).
"""

import re

from sheet_record_extraction.models import CellPosition, RangeReference
from sheet_record_extraction.services.column_codec import column_letters_to_index
from sheet_record_extraction.utils.exceptions import (
    MalformedCellError,
    MalformedRangeError,
)
from sheet_record_extraction.utils.logging import get_logger

logger = get_logger(__name__)

# Letters are any alphabetic run so that non A-Z letters reach the column
# codec and are reported as invalid columns rather than bad syntax.
_LETTERS_PATTERN = re.compile(r"[^\W\d_]+")
_DIGITS_PATTERN = re.compile(r"^[0-9]+$")


def split_cell_reference(reference: str) -> tuple[str, str]:
    """Split a cell reference into its letter prefix and row suffix.

    Surrounding whitespace is ignored. No validation beyond the split is
    done, so either part may come back empty.

    Args:
        reference: A reference such as ``"AB12"``.

    Returns:
        ``(letters, digits)``; e.g. ``("AB", "12")``.
    """
    stripped = reference.strip()
    match = _LETTERS_PATTERN.match(stripped)
    letters = match.group(0) if match else ""
    return letters, stripped[len(letters) :]


def _parse_position(reference: str) -> tuple[CellPosition | None, str | None]:
    """Parse one corner; returns the position or the reason it is invalid."""
    letters, digits = split_cell_reference(reference)
    if not letters:
        return None, f"'{reference.strip()}' has no column letters"
    if not digits:
        return None, f"'{reference.strip()}' has no row number"
    if not _DIGITS_PATTERN.match(digits):
        return None, f"'{reference.strip()}' has a non-numeric row '{digits}'"
    row = int(digits)
    if row < 1:
        return None, f"'{reference.strip()}' has row {row}; rows start at 1"
    return CellPosition(row=row, column=column_letters_to_index(letters)), None


def parse_cell(reference: str) -> CellPosition:
    """Parse a single cell reference such as ``"B7"``.

    Raises:
        MalformedCellError: If the reference is not ``<letters><digits>``.
        InvalidColumnError: If the letters are not A-Z.
    """
    if not isinstance(reference, str) or not reference.strip():
        raise MalformedCellError(str(reference), "reference is empty")
    if ":" in reference:
        raise MalformedCellError(reference, "expected a single cell, not a range")

    position, reason = _parse_position(reference)
    if position is None:
        raise MalformedCellError(reference, reason or "invalid cell reference")
    return position


def parse_range(reference: str) -> RangeReference:
    """Parse a range reference such as ``"A1:B7"``.

    The first corner must be the top-left one; inverted ranges are rejected
    rather than normalised.

    Args:
        reference: The range string.

    Returns:
        The parsed range.

    Raises:
        MalformedRangeError: On bad syntax or an inverted range.
        InvalidColumnError: If column letters are not A-Z.
    """
    if not isinstance(reference, str) or not reference.strip():
        raise MalformedRangeError(str(reference), "range is empty")

    parts = reference.split(":")
    if len(parts) != 2:
        raise MalformedRangeError(
            reference, f"expected exactly one ':' but found {len(parts) - 1}"
        )

    corners: list[CellPosition] = []
    for part in parts:
        position, reason = _parse_position(part)
        if position is None:
            raise MalformedRangeError(reference, reason or "invalid cell reference")
        corners.append(position)

    start, end = corners
    if end.column < start.column:
        raise MalformedRangeError(
            reference,
            f"end column {end.coordinate} is left of start column {start.coordinate}",
        )
    if end.row < start.row:
        raise MalformedRangeError(
            reference, f"end row {end.row} is above start row {start.row}"
        )

    parsed = RangeReference(
        start_column=start.column,
        end_column=end.column,
        start_row=start.row,
        end_row=end.row,
    )
    logger.debug(
        "Parsed range",
        range_ref=str(parsed),
        columns=parsed.column_count,
        rows=parsed.row_count,
    )
    return parsed
