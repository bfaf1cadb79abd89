"""Reading individual cells from a worksheet.

Every worksheet read made by the extractors goes through these helpers so
that backend failures surface uniformly as :class:`CellLookupError`.
"""

from __future__ import annotations

from typing import Any

from sheet_record_extraction.models import CellPosition
from sheet_record_extraction.services.range_parser import parse_cell
from sheet_record_extraction.utils.exceptions import CellLookupError
from sheet_record_extraction.utils.logging import get_logger
from sheet_record_extraction.worksheet import Worksheet

logger = get_logger(__name__)


def read_text(worksheet: Worksheet, position: CellPosition) -> str:
    """Return the display text at ``position``; empty for an empty cell."""
    try:
        text = worksheet.cell_text(position)
    except Exception as exc:
        logger.error("Worksheet read failed", cell=position.coordinate, error=exc)
        raise CellLookupError(position.coordinate, str(exc) or None) from exc
    return "" if text is None else str(text)


def read_value(worksheet: Worksheet, position: CellPosition) -> tuple[Any, str]:
    """Return the raw value and number format at ``position``."""
    try:
        value = worksheet.cell_value(position)
        number_format = worksheet.cell_display_format(position)
    except Exception as exc:
        logger.error("Worksheet read failed", cell=position.coordinate, error=exc)
        raise CellLookupError(position.coordinate, str(exc) or None) from exc
    return value, number_format or ""


def fetch_cell_text(worksheet: Worksheet, reference: str) -> str:
    """Return the display text of the cell named by ``reference``.

    Args:
        worksheet: Worksheet to read from.
        reference: A single cell reference such as ``"B7"``.

    Raises:
        MalformedCellError: If ``reference`` is not a valid cell reference.
        InvalidColumnError: If its column letters are not A-Z.
        CellLookupError: If the worksheet cannot read the cell.
    """
    position = parse_cell(reference)
    text = read_text(worksheet, position)
    logger.debug("Fetched cell", cell=position.coordinate, length=len(text))
    return text
