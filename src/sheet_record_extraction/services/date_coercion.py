"""Detection of date number formats and conversion of serial dates.

Spreadsheets store dates as a count of days since an epoch and only show
them as dates because of the cell's number format. A value is converted when
its format looks like a date such as ``mm/dd/yyyy`` or ``yyyy-mm-dd hh:mm``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from openpyxl.utils.datetime import WINDOWS_EPOCH

from sheet_record_extraction.utils.logging import get_logger

logger = get_logger(__name__)

# Two or three groups of 1-4 day/month/year placeholders separated by / or -,
# optionally followed by a time of day.
_DATE_FORMAT_PATTERN = re.compile(
    r"^[dmy]{1,4}(?:[/-][dmy]{1,4}){1,2}"
    r"(?:[\sT]+h{1,2}(?::mm(?::ss(?:\.0+)?)?)?(?:\s*(?:am/pm|a/p))?)?$",
    re.IGNORECASE,
)
# Locale/colour tags such as [$-409] or [Red] and the ;@ text section.
_FORMAT_NOISE_PATTERN = re.compile(r"\[[^\]]*\]|;@$")


def is_date_format(number_format: str | None) -> bool:
    """Return True if ``number_format`` displays values as a calendar date."""
    if not number_format:
        return False
    cleaned = _FORMAT_NOISE_PATTERN.sub("", number_format).replace("\\", "")
    return bool(_DATE_FORMAT_PATTERN.match(cleaned.strip()))


@dataclass
class CoercionOutcome:
    """Result of coercing one cell value.

    Attributes:
        value: The coerced value, or the raw value when nothing was converted.
        converted: Whether a serial number was turned into a datetime.
        failure: Why a date-formatted value could not be converted, if it
            could not.
    """

    value: Any
    converted: bool = False
    failure: str | None = None


def serial_to_datetime(serial: float, epoch: datetime = WINDOWS_EPOCH) -> datetime:
    """Convert a serial date to a datetime.

    The serial is a plain day count from ``epoch``, fractions carrying the
    time of day. In the default 1900 system day 0 is 1899-12-30, which keeps
    serials from 1900-03-01 onward aligned with the phantom 1900-02-29; no
    other adjustment is made, so distinct serials give distinct datetimes.

    Raises:
        ValueError: If the serial is outside the representable date range.
    """
    try:
        return epoch + timedelta(days=serial)
    except OverflowError as exc:
        raise ValueError(f"Serial {serial!r} is outside the supported range") from exc


def coerce_cell_value(
    value: Any,
    number_format: str | None,
    *,
    epoch: datetime = WINDOWS_EPOCH,
    enabled: bool = True,
) -> CoercionOutcome:
    """Coerce a raw cell value according to its number format.

    Values under a non-date format pass through unchanged, as do empty cells
    and values that are already dates. A date-formatted value that is not a
    usable serial number is kept as-is and the reason is reported in
    ``failure``.

    Args:
        value: Raw cell value.
        number_format: The cell's number-format string.
        epoch: Serial-date epoch of the workbook.
        enabled: When False, every value passes through unchanged.

    Returns:
        The coercion outcome.
    """
    if not enabled or value is None or not is_date_format(number_format):
        return CoercionOutcome(value=value)
    if isinstance(value, (datetime, date)):
        return CoercionOutcome(value=value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return CoercionOutcome(
            value=value,
            failure=(
                f"value {value!r} under date format {number_format!r} "
                "is not a serial number"
            ),
        )

    try:
        converted = serial_to_datetime(value, epoch=epoch)
    except ValueError as exc:
        return CoercionOutcome(value=value, failure=str(exc))

    logger.debug("Converted serial date", serial=value, value=converted.isoformat())
    return CoercionOutcome(value=converted, converted=True)
