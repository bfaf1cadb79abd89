"""Sheet Record Extraction - turn worksheet ranges into header-keyed records."""

from sheet_record_extraction.models import (
    CellPosition,
    ExtractionResult,
    ExtractionWarning,
    RangeReference,
    Record,
    WarningKind,
)
from sheet_record_extraction.services.column_codec import (
    column_index_to_letters,
    column_letters_to_index,
)
from sheet_record_extraction.services.range_parser import parse_cell, parse_range
from sheet_record_extraction.services.record_extractor import (
    RecordExtractor,
    extract_cell,
    extract_range,
)
from sheet_record_extraction.worksheet import OpenpyxlWorksheet, Worksheet

__all__ = [
    "CellPosition",
    "ExtractionResult",
    "ExtractionWarning",
    "OpenpyxlWorksheet",
    "RangeReference",
    "Record",
    "RecordExtractor",
    "WarningKind",
    "Worksheet",
    "column_index_to_letters",
    "column_letters_to_index",
    "extract_cell",
    "extract_range",
    "parse_cell",
    "parse_range",
]
__version__ = "0.1.0"
