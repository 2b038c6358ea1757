"""Sheet sources yielding raw records."""

from tredit.sheets.base import SheetSource, parse_csv_records
from tredit.sheets.file import CsvFileSource
from tredit.sheets.google import GoogleSheetSource

__all__ = ["CsvFileSource", "GoogleSheetSource", "SheetSource", "parse_csv_records"]
