"""Local CSV files, for validating an exported sheet offline."""

from pathlib import Path

from tredit.sheets.base import SheetSource


class CsvFileSource(SheetSource):
    """Reads sheet tabs saved as CSV files."""

    def __init__(self, encoding: str = "utf-8-sig"):
        self._encoding = encoding

    def fetch_text(self, location: str) -> str:
        return Path(location).read_text(encoding=self._encoding)
