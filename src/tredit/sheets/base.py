"""Abstract base class for sheet sources."""

import csv
import logging
from abc import ABC, abstractmethod
from io import StringIO

from tredit.models.raw import RawRecord

logger = logging.getLogger(__name__)

_OVERFLOW = "__overflow__"


class SheetSource(ABC):
    """
    Standard interface for anything that yields sheet rows.
    Sources only fetch text; turning CSV into RawRecords is shared.
    """

    @abstractmethod
    def fetch_text(self, location: str) -> str:
        """Return the CSV text found at `location` (URL, path, ...)."""
        pass

    def fetch(self, location: str) -> list[RawRecord]:
        """Fetch and parse one sheet tab into raw records."""
        return parse_csv_records(self.fetch_text(location))


def parse_csv_records(csv_content: str) -> list[RawRecord]:
    """
    Parse CSV with a header row into RawRecords.
    Rows with more or fewer cells than the header are logged and skipped.
    """
    reader = csv.DictReader(StringIO(csv_content), restkey=_OVERFLOW)
    records = []
    for row in reader:
        if _OVERFLOW in row or any(value is None for value in row.values()):
            logger.warning(
                "Skipping sheet line %d: cell count does not match header",
                reader.line_num,
            )
            continue
        records.append(RawRecord(data=dict(row)))
    return records
