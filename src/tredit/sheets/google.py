"""Published Google Sheets tabs, fetched as CSV over HTTP."""

from typing import Optional

import httpx

from tredit.sheets.base import SheetSource


class GoogleSheetSource(SheetSource):
    """
    Fetches "publish to web" CSV exports.
    Redirects are followed; Google answers the pub URL with a 307.
    """

    DEFAULT_HEADERS = {
        "User-Agent": "tredit/0.1 (truinlag challenge importer)",
        "Accept": "text/csv, text/plain, */*",
    }

    def __init__(self, client: Optional[httpx.Client] = None):
        self._client = client or httpx.Client(
            timeout=60.0,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )

    def fetch_text(self, location: str) -> str:
        """Fetch CSV content from URL."""
        response = self._client.get(location)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        self._client.close()
