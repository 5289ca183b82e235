from __future__ import annotations

from bs4 import BeautifulSoup

from .errors import ReadingParseError

__all__ = ["READING_SELECTOR", "parse_hiragana"]

# First cell of the reading table on a yomikatawa.com result page.
READING_SELECTOR = "#yomikata tbody tr td"


def parse_hiragana(html: str) -> str:
    """Return the reading text found in the lookup page, or raise ``ReadingParseError``."""
    soup = BeautifulSoup(html, "html.parser")
    cell = soup.select_one(READING_SELECTOR)
    if cell is None:
        raise ReadingParseError("failed to parse reading: reading table not found")
    text = cell.get_text().strip()
    if not text:
        raise ReadingParseError("failed to parse reading: reading cell is empty")
    return text
