from __future__ import annotations

import pytest

from conftest import FIXTURES, reading_html
from kanji_translator.errors import ReadingParseError
from kanji_translator.extract import parse_hiragana


def test_parse_reading_from_lookup_page() -> None:
    html = (FIXTURES / "yomikata_gakkou_annai.html").read_text(encoding="utf-8")
    assert parse_hiragana(html) == "がっこうあんない"


def test_parse_minimal_table() -> None:
    assert parse_hiragana(reading_html("あんない")) == "あんない"


def test_parse_keeps_katakana_as_returned() -> None:
    assert parse_hiragana(reading_html("トウキョウ")) == "トウキョウ"


def test_missing_table_raises() -> None:
    with pytest.raises(ReadingParseError):
        parse_hiragana("<html><body><p>見つかりませんでした</p></body></html>")


@pytest.mark.parametrize("cell", ["", "   \n  "])
def test_empty_cell_raises(cell: str) -> None:
    with pytest.raises(ReadingParseError) as excinfo:
        parse_hiragana(reading_html(cell))
    assert isinstance(excinfo.value, ValueError)
