from __future__ import annotations

import pytest

from conftest import reading_html
from kanji_translator.errors import ReadingParseError
from kanji_translator.fetch import LookupOptions, ReadingRequest
from kanji_translator.reading import resolve_hiragana, resolve_katakana, resolve_romaji


class _RecordingFetch:
    def __init__(self, bodies: dict[str, str]) -> None:
        self.bodies = bodies
        self.requests: list[ReadingRequest] = []

    def __call__(self, request: ReadingRequest) -> str:
        self.requests.append(request)
        return self.bodies[request.text]


def _no_network(request: ReadingRequest) -> str:
    raise AssertionError(f"unexpected lookup for {request.text!r}")


def test_pure_hiragana_skips_lookup() -> None:
    assert resolve_hiragana("がっこう", fetch=_no_network) == "がっこう"
    assert resolve_hiragana("らーめん", fetch=_no_network) == "らーめん"
    assert resolve_hiragana("", fetch=_no_network) == ""


def test_pure_katakana_skips_lookup() -> None:
    assert resolve_hiragana("ガッコウ", fetch=_no_network) == "がっこう"
    assert resolve_hiragana("ラーメン", fetch=_no_network) == "らーめん"


def test_kanji_goes_through_lookup() -> None:
    fetch = _RecordingFetch({"学校": reading_html("がっこう")})
    options = LookupOptions(timeout=2.0, retries=1, backoff=0.25, user_agent="test/1.0")

    assert resolve_hiragana("学校", options, fetch=fetch) == "がっこう"

    assert fetch.requests == [
        ReadingRequest(
            text="学校",
            timeout=2.0,
            max_retries=1,
            backoff_base=0.25,
            user_agent="test/1.0",
        )
    ]


def test_remote_katakana_is_normalized_to_hiragana() -> None:
    fetch = _RecordingFetch({"東京タワー": reading_html("トウキョウたわー")})
    assert resolve_hiragana("東京タワー", fetch=fetch) == "とうきょうたわー"


def test_mixed_kana_is_looked_up() -> None:
    fetch = _RecordingFetch({"ひらカタ": reading_html("ひらかた")})
    assert resolve_hiragana("ひらカタ", fetch=fetch) == "ひらかた"
    assert len(fetch.requests) == 1


def test_parse_error_is_not_retried() -> None:
    fetch = _RecordingFetch({"学校": "<html><body>no table</body></html>"})
    with pytest.raises(ReadingParseError):
        resolve_hiragana("学校", fetch=fetch)
    assert len(fetch.requests) == 1


def test_derived_scripts() -> None:
    fetch = _RecordingFetch({"学校案内": reading_html("がっこうあんない")})
    assert resolve_katakana("学校案内", fetch=fetch) == "ガッコウアンナイ"
    assert resolve_romaji("学校案内", fetch=fetch) == "gakkouannai"


def test_custom_extractor_is_used() -> None:
    fetch = _RecordingFetch({"学校": "raw"})
    assert resolve_hiragana("学校", fetch=fetch, extract=lambda body: "ガッコウ") == "がっこう"
