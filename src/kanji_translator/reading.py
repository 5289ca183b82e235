from __future__ import annotations

from typing import Callable

from .extract import parse_hiragana
from .fetch import LookupOptions, ReadingRequest, _debug_log, fetch_page
from .kana import hiragana_to_katakana, hiragana_to_romaji, katakana_to_hiragana
from .script import is_hiragana_text, is_katakana_text

__all__ = [
    "resolve_hiragana",
    "resolve_katakana",
    "resolve_romaji",
]

FetchFunc = Callable[[ReadingRequest], str]
ExtractFunc = Callable[[str], str]


def resolve_hiragana(
    text: str,
    options: LookupOptions | None = None,
    *,
    fetch: FetchFunc = fetch_page,
    extract: ExtractFunc = parse_hiragana,
) -> str:
    """
    Return the hiragana reading of ``text``.

    Pure kana input is converted locally. Anything else is looked up
    remotely; the remote reading is normalized to hiragana because proper
    nouns often come back in katakana.
    """
    if is_hiragana_text(text):
        return text
    if is_katakana_text(text):
        return katakana_to_hiragana(text)

    request = ReadingRequest.from_options(text, options or LookupOptions())
    body = fetch(request)
    reading = extract(body)
    _debug_log(f"reading for {text!r}: {reading!r}")
    return katakana_to_hiragana(reading)


def resolve_katakana(
    text: str,
    options: LookupOptions | None = None,
    *,
    fetch: FetchFunc = fetch_page,
    extract: ExtractFunc = parse_hiragana,
) -> str:
    return hiragana_to_katakana(resolve_hiragana(text, options, fetch=fetch, extract=extract))


def resolve_romaji(
    text: str,
    options: LookupOptions | None = None,
    *,
    fetch: FetchFunc = fetch_page,
    extract: ExtractFunc = parse_hiragana,
) -> str:
    return hiragana_to_romaji(resolve_hiragana(text, options, fetch=fetch, extract=extract))
