from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable

from .extract import parse_hiragana
from .fetch import LookupOptions, fetch_page
from .reading import ExtractFunc, FetchFunc, resolve_romaji
from .script import has_reading
from .segment import DEFAULT_SEGMENTER, resolve_segmenter
from .tokens import Boundary, Token, tokenize

__all__ = [
    "SlugPart",
    "build_slug_parts",
    "merge_ascii_parts",
    "normalize_slug",
    "to_slug",
]

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class SlugPart:
    kind: str  # "ascii" | "japanese"
    text: str


def build_slug_parts(
    tokens: Iterable[Token],
    romanize: Callable[[str], str],
    *,
    jobs: int = 1,
) -> list[SlugPart | None]:
    """
    Resolve every token into a slug part; ``None`` marks a boundary.

    Tokens holding kanji or kana go through ``romanize``; punctuation-only
    chunks stay literal and normalize away. With ``jobs > 1`` they are
    resolved on a thread pool but results keep token order, and the first
    failing token (in order) raises.
    """
    tokens = list(tokens)
    japanese_texts = [
        token.text
        for token in tokens
        if not isinstance(token, Boundary) and has_reading(token.text)
    ]
    if jobs > 1 and len(japanese_texts) > 1:
        with ThreadPoolExecutor(max_workers=min(jobs, len(japanese_texts))) as pool:
            romaji = list(pool.map(romanize, japanese_texts))
    else:
        romaji = [romanize(text) for text in japanese_texts]

    resolved = iter(romaji)
    parts: list[SlugPart | None] = []
    for token in tokens:
        if isinstance(token, Boundary):
            parts.append(None)
        elif has_reading(token.text):
            parts.append(SlugPart("japanese", next(resolved)))
        else:
            parts.append(SlugPart("ascii", token.text))
    return parts


def merge_ascii_parts(parts: Iterable[SlugPart | None]) -> list[SlugPart]:
    """Join adjacent literal parts and drop the boundaries that kept others apart."""
    merged: list[SlugPart] = []
    previous_ascii = False
    for part in parts:
        if part is None:
            previous_ascii = False
            continue
        if part.kind == "ascii" and previous_ascii:
            merged[-1] = SlugPart("ascii", merged[-1].text + part.text)
        else:
            merged.append(part)
        previous_ascii = part.kind == "ascii"
    return merged


def normalize_slug(
    text: str,
    separator: str = "-",
    *,
    downcase: bool = True,
    collapse: bool = True,
) -> str:
    slug = text.lower() if downcase else text
    slug = _NON_SLUG_CHARS.sub(lambda _match: separator, slug)
    if not separator:
        return slug
    escaped = re.escape(separator)
    if collapse:
        slug = re.sub(f"(?:{escaped}){{2,}}", lambda _match: separator, slug)
    return re.sub(f"^(?:{escaped})+|(?:{escaped})+$", "", slug)


def to_slug(
    text: str,
    separator: str = "-",
    downcase: bool = True,
    collapse: bool = True,
    segmenter: object = DEFAULT_SEGMENTER,
    options: LookupOptions | None = None,
    *,
    jobs: int = 1,
    fetch: FetchFunc = fetch_page,
    extract: ExtractFunc = parse_hiragana,
) -> str:
    """
    Build a URL slug from ``text``.

    Each word found by the segmenter is looked up separately, so compound
    nouns come out hyphenated ("学校案内" -> "gakkou-annai"); with
    ``segmenter=None`` each non-ASCII run is read in one lookup.
    """
    active_segmenter = resolve_segmenter(segmenter)
    tokens = tokenize(text, active_segmenter)
    lookup_options = options or LookupOptions()

    def _romanize(chunk: str) -> str:
        return resolve_romaji(chunk, lookup_options, fetch=fetch, extract=extract)

    parts = merge_ascii_parts(build_slug_parts(tokens, _romanize, jobs=jobs))
    joined = separator.join(part.text for part in parts)
    return normalize_slug(joined, separator, downcase=downcase, collapse=collapse)
