from __future__ import annotations

from . import slug as _slug
from .errors import ArgumentError
from .fetch import LookupOptions
from .reading import resolve_hiragana, resolve_katakana, resolve_romaji
from .segment import DEFAULT_SEGMENTER
from .version import USER_AGENT

__all__ = [
    "to_hiragana",
    "to_katakana",
    "to_romaji",
    "to_slug",
]


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise ArgumentError(f"text must be a str, not {type(text).__name__}")
    return text


def to_hiragana(
    text: str,
    *,
    timeout: float = 5.0,
    retries: int = 2,
    backoff: float = 0.5,
    user_agent: str = USER_AGENT,
) -> str:
    """Reading of ``text`` in hiragana, e.g. "学校案内" -> "がっこうあんない"."""
    text = _require_text(text)
    options = LookupOptions(timeout=timeout, retries=retries, backoff=backoff, user_agent=user_agent)
    return resolve_hiragana(text, options)


def to_katakana(
    text: str,
    *,
    timeout: float = 5.0,
    retries: int = 2,
    backoff: float = 0.5,
    user_agent: str = USER_AGENT,
) -> str:
    text = _require_text(text)
    options = LookupOptions(timeout=timeout, retries=retries, backoff=backoff, user_agent=user_agent)
    return resolve_katakana(text, options)


def to_romaji(
    text: str,
    *,
    timeout: float = 5.0,
    retries: int = 2,
    backoff: float = 0.5,
    user_agent: str = USER_AGENT,
) -> str:
    text = _require_text(text)
    options = LookupOptions(timeout=timeout, retries=retries, backoff=backoff, user_agent=user_agent)
    return resolve_romaji(text, options)


def to_slug(
    text: str,
    *,
    separator: str = "-",
    downcase: bool = True,
    collapse: bool = True,
    segmenter: object = DEFAULT_SEGMENTER,
    jobs: int = 1,
    timeout: float = 5.0,
    retries: int = 2,
    backoff: float = 0.5,
    user_agent: str = USER_AGENT,
) -> str:
    """
    URL-safe slug for ``text``.

    ``segmenter`` is "fugashi" (default), "space" (split on whitespace only),
    None (one lookup for the whole text) or a custom object with a
    ``segment(chunk)`` method. ``jobs`` > 1 resolves words concurrently.
    """
    text = _require_text(text)
    if not isinstance(separator, str):
        raise ArgumentError("separator must be a str")
    if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
        raise ArgumentError("jobs must be a positive integer")
    options = LookupOptions(timeout=timeout, retries=retries, backoff=backoff, user_agent=user_agent)
    return _slug.to_slug(
        text,
        separator,
        downcase,
        collapse,
        segmenter,
        options,
        jobs=jobs,
    )
