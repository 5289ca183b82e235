from __future__ import annotations

__all__ = [
    "TranslatorError",
    "ArgumentError",
    "LookupTimeoutError",
    "LookupHTTPError",
    "ReadingParseError",
    "SegmenterUnavailableError",
]


class TranslatorError(Exception):
    """Base class for every error raised by kanji_translator."""


class ArgumentError(TranslatorError, TypeError):
    """Raised when a conversion receives non-text input or an invalid option."""


class LookupTimeoutError(TranslatorError, TimeoutError):
    """Raised when every lookup attempt timed out."""


class LookupHTTPError(TranslatorError):
    """Raised when the lookup service keeps failing or answers with an unusable status."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ReadingParseError(TranslatorError, ValueError):
    """Raised when a lookup response does not contain a reading."""


class SegmenterUnavailableError(TranslatorError, RuntimeError):
    """Raised when the requested word segmenter cannot be initialized."""
