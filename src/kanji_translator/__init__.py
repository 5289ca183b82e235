from .errors import (
    ArgumentError,
    LookupHTTPError,
    LookupTimeoutError,
    ReadingParseError,
    SegmenterUnavailableError,
    TranslatorError,
)
from .fetch import LookupOptions, set_debug_logging
from .kana import hiragana_to_katakana, hiragana_to_romaji, katakana_to_hiragana
from .script import has_reading, is_japanese
from .segment import FugashiSegmenter, PassthroughSegmenter, Segmenter
from .tokens import AsciiRun, Boundary, JapaneseChunk, tokenize
from .translator import to_hiragana, to_katakana, to_romaji, to_slug
from .version import USER_AGENT, __version__

__all__ = [
    "to_hiragana",
    "to_katakana",
    "to_romaji",
    "to_slug",
    "hiragana_to_katakana",
    "katakana_to_hiragana",
    "hiragana_to_romaji",
    "is_japanese",
    "has_reading",
    "tokenize",
    "AsciiRun",
    "Boundary",
    "JapaneseChunk",
    "Segmenter",
    "FugashiSegmenter",
    "PassthroughSegmenter",
    "LookupOptions",
    "set_debug_logging",
    "TranslatorError",
    "ArgumentError",
    "LookupTimeoutError",
    "LookupHTTPError",
    "ReadingParseError",
    "SegmenterUnavailableError",
    "USER_AGENT",
    "__version__",
]
