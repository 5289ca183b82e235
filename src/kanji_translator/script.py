from __future__ import annotations

__all__ = [
    "is_ascii_alnum",
    "is_boundary_space",
    "is_japanese_char",
    "is_japanese",
    "has_reading",
    "is_hiragana_text",
    "is_katakana_text",
]

IDEOGRAPHIC_SPACE = "　"
PROLONGED_SOUND_MARK = "ー"

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0b\x0c")
_EXTRA_JAPANESE = frozenset("々〆ヵヶ")


def is_ascii_alnum(ch: str) -> bool:
    return len(ch) == 1 and ch.isascii() and ch.isalnum()


def is_boundary_space(ch: str) -> bool:
    return ch in _ASCII_WHITESPACE or ch == IDEOGRAPHIC_SPACE


def _is_kanji_char(ch: str) -> bool:
    code = ord(ch)
    return (
        0x4E00 <= code <= 0x9FFF
        or 0x3400 <= code <= 0x4DBF
        or 0x20000 <= code <= 0x2A6DF
        or 0x2A700 <= code <= 0x2B73F
        or 0x2B740 <= code <= 0x2B81F
        or 0x2B820 <= code <= 0x2CEAF
        or 0x2CEB0 <= code <= 0x2EBEF
        or 0xF900 <= code <= 0xFAFF
        or 0x2F800 <= code <= 0x2FA1F
    )


def is_japanese_char(ch: str) -> bool:
    if len(ch) != 1:
        return False
    if ch in _EXTRA_JAPANESE:
        return True
    code = ord(ch)
    return (
        _is_kanji_char(ch)
        # Hiragana and katakana blocks.
        or 0x3040 <= code <= 0x30FF
        # Katakana phonetic extensions (small ㇰ, ㇱ, ...).
        or 0x31F0 <= code <= 0x31FF
        # CJK symbols and punctuation, without the ideographic space.
        or 0x3001 <= code <= 0x303F
    )


def is_japanese(text: str) -> bool:
    """True if ``text`` contains at least one kanji, kana or Japanese punctuation mark."""
    return any(is_japanese_char(ch) for ch in text)


def is_hiragana_text(text: str) -> bool:
    return all(0x3041 <= ord(ch) <= 0x309F or ch == PROLONGED_SOUND_MARK for ch in text)


def is_katakana_text(text: str) -> bool:
    return all(0x30A1 <= ord(ch) <= 0x30FF for ch in text)


def _is_readable_char(ch: str) -> bool:
    if ch in _EXTRA_JAPANESE:
        return True
    code = ord(ch)
    return (
        _is_kanji_char(ch)
        or 0x3041 <= code <= 0x309F
        or 0x30A1 <= code <= 0x30FF
        or 0x31F0 <= code <= 0x31FF
    )


def has_reading(text: str) -> bool:
    """
    True if ``text`` holds a kanji or kana, i.e. something a lookup can read.

    Punctuation and symbols such as 。 「 」 count as Japanese but have no reading.
    """
    return any(_is_readable_char(ch) for ch in text)
