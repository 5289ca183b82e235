from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .script import is_ascii_alnum, is_boundary_space
from .segment import Segmenter

__all__ = [
    "Boundary",
    "AsciiRun",
    "JapaneseChunk",
    "Token",
    "tokenize",
]


@dataclass(frozen=True)
class Boundary:
    """Whitespace between words. Never rendered; it only stops ASCII parts from merging."""


@dataclass(frozen=True)
class AsciiRun:
    text: str


@dataclass(frozen=True)
class JapaneseChunk:
    """
    One piece of a non-ASCII run as returned by the segmenter, or the whole
    run when segmentation is off.

    The text is not guaranteed to contain Japanese script (punctuation and
    symbols land here too); callers tag it by content.
    """

    text: str


Token = Union[Boundary, AsciiRun, JapaneseChunk]


def tokenize(text: str, segmenter: Segmenter | None) -> list[Token]:
    """
    Split ``text`` into ASCII runs, boundaries and segmented Japanese chunks.

    With ``segmenter=None`` segmentation is switched off: ASCII runs and
    boundaries are still split out, but each non-ASCII run comes back whole.
    """
    tokens: list[Token] = []
    length = len(text)
    pos = 0
    while pos < length:
        ch = text[pos]
        if is_boundary_space(ch):
            while pos < length and is_boundary_space(text[pos]):
                pos += 1
            if not tokens or not isinstance(tokens[-1], Boundary):
                tokens.append(Boundary())
            continue
        start = pos
        if is_ascii_alnum(ch):
            while pos < length and is_ascii_alnum(text[pos]):
                pos += 1
            tokens.append(AsciiRun(text[start:pos]))
            continue
        while pos < length and not is_ascii_alnum(text[pos]) and not is_boundary_space(text[pos]):
            pos += 1
        chunk = text[start:pos]
        if segmenter is None:
            tokens.append(JapaneseChunk(chunk))
            continue
        for piece in segmenter.segment(chunk):
            if piece:
                tokens.append(JapaneseChunk(piece))
    return tokens
