from __future__ import annotations

import pytest

from kanji_translator.script import (
    has_reading,
    is_ascii_alnum,
    is_boundary_space,
    is_hiragana_text,
    is_japanese,
    is_katakana_text,
)
from kanji_translator.segment import PassthroughSegmenter
from kanji_translator.tokens import AsciiRun, Boundary, JapaneseChunk, tokenize


class _StubSegmenter:
    def __init__(self, words: dict[str, list[str]] | None = None) -> None:
        self.words = words or {}
        self.calls: list[str] = []

    def segment(self, chunk: str) -> list[str]:
        self.calls.append(chunk)
        return self.words.get(chunk, [chunk])


@pytest.mark.parametrize("ch", ["a", "Z", "5"])
def test_ascii_alnum_accepts(ch: str) -> None:
    assert is_ascii_alnum(ch)


@pytest.mark.parametrize("ch", ["-", "あ", "ａ", "５", " "])
def test_ascii_alnum_rejects(ch: str) -> None:
    assert not is_ascii_alnum(ch)


def test_boundary_space() -> None:
    assert is_boundary_space(" ")
    assert is_boundary_space("\t")
    assert is_boundary_space("\n")
    assert is_boundary_space("　")
    assert not is_boundary_space("a")
    assert not is_boundary_space("、")


@pytest.mark.parametrize("text", ["学校", "ひらがな", "カタカナ", "々", "〆", "ヶ", "。", "Hello世界"])
def test_is_japanese(text: str) -> None:
    assert is_japanese(text)


@pytest.mark.parametrize("text", ["hello", "!", "", "123", "　"])
def test_is_not_japanese(text: str) -> None:
    assert not is_japanese(text)


def test_pure_kana_predicates() -> None:
    assert is_hiragana_text("らーめん")
    assert is_katakana_text("ラーメン")
    assert not is_hiragana_text("らーメン")
    assert not is_katakana_text("学校")
    assert not is_hiragana_text("がっこう ")


def test_tokenize_segments_japanese_chunk() -> None:
    segmenter = _StubSegmenter({"学校案内": ["学校", "案内"]})
    assert tokenize("学校案内", segmenter) == [JapaneseChunk("学校"), JapaneseChunk("案内")]


def test_tokenize_mixed_script() -> None:
    tokens = tokenize("Rails 5 入門", PassthroughSegmenter())
    assert tokens == [
        AsciiRun("Rails"),
        Boundary(),
        AsciiRun("5"),
        Boundary(),
        JapaneseChunk("入門"),
    ]


def test_tokenize_collapses_consecutive_boundaries() -> None:
    tokens = tokenize(" a \t　b ", PassthroughSegmenter())
    assert tokens == [Boundary(), AsciiRun("a"), Boundary(), AsciiRun("b"), Boundary()]


def test_tokenize_hands_only_non_ascii_runs_to_segmenter() -> None:
    segmenter = _StubSegmenter()
    tokens = tokenize("Python入門と実践2nd", segmenter)
    assert segmenter.calls == ["入門と実践"]
    assert tokens == [AsciiRun("Python"), JapaneseChunk("入門と実践"), AsciiRun("2nd")]


def test_tokenize_keeps_punctuation_chunks() -> None:
    tokens = tokenize("abc。def", PassthroughSegmenter())
    assert tokens == [AsciiRun("abc"), JapaneseChunk("。"), AsciiRun("def")]


def test_tokenize_drops_empty_segments() -> None:
    segmenter = _StubSegmenter({"学校": ["", "学校", ""]})
    assert tokenize("学校", segmenter) == [JapaneseChunk("学校")]


def test_has_reading_ignores_punctuation() -> None:
    for text in ("学校", "がっこう", "タワー", "々", "ヶ", "ㇰ", "入門！"):
        assert has_reading(text)
    for text in ("。", "、", "「", "」", "〜", "！", "abc", ""):
        assert not has_reading(text)


def test_tokenize_without_segmentation() -> None:
    assert tokenize("学校案内", None) == [JapaneseChunk("学校案内")]
    assert tokenize("学校 案内", None) == [JapaneseChunk("学校"), Boundary(), JapaneseChunk("案内")]
    assert tokenize("", None) == []
    assert tokenize("", PassthroughSegmenter()) == []


def test_tokenize_without_segmentation_keeps_ascii_runs() -> None:
    tokens = tokenize("Python 入門v3", None)
    assert tokens == [
        AsciiRun("Python"),
        Boundary(),
        JapaneseChunk("入門"),
        AsciiRun("v3"),
    ]
