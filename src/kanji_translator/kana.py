from __future__ import annotations

from types import MappingProxyType

__all__ = [
    "DIGRAPHS",
    "BASIC",
    "hiragana_to_katakana",
    "katakana_to_hiragana",
    "hiragana_to_romaji",
]

SMALL_TSU = "っ"
PROLONGED_SOUND_MARK = "ー"

# ぁ (U+3041) .. ゔ (U+3094) sit exactly 0x60 below ァ .. ヴ.
_KANA_OFFSET = 0x60
_HIRAGANA_FIRST = 0x3041
_HIRAGANA_LAST = 0x3094

# Pairs that are remapped explicitly rather than by offset.
_EXPLICIT_PAIRS = (
    ("ゝ", "ヽ"),
    ("ゞ", "ヾ"),
    ("ゕ", "ヵ"),
    ("ゖ", "ヶ"),
)


def _build_kana_tables() -> tuple[MappingProxyType, MappingProxyType]:
    to_kata: dict[int, int] = {}
    for code in range(_HIRAGANA_FIRST, _HIRAGANA_LAST + 1):
        to_kata[code] = code + _KANA_OFFSET
    for hira, kata in _EXPLICIT_PAIRS:
        to_kata[ord(hira)] = ord(kata)
    to_hira = {kata: hira for hira, kata in to_kata.items()}
    return MappingProxyType(to_kata), MappingProxyType(to_hira)


_HIRA_TO_KATA, _KATA_TO_HIRA = _build_kana_tables()


DIGRAPHS = MappingProxyType({
    "きゃ": "kya", "きゅ": "kyu", "きぇ": "kye", "きょ": "kyo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎぇ": "gye", "ぎょ": "gyo",
    "しゃ": "sha", "しゅ": "shu", "しぇ": "she", "しょ": "sho",
    "じゃ": "ja", "じゅ": "ju", "じぇ": "je", "じょ": "jo",
    "ちゃ": "cha", "ちゅ": "chu", "ちぇ": "che", "ちょ": "cho",
    "ぢゃ": "ja", "ぢゅ": "ju", "ぢょ": "jo",
    "にゃ": "nya", "にゅ": "nyu", "にぇ": "nye", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひぇ": "hye", "ひょ": "hyo",
    "びゃ": "bya", "びゅ": "byu", "びぇ": "bye", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴぇ": "pye", "ぴょ": "pyo",
    "みゃ": "mya", "みゅ": "myu", "みぇ": "mye", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りぇ": "rye", "りょ": "ryo",
    "ゔぁ": "va", "ゔぃ": "vi", "ゔぇ": "ve", "ゔぉ": "vo",
    "ふぁ": "fa", "ふぃ": "fi", "ふぇ": "fe", "ふぉ": "fo",
    "てぃ": "ti", "でぃ": "di", "とぅ": "tu", "どぅ": "du",
    "うぃ": "wi", "うぇ": "we", "うぉ": "wo",
    "つぁ": "tsa", "つぃ": "tsi", "つぇ": "tse", "つぉ": "tso",
    "くぁ": "kwa", "ぐぁ": "gwa",
})

BASIC = MappingProxyType({
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "o",
    "ん": "n",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa",
    "ゕ": "ka", "ゖ": "ke", "ゔ": "vu",
})


def hiragana_to_katakana(text: str) -> str:
    return text.translate(_HIRA_TO_KATA)


def katakana_to_hiragana(text: str) -> str:
    return text.translate(_KATA_TO_HIRA)


def _geminate_consonant(following: str) -> str:
    """Letter a small tsu adds in front of ``following`` (already romaji or still kana)."""
    romaji = following if following.isascii() else BASIC.get(following, "")
    if not romaji or not ("a" <= romaji[0] <= "z"):
        return ""
    if romaji[0] == "c":
        # Hepburn writes っち / っちゃ as tchi / tcha.
        return "t"
    if romaji[0] == "n":
        # No double n before a vowel or y: っな stays "na".
        return ""
    return romaji[0]


def hiragana_to_romaji(text: str) -> str:
    """
    Romanize hiragana (Hepburn). Unknown characters pass through unchanged.

    ー is dropped rather than lengthening the preceding vowel. A small tsu in
    front of the n-row adds no letter (っな -> "na"), so the only "nn" before a
    vowel or y is a moraic ん followed by the n-row (あんない -> "annai"); that
    one is kept, since folding it would make "annai" read as "anai".
    """
    converted = text
    for kana, romaji in DIGRAPHS.items():
        converted = converted.replace(kana, romaji)

    pieces: list[str] = []
    length = len(converted)
    for idx, ch in enumerate(converted):
        if ch == SMALL_TSU:
            if idx + 1 < length:
                pieces.append(_geminate_consonant(converted[idx + 1]))
            continue
        if ch == PROLONGED_SOUND_MARK:
            continue
        pieces.append(BASIC.get(ch, ch))
    return "".join(pieces)
