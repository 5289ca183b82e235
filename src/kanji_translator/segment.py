from __future__ import annotations

import importlib
import os
import shlex
import warnings
from pathlib import Path
from typing import Protocol, runtime_checkable

from .errors import ArgumentError, SegmenterUnavailableError

__all__ = [
    "Segmenter",
    "FugashiSegmenter",
    "PassthroughSegmenter",
    "DEFAULT_SEGMENTER",
    "SEGMENTER_CHOICES",
    "get_unidic_dicdir",
    "resolve_segmenter",
]

UNIDIC_DIR_ENV = "KANJI_TRANSLATOR_UNIDIC_DIR"
DEFAULT_SEGMENTER = "fugashi"
SEGMENTER_CHOICES = ("fugashi", "space", "none")


@runtime_checkable
class Segmenter(Protocol):
    def segment(self, chunk: str) -> list[str]:
        """Split a contiguous non-ASCII, non-whitespace span into words, in order."""
        ...


def _dicdir_from_package(module_name: str) -> Path | None:
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return None
    dicdir = Path(getattr(module, "DICDIR", ""))
    if dicdir and (dicdir / "dicrc").exists():
        return dicdir
    return None


def get_unidic_dicdir() -> Path | None:
    env_dir = os.environ.get(UNIDIC_DIR_ENV)
    if env_dir:
        candidate = Path(env_dir).expanduser()
        if (candidate / "dicrc").exists():
            return candidate
    for module_name in ("unidic_lite", "unidic"):
        dicdir = _dicdir_from_package(module_name)
        if dicdir is not None:
            return dicdir
    return None


class FugashiSegmenter:
    """MeCab word segmentation through fugashi, using UniDic when it can be found."""

    def __init__(self) -> None:
        try:
            from fugashi import Tagger  # type: ignore
        except ImportError as exc:
            raise SegmenterUnavailableError(
                "Word segmentation requires 'fugashi' (MeCab) to be installed; "
                "pass segmenter='space' or segmenter=None to skip it."
            ) from exc

        dicdir = get_unidic_dicdir()
        if dicdir:
            args = f"-d {shlex.quote(str(dicdir))}"
            mecabrc = dicdir / "mecabrc"
            if mecabrc.is_file():
                args += f" -r {shlex.quote(str(mecabrc))}"
            try:
                self._tagger = Tagger(args)
            except RuntimeError as exc:
                raise SegmenterUnavailableError(
                    f"Failed to initialize fugashi with the UniDic dictionary at '{dicdir}': {exc}"
                ) from exc
        else:
            warnings.warn(
                "UniDic not detected; falling back to the default MeCab dictionary.",
                RuntimeWarning,
                stacklevel=2,
            )
            try:
                self._tagger = Tagger()
            except RuntimeError as exc:
                raise SegmenterUnavailableError(
                    f"Failed to initialize fugashi: {exc}"
                ) from exc

    def segment(self, chunk: str) -> list[str]:
        if not chunk:
            return []
        return [word.surface for word in self._tagger(chunk) if word.surface]


class PassthroughSegmenter:
    """Keeps each chunk whole, so only whitespace separates words."""

    def segment(self, chunk: str) -> list[str]:
        return [chunk] if chunk else []


def resolve_segmenter(value: object = DEFAULT_SEGMENTER) -> Segmenter | None:
    """
    Turn a ``segmenter`` option into a segmenter instance.

    Accepts ``"fugashi"``, ``"space"``, ``None``/``"none"`` (no segmentation)
    or any object with a ``segment`` method. The fugashi backend is built
    here so a missing installation fails before any lookup is made.
    """
    if value is None:
        return None
    if isinstance(value, str):
        name = value.strip().lower()
        if name == "fugashi":
            return FugashiSegmenter()
        if name == "space":
            return PassthroughSegmenter()
        if name == "none":
            return None
        raise ArgumentError(
            f"Unknown segmenter '{value}'; expected one of {', '.join(SEGMENTER_CHOICES)}."
        )
    if callable(getattr(value, "segment", None)):
        return value  # type: ignore[return-value]
    raise ArgumentError("segmenter must be a name, None, or an object with a segment() method")
