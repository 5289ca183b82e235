from __future__ import annotations

from importlib import metadata

__all__ = ["__version__", "USER_AGENT"]

DIST_NAME = "kanji-translator"
UNKNOWN_VERSION = "0.0.0+unknown"


def _resolve_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION


__version__ = _resolve_version()

USER_AGENT = f"{DIST_NAME}/{__version__}"
