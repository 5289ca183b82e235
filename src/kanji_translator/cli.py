from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from .errors import SegmenterUnavailableError, TranslatorError
from .fetch import set_debug_logging
from .segment import DEFAULT_SEGMENTER, SEGMENTER_CHOICES
from .translator import to_hiragana, to_katakana, to_romaji, to_slug
from .version import USER_AGENT, __version__

_READING_COMMANDS: dict[str, tuple[str, Callable[..., str]]] = {
    "hira": ("Print the hiragana reading of Japanese text.", to_hiragana),
    "kata": ("Print the katakana reading of Japanese text.", to_katakana),
    "roma": ("Print the Hepburn romaji reading of Japanese text.", to_romaji),
}


def _add_version_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"kanji-translator {__version__}",
    )


def _add_lookup_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Connect/read timeout in seconds for each lookup request (default: 5).",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=2,
        help="Extra attempts after a timeout, 429 or 5xx response (default: 2).",
    )
    parser.add_argument(
        "--backoff",
        type=float,
        default=0.5,
        help="Base delay in seconds for exponential backoff between attempts (default: 0.5).",
    )
    parser.add_argument(
        "--user-agent",
        default=USER_AGENT,
        help=f"User-Agent header sent to the lookup service (default: {USER_AGENT}).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print lookup attempts, retries and readings to stderr.",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kanji-translator",
        description=(
            "Convert Japanese text to hiragana, katakana, romaji or URL slugs. "
            "Commands: hira, kata, roma, slug."
        ),
    )
    _add_version_flag(ap)
    return ap


def build_reading_parser(command: str) -> argparse.ArgumentParser:
    description, _ = _READING_COMMANDS[command]
    ap = argparse.ArgumentParser(prog=f"kanji-translator {command}", description=description)
    _add_version_flag(ap)
    ap.add_argument(
        "text",
        nargs="+",
        help="Japanese text to convert. Wrap the phrase in quotes if it contains spaces.",
    )
    _add_lookup_flags(ap)
    return ap


def build_slug_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kanji-translator slug",
        description="Turn Japanese text into a romaji URL slug.",
    )
    _add_version_flag(ap)
    ap.add_argument(
        "text",
        nargs="*",
        help="Text to slugify. Omit when using --file.",
    )
    ap.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Read one input per line from this file and print one slug per line.",
    )
    ap.add_argument(
        "-s",
        "--separator",
        default="-",
        help="Separator placed between words (default: '-').",
    )
    ap.add_argument(
        "--keep-case",
        action="store_true",
        help="Do not lowercase before normalizing.",
    )
    ap.add_argument(
        "--no-collapse",
        action="store_true",
        help="Keep repeated separators instead of collapsing them.",
    )
    ap.add_argument(
        "--segmenter",
        choices=SEGMENTER_CHOICES,
        default=DEFAULT_SEGMENTER,
        help=(
            "Word segmentation: 'fugashi' (default) splits compounds with MeCab, "
            "'space' splits on whitespace only, 'none' reads the whole text at once."
        ),
    )
    ap.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="Resolve up to this many words concurrently (default: 1).",
    )
    _add_lookup_flags(ap)
    return ap


def _lookup_kwargs(args: argparse.Namespace) -> dict[str, object]:
    return {
        "timeout": args.timeout,
        "retries": args.retries,
        "backoff": args.backoff,
        "user_agent": args.user_agent,
    }


def _report_error(console: Console, exc: TranslatorError) -> int:
    console.print(f"[bold red]error:[/] {escape(str(exc))}")
    if isinstance(exc, SegmenterUnavailableError):
        return 2
    return 1


def _run_reading(command: str, args: argparse.Namespace) -> int:
    set_debug_logging(bool(args.debug))
    _, convert = _READING_COMMANDS[command]
    text = " ".join(args.text).strip()
    if not text:
        raise SystemExit("No text provided for conversion.")
    try:
        converted = convert(text, **_lookup_kwargs(args))
    except TranslatorError as exc:
        return _report_error(Console(stderr=True), exc)
    print(converted)
    return 0


def _read_inputs(path: Path) -> list[str]:
    if not path.is_file():
        raise SystemExit(f"Input file not found: {path}")
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def _run_slug(args: argparse.Namespace) -> int:
    set_debug_logging(bool(args.debug))
    if args.file is not None and args.text:
        raise SystemExit("Pass either text or --file, not both.")
    if args.file is not None:
        inputs = _read_inputs(args.file)
    else:
        text = " ".join(args.text).strip()
        if not text:
            raise SystemExit("No text provided for conversion.")
        inputs = [text]

    segmenter = None if args.segmenter == "none" else args.segmenter
    slug_kwargs = {
        "separator": args.separator,
        "downcase": not args.keep_case,
        "collapse": not args.no_collapse,
        "segmenter": segmenter,
        "jobs": args.jobs,
        **_lookup_kwargs(args),
    }

    console = Console(stderr=True)
    show_progress = args.file is not None and len(inputs) > 1 and console.is_terminal
    progress: Progress | None = None
    task = None
    if show_progress:
        progress = Progress(
            TextColumn("{task.description}", justify="left"),
            BarColumn(bar_width=None),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        )
        progress.start()
        task = progress.add_task("Slugifying", total=len(inputs))
    try:
        for line in inputs:
            try:
                slug = to_slug(line, **slug_kwargs)
            except TranslatorError as exc:
                return _report_error(console, exc)
            print(slug)
            if progress is not None and task is not None:
                progress.advance(task, 1)
    finally:
        if progress is not None:
            progress.stop()
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] in _READING_COMMANDS:
        reading_parser = build_reading_parser(argv[0])
        reading_args = reading_parser.parse_args(argv[1:])
        return _run_reading(argv[0], reading_args)
    if argv and argv[0] == "slug":
        slug_parser = build_slug_parser()
        slug_args = slug_parser.parse_args(argv[1:])
        return _run_slug(slug_args)

    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0
    # Only -h/-v get past parse_args here; anything else is rejected by argparse.
    parser.parse_args(argv)
    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
