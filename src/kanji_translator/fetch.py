from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Union
from urllib.parse import quote

import requests

from .errors import ArgumentError, LookupHTTPError, LookupTimeoutError, TranslatorError
from .version import USER_AGENT

__all__ = [
    "LOOKUP_HOST",
    "LookupOptions",
    "ReadingRequest",
    "Success",
    "TransientFailure",
    "FatalFailure",
    "FetchOutcome",
    "attempt_fetch",
    "backoff_for",
    "build_lookup_url",
    "fetch_page",
    "set_debug_logging",
]

LOOKUP_HOST = "yomikatawa.com"
_LOOKUP_PATH = "/kanji/"
_JITTER_SECONDS = 0.05
_MAX_RETRY_AFTER = 30.0

_DEBUG_LOG = False


def set_debug_logging(enabled: bool) -> None:
    global _DEBUG_LOG
    _DEBUG_LOG = enabled


def _debug_log(message: str) -> None:
    if _DEBUG_LOG:
        print(f"[kanji-translator debug] {message}", file=sys.stderr)


@dataclass(frozen=True)
class LookupOptions:
    """
    Network settings shared by every conversion entry point.

    ``retries`` counts the extra attempts granted after the first one; a
    transport timeout gets one more attempt than an HTTP failure.
    """

    timeout: float = 5.0
    retries: int = 2
    backoff: float = 0.5
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ArgumentError("timeout must be a number of seconds")
        if self.timeout <= 0:
            raise ArgumentError("timeout must be positive")
        if isinstance(self.retries, bool) or not isinstance(self.retries, int):
            raise ArgumentError("retries must be an integer")
        if self.retries < 0:
            raise ArgumentError("retries must be non-negative")
        if isinstance(self.backoff, bool) or not isinstance(self.backoff, (int, float)):
            raise ArgumentError("backoff must be a number of seconds")
        if self.backoff < 0:
            raise ArgumentError("backoff must be non-negative")
        if not isinstance(self.user_agent, str) or not self.user_agent.strip():
            raise ArgumentError("user_agent must be a non-empty string")


@dataclass(frozen=True)
class ReadingRequest:
    text: str
    timeout: float
    max_retries: int
    backoff_base: float
    user_agent: str

    @classmethod
    def from_options(cls, text: str, options: LookupOptions) -> "ReadingRequest":
        return cls(
            text=text,
            timeout=float(options.timeout),
            max_retries=options.retries,
            backoff_base=float(options.backoff),
            user_agent=options.user_agent,
        )


@dataclass(frozen=True)
class Success:
    body: str


@dataclass(frozen=True)
class TransientFailure:
    kind: str  # "timeout" | "rate_limited" | "server_error"
    attempt: int
    message: str
    status: int | None = None
    retry_after: float | None = None


@dataclass(frozen=True)
class FatalFailure:
    kind: str  # "unexpected_status" | "connection"
    message: str
    status: int | None = None


FetchOutcome = Union[Success, TransientFailure, FatalFailure]


def build_lookup_url(text: str) -> str:
    return f"https://{LOOKUP_HOST}{_LOOKUP_PATH}{quote(text, safe='')}"


def backoff_for(
    attempt: int,
    base: float = 0.5,
    rand: Callable[[], float] = random.random,
) -> float:
    """Exponential delay before retrying ``attempt``, plus up to 50ms of jitter."""
    return base * (2 ** (attempt - 1)) + rand() * _JITTER_SECONDS


def _parse_retry_after(value: str | None) -> float | None:
    if not value:
        return None
    try:
        seconds = float(value.strip())
    except ValueError:
        # HTTP-date form is not honoured; the exponential backoff still applies.
        return None
    if seconds <= 0:
        return None
    return min(seconds, _MAX_RETRY_AFTER)


def attempt_fetch(url: str, request: ReadingRequest, attempt: int) -> FetchOutcome:
    """Run a single GET against the lookup service and classify what happened."""
    session = requests.Session()
    try:
        try:
            resp = session.get(
                url,
                headers={"User-Agent": request.user_agent},
                timeout=request.timeout,
            )
        except requests.Timeout as exc:
            return TransientFailure("timeout", attempt, str(exc) or "request timed out")
        except requests.RequestException as exc:
            return FatalFailure("connection", f"connection failed: {exc}")

        status = resp.status_code
        if status == 200:
            return Success(resp.content.decode("utf-8", errors="replace"))
        if status == 429:
            return TransientFailure(
                "rate_limited",
                attempt,
                "rate limited",
                status=status,
                retry_after=_parse_retry_after(resp.headers.get("Retry-After")),
            )
        if 500 <= status <= 599:
            return TransientFailure(
                "server_error", attempt, f"server error: {status}", status=status
            )
        return FatalFailure("unexpected_status", f"unexpected response: {status}", status=status)
    finally:
        session.close()


def _may_retry(failure: TransientFailure, max_retries: int) -> bool:
    if failure.kind == "timeout":
        return failure.attempt <= max_retries + 1
    return failure.attempt <= max_retries


def _terminal_error(failure: TransientFailure | FatalFailure) -> TranslatorError:
    if isinstance(failure, TransientFailure) and failure.kind == "timeout":
        return LookupTimeoutError(failure.message)
    return LookupHTTPError(failure.message, status=failure.status)


def fetch_page(
    request: ReadingRequest,
    *,
    sleep: Callable[[float], None] | None = None,
    rand: Callable[[], float] | None = None,
) -> str:
    """
    Fetch the lookup page for ``request.text`` and return the raw HTML body.

    Timeouts, 429 and 5xx responses are retried with exponential backoff;
    any other status fails at once. Raises ``LookupTimeoutError`` or
    ``LookupHTTPError`` once the attempts are used up.
    """
    sleep = sleep or time.sleep
    rand = rand or random.random
    url = build_lookup_url(request.text)
    attempt = 1
    while True:
        _debug_log(f"GET {url} (attempt {attempt})")
        outcome = attempt_fetch(url, request, attempt)
        if isinstance(outcome, Success):
            return outcome.body
        if isinstance(outcome, FatalFailure):
            _debug_log(f"giving up: {outcome.message}")
            raise _terminal_error(outcome)
        if not _may_retry(outcome, request.max_retries):
            _debug_log(f"retries exhausted after attempt {attempt}: {outcome.message}")
            raise _terminal_error(outcome)
        if outcome.retry_after:
            _debug_log(f"honouring Retry-After of {outcome.retry_after:.2f}s")
            sleep(outcome.retry_after)
        delay = backoff_for(attempt, request.backoff_base, rand)
        _debug_log(f"{outcome.message}; retrying in {delay:.2f}s")
        sleep(delay)
        attempt += 1
