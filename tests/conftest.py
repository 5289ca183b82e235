from __future__ import annotations

from pathlib import Path

import pytest

from kanji_translator.fetch import build_lookup_url

FIXTURES = Path(__file__).parent / "fixtures"


def reading_html(reading: str) -> str:
    return f'<table id="yomikata"><tbody><tr><td>{reading}</td></tr></tbody></table>'


class DummyResponse:
    def __init__(self, status_code: int, body: str = "", headers: dict[str, str] | None = None) -> None:
        self.status_code = status_code
        self.content = body.encode("utf-8")
        self.headers = headers or {}


class FakeLookupServer:
    """
    Stands in for requests.Session; answers per lookup text.

    Each route holds a queue of responses (or exceptions to raise); the last
    entry repeats once the queue is drained.
    """

    def __init__(self) -> None:
        self.routes: dict[str, list[object]] = {}
        self.requests: list[dict[str, object]] = []
        self.sessions_opened = 0
        self.sessions_closed = 0
        self.sleeps: list[float] = []

    def route(self, text: str, *responses: object) -> None:
        self.routes[build_lookup_url(text)] = list(responses)

    def reading(self, text: str, reading: str) -> None:
        self.route(text, DummyResponse(200, reading_html(reading)))

    def requested_urls(self) -> list[str]:
        return [str(entry["url"]) for entry in self.requests]

    def session(self) -> "_DummySession":
        self.sessions_opened += 1
        return _DummySession(self)

    def handle(self, url: str, headers: dict[str, str] | None, timeout: float | None) -> DummyResponse:
        self.requests.append({"url": url, "headers": headers or {}, "timeout": timeout})
        queue = self.routes.get(url)
        if not queue:
            raise AssertionError(f"Unexpected URL: {url}")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, BaseException):
            raise item
        assert isinstance(item, DummyResponse)
        return item


class _DummySession:
    def __init__(self, server: FakeLookupServer) -> None:
        self._server = server

    def get(self, url, *, headers=None, timeout=None):
        return self._server.handle(url, headers, timeout)

    def close(self) -> None:
        self._server.sessions_closed += 1


@pytest.fixture
def lookup_server(monkeypatch) -> FakeLookupServer:
    server = FakeLookupServer()
    monkeypatch.setattr("kanji_translator.fetch.requests.Session", server.session)
    monkeypatch.setattr("kanji_translator.fetch.time.sleep", server.sleeps.append)
    return server
