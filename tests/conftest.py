"""Shared pytest fixtures: a fake remote node served through httpx.MockTransport."""

import json
import os

import httpx
import pytest

from maki_remote.nodes.observer import RecordingObserver
from maki_remote.nodes.remote import Remote


class FakeRemote:
    """Routes requests by (method, path) and records what it received."""

    def __init__(self):
        self.routes: dict[tuple[str, str], object] = {}
        self.requests: list[httpx.Request] = []

    def route(self, method: str, path: str, response) -> None:
        """``response`` is an httpx.Response or a callable taking the request."""
        self.routes[(method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": "not found"})
        if callable(handler):
            return handler(request)
        # Fresh copy so a canned response can be served more than once
        return httpx.Response(
            handler.status_code, headers=handler.headers, content=handler.content
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def fake():
    return FakeRemote()


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def make_remote(fake, observer):
    """Build a Remote wired to the fake node."""

    def _make(host="node.test:3000", secure=False, **extra):
        return Remote(
            {"host": host, "secure": secure, **extra},
            observer=observer,
            transport=httpx.MockTransport(fake),
        )

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Unset MAKI_REMOTE_* and undo anything a .env file loaded."""
    keys = ("MAKI_REMOTE_HOST", "MAKI_REMOTE_SECURE")
    for key in keys:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in keys:
        os.environ.pop(key, None)
