import json
import os
import tempfile

# app.app configures a rotating log file on import; keep it out of the repo
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="emoji-gallery-logs-"))

import pytest
import requests

import upstream.emojihub as emojihub


class FakeResponse:
    """Stands in for requests.Response; tracks whether it was released."""

    def __init__(self, body, status_code: int = 200, url: str = "", timeout=None):
        self.content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        self.status_code = status_code
        self.url = url
        self.timeout = timeout
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.closed = True


@pytest.fixture
def sample_emojis():
    """Sample EmojiHub payload."""
    return [
        {
            "name": "grinning face",
            "category": "face",
            "group": "smileys",
            "htmlCode": ["&#128512;"],
            "unicode": ["U+1F600"],
        },
        {
            "name": "dog face",
            "category": "animal mammal",
            "group": "animals",
            "htmlCode": ["&#128054;"],
            "unicode": ["U+1F436"],
        },
        {
            "name": "cat face",
            "category": "animal mammal",
            "group": "animals",
            "htmlCode": ["&#128049;"],
            "unicode": ["U+1F431"],
        },
    ]


@pytest.fixture
def fake_upstream(monkeypatch):
    """
    Route SESSION.get to a canned response.

    Call the fixture with a payload (or an exception instance to raise);
    the returned list collects every FakeResponse handed out.
    """
    served: list[FakeResponse] = []

    def install(body, status_code: int = 200):
        def fake_get(url, timeout=None):
            if isinstance(body, Exception):
                raise body
            resp = FakeResponse(body, status_code, url, timeout)
            served.append(resp)
            return resp

        monkeypatch.setattr(emojihub.SESSION, "get", fake_get)
        return served

    return install


@pytest.fixture
def connection_refused():
    return requests.ConnectionError("Connection refused")
