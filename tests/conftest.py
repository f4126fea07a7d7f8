"""Root conftest — shared fixtures.

Invariants:
    - No test reads real MARVEL_API_* variables or .env files
    - HTTP goes through httpx.MockTransport, never the network
"""

import json
import os

import httpx
import pytest

from marvelapi.client import MarvelClient
from marvelapi.core.config import Credentials, MarvelSettings

PUBLIC_KEY = "test-public"
PRIVATE_KEY = "test-private"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("MARVEL_API_"):
            monkeypatch.delenv(key, raising=False)
    # .env relativo al cwd: apuntamos a un directorio vacío.
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def credentials():
    return Credentials(public_key=PUBLIC_KEY, private_key=PRIVATE_KEY)


@pytest.fixture
def settings():
    return MarvelSettings(
        public_key=PUBLIC_KEY,
        private_key=PRIVATE_KEY,
        base_url="https://gateway.test/v1/public",
        _env_file=None,
    )


def envelope(results, *, offset=0, limit=20, total=None, code=200, status="Ok", **extra):
    """Success envelope as the API sends it."""
    body = {
        "code": code,
        "status": status,
        "copyright": "© 2024 MARVEL",
        "attributionText": "Data provided by Marvel. © 2024 MARVEL",
        "etag": "abc123",
        "data": {
            "offset": offset,
            "limit": limit,
            "total": len(results) if total is None else total,
            "count": len(results),
            "results": list(results),
        },
    }
    body.update(extra)
    return body


def json_response(payload, status_code=200):
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


class RecordingHandler:
    """MockTransport handler that records requests and replays queued responses."""

    def __init__(self, *responses):
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        template = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        return httpx.Response(
            template.status_code,
            headers=template.headers,
            content=template.content,
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
async def make_client(settings):
    clients = []

    def _make(handler, **kwargs):
        client = MarvelClient(settings, transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.aclose()


@pytest.fixture
def story_payloads():
    return [
        {"id": 41, "title": "Forty-one", "type": "story"},
        {"id": 42, "title": "Forty-two", "type": "cover"},
        {"id": 43, "title": "Forty-three", "type": "story"},
    ]


@pytest.fixture(name="envelope")
def envelope_fixture():
    return envelope


@pytest.fixture(name="json_response")
def json_response_fixture():
    return json_response


@pytest.fixture
def recorder():
    """Factory: recorder(response, ...) -> RecordingHandler."""
    return RecordingHandler
