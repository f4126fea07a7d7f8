"""Auth + Dispatcher — tests for request signing and transport behaviour.

Tests cover:
    - md5(ts + private + public) matches the documented example
    - apikey always attached; ts/hash only when hashing is required
    - hash recomputed per call (timestamp-dependent)
    - gzip toggle only changes Accept-Encoding
    - deadlines and transport timeouts -> CancelledOrTimedOutError
    - connection, redirect and decoding failures -> TransportFailureError
    - task cancellation propagates as asyncio.CancelledError
"""

import asyncio
import itertools

import httpx
import pytest

from marvelapi.adapters.auth import auth_params, compute_hash
from marvelapi.adapters.dispatcher import HttpxDispatcher
from marvelapi.adapters.http_client import build_async_client
from marvelapi.core.config import Credentials, MarvelSettings
from marvelapi.core.domain.wire import RequestDescriptor
from marvelapi.core.errors import (
    CancelledOrTimedOutError,
    ConfigurationError,
    TransportFailureError,
)


# ─── Auth ────────────────────────────────────────────────────────

def test_compute_hash_documented_example():
    assert compute_hash("1", "abcd", "1234") == "ffd275c5130566a2916217b101f26150"


def test_auth_params_with_hash(credentials):
    params = auth_params(credentials, ts="1")
    assert params == {
        "apikey": credentials.public_key,
        "ts": "1",
        "hash": compute_hash("1", credentials.private_key, credentials.public_key),
    }


def test_auth_params_public_key_only():
    creds = Credentials(public_key="pub")
    assert auth_params(creds, require_hash=False) == {"apikey": "pub"}


def test_auth_params_hash_without_private_key_fails():
    with pytest.raises(ConfigurationError):
        auth_params(Credentials(public_key="pub"), require_hash=True)


# ─── Dispatcher ──────────────────────────────────────────────────

def _client(handler, **settings_overrides):
    settings = MarvelSettings(
        public_key="pub",
        private_key="priv",
        base_url="https://gateway.test/v1/public",
        _env_file=None,
        **settings_overrides,
    )
    return build_async_client(settings, transport=httpx.MockTransport(handler))


async def test_send_merges_query_and_auth(credentials, recorder, json_response):
    handler = recorder(json_response({"code": 200}))
    async with _client(handler) as http:
        dispatcher = HttpxDispatcher(http, clock=lambda: "1")
        raw = await dispatcher.send(
            RequestDescriptor("/series", {"titleStartsWith": "Amazing", "limit": "10"}),
            credentials,
        )

    request = handler.last
    assert request.method == "GET"
    assert request.url.path == "/v1/public/series"
    assert dict(request.url.params) == {
        "titleStartsWith": "Amazing",
        "limit": "10",
        "apikey": credentials.public_key,
        "ts": "1",
        "hash": compute_hash("1", credentials.private_key, credentials.public_key),
    }
    assert raw.status_code == 200
    assert raw.url == "/series"


async def test_hash_is_recomputed_per_call(credentials, recorder, json_response):
    handler = recorder(json_response({"code": 200}))
    ticks = itertools.count(1)
    async with _client(handler) as http:
        dispatcher = HttpxDispatcher(http, clock=lambda: str(next(ticks)))
        await dispatcher.send(RequestDescriptor("/stories"), credentials)
        await dispatcher.send(RequestDescriptor("/stories"), credentials)

    first, second = (r.url.params for r in handler.requests)
    assert (first["ts"], second["ts"]) == ("1", "2")
    assert first["hash"] != second["hash"]


async def test_browser_keys_send_only_apikey(recorder, json_response):
    handler = recorder(json_response({"code": 200}))
    async with _client(handler) as http:
        dispatcher = HttpxDispatcher(http, require_hash=False)
        await dispatcher.send(RequestDescriptor("/comics"), Credentials(public_key="pub"))

    assert dict(handler.last.url.params) == {"apikey": "pub"}


async def test_non_2xx_is_returned_raw(credentials, recorder):
    handler = recorder(httpx.Response(409, text='{"code":409,"status":"Limit greater than 100."}'))
    async with _client(handler) as http:
        raw = await HttpxDispatcher(http).send(RequestDescriptor("/comics"), credentials)
    assert raw.status_code == 409
    assert "Limit greater than 100." in raw.body


@pytest.mark.parametrize("use_gzip,expected", [(True, "gzip"), (False, "identity")])
async def test_gzip_toggle_sets_accept_encoding(credentials, recorder, json_response, use_gzip, expected):
    handler = recorder(json_response({"code": 200}))
    async with _client(handler, use_gzip=use_gzip) as http:
        await HttpxDispatcher(http).send(RequestDescriptor("/events"), credentials)
    assert handler.last.headers["Accept-Encoding"] == expected


async def test_deadline_expiry_raises_timeout_error(credentials, json_response):
    async def slow(request):
        await asyncio.sleep(1)
        return json_response({"code": 200})

    async with _client(slow) as http:
        with pytest.raises(CancelledOrTimedOutError) as exc_info:
            await HttpxDispatcher(http).send(RequestDescriptor("/stories"), credentials, timeout=0.01)
    assert exc_info.value.timeout == 0.01


async def test_transport_timeout_raises_timeout_error(credentials):
    def timeout(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    async with _client(timeout) as http:
        with pytest.raises(CancelledOrTimedOutError):
            await HttpxDispatcher(http).send(RequestDescriptor("/stories"), credentials)


async def test_connection_failure_raises_transport_error(credentials):
    def refused(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(refused) as http:
        with pytest.raises(TransportFailureError):
            await HttpxDispatcher(http).send(RequestDescriptor("/stories"), credentials)


@pytest.mark.parametrize(
    "error",
    [
        httpx.TooManyRedirects,
        httpx.DecodingError,
        httpx.RemoteProtocolError,
    ],
)
async def test_other_request_errors_raise_transport_error(credentials, error):
    def failing(request):
        raise error("request failed", request=request)

    async with _client(failing) as http:
        with pytest.raises(TransportFailureError):
            await HttpxDispatcher(http).send(RequestDescriptor("/stories"), credentials)


async def test_task_cancellation_propagates(credentials, json_response):
    started = asyncio.Event()

    async def hang(request):
        started.set()
        await asyncio.sleep(10)
        return json_response({"code": 200})

    async with _client(hang) as http:
        task = asyncio.create_task(
            HttpxDispatcher(http).send(RequestDescriptor("/stories"), credentials)
        )
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
