"""Tests for the HTTP client wrapper."""
from __future__ import annotations

import json

import httpx
import pytest

from grok_client._http import HttpClient, HttpResponse, encode_json
from grok_client.errors import (
    AuthenticationError,
    HttpStatusError,
    NetworkError,
    RequestTimeoutError,
    ServerError,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _client(handler) -> HttpClient:
    return HttpClient(transport=httpx.MockTransport(handler))


def _post(client: HttpClient) -> HttpResponse:
    return client.post(
        "https://api.test/v1/chat/completions",
        content=b'{"model":"grok-4"}',
        headers={"Authorization": "Bearer k", "Content-Type": "application/json"},
    )


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------


def test_post_returns_raw_text() -> None:
    client = _client(lambda request: httpx.Response(200, text='{"id":"abc"}'))
    resp = _post(client)
    assert resp.status_code == 200
    assert resp.raw_text == '{"id":"abc"}'
    assert resp.elapsed >= 0
    client.close()


def test_post_sends_body_and_headers() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["url"] = str(request.url)
        captured["body"] = request.content
        captured["auth"] = request.headers.get("authorization")
        return httpx.Response(200, text="{}")

    client = _client(handler)
    _post(client)
    assert captured == {
        "method": "POST",
        "url": "https://api.test/v1/chat/completions",
        "body": b'{"model":"grok-4"}',
        "auth": "Bearer k",
    }
    client.close()


def test_non_json_success_body_is_kept() -> None:
    client = _client(lambda request: httpx.Response(200, text="data: {}\n\ndata: [DONE]\n"))
    assert _post(client).raw_text == "data: {}\n\ndata: [DONE]\n"
    client.close()


# ---------------------------------------------------------------------------
# Status errors
# ---------------------------------------------------------------------------


def test_server_error() -> None:
    client = _client(lambda request: httpx.Response(500, json={"error": "down"}))
    with pytest.raises(ServerError) as exc_info:
        _post(client)
    assert exc_info.value.status_code == 500
    assert "down" in exc_info.value.body
    client.close()


def test_auth_error_with_plain_body() -> None:
    client = _client(lambda request: httpx.Response(401, text="nope"))
    with pytest.raises(AuthenticationError) as exc_info:
        _post(client)
    assert exc_info.value.body == "nope"
    assert exc_info.value.raw is None
    client.close()


def test_redirect_status_is_an_error() -> None:
    client = _client(lambda request: httpx.Response(304, text=""))
    with pytest.raises(HttpStatusError):
        _post(client)
    client.close()


# ---------------------------------------------------------------------------
# Transport errors
# ---------------------------------------------------------------------------


def test_connect_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    client = _client(handler)
    with pytest.raises(NetworkError) as exc_info:
        _post(client)
    assert "name resolution failed" in str(exc_info.value)
    assert isinstance(exc_info.value.cause, httpx.ConnectError)
    client.close()


def test_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    client = _client(handler)
    with pytest.raises(RequestTimeoutError):
        _post(client)
    client.close()


# ---------------------------------------------------------------------------
# encode_json
# ---------------------------------------------------------------------------


def test_encode_json_leaves_slashes_and_unicode() -> None:
    raw = encode_json({"url": "https://a/b", "text": "héllo"})
    assert b"https://a/b" in raw
    assert json.loads(raw) == {"url": "https://a/b", "text": "héllo"}
    assert "héllo".encode("utf-8") in raw
