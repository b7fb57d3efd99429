"""HTTP client wrapper around httpx."""
from __future__ import annotations

import json
import time
from dataclasses import dataclass, field

import httpx

from grok_client.errors import NetworkError, RequestTimeoutError, error_from_status_code


@dataclass(frozen=True)
class HttpResponse:
    """A successful (2xx) HTTP exchange."""

    status_code: int
    raw_text: str
    headers: dict[str, str] = field(default_factory=dict)
    elapsed: float = 0.0


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into grok_client exceptions."""

    def __init__(
        self,
        timeout: float = 3600.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(timeout=httpx.Timeout(timeout), transport=transport)

    def post(
        self,
        url: str,
        content: bytes,
        headers: dict[str, str],
        timeout: float | None = None,
    ) -> HttpResponse:
        """POST *content* to *url* and return the raw response.

        Raises :class:`RequestTimeoutError` or :class:`NetworkError` on
        transport failure and an :class:`HttpStatusError` subclass on a
        status outside ``[200, 300)``.
        """
        kwargs = {} if timeout is None else {"timeout": httpx.Timeout(timeout)}
        start = time.monotonic()
        try:
            resp = self._client.post(url, content=content, headers=headers, **kwargs)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"Request to {url} timed out: {exc}", cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"Request to {url} failed: {exc}", cause=exc) from exc

        raw_text = resp.text
        if resp.status_code < 200 or resp.status_code >= 300:
            try:
                body = resp.json()
            except ValueError:
                body = None
            raise error_from_status_code(
                resp.status_code,
                raw_text,
                raw=body if isinstance(body, dict) else None,
            )

        return HttpResponse(
            status_code=resp.status_code,
            raw_text=raw_text,
            headers=dict(resp.headers),
            elapsed=time.monotonic() - start,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()


def encode_json(body: dict) -> bytes:
    """Serialize a request body; slashes and non-ASCII text are left unescaped."""
    return json.dumps(body, ensure_ascii=False).encode("utf-8")
