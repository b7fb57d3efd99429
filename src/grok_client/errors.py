"""Error hierarchy for the Grok client."""
from __future__ import annotations

from typing import Any


class GrokError(Exception):
    """Base error for all grok_client errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(GrokError):
    """Invalid client configuration (e.g. no API key)."""


class InvalidOptionsError(GrokError):
    """Caller input has an unrecognized shape or option key."""


# ---------------------------------------------------------------------------
# Pre-flight validation errors
# ---------------------------------------------------------------------------


class InvalidModelError(GrokError):
    """The model name is not in the catalog."""

    def __init__(self, model: str) -> None:
        super().__init__(f"Invalid model name: {model}")
        self.model = model


class UnsupportedCapabilityError(GrokError):
    """The model exists but does not serve the selected capability."""

    def __init__(self, model: str, capability: str) -> None:
        super().__init__(
            f"Model {model!r} does not support capability {capability!r}"
        )
        self.model = model
        self.capability = capability


# ---------------------------------------------------------------------------
# Transport errors
# ---------------------------------------------------------------------------


class TransportError(GrokError):
    """The HTTP exchange failed before a status code was received."""


class NetworkError(TransportError):
    """A network-level error occurred (DNS, connection, protocol)."""


class RequestTimeoutError(TransportError):
    """The request timed out."""


# ---------------------------------------------------------------------------
# HTTP status errors
# ---------------------------------------------------------------------------


class HttpStatusError(GrokError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        error_code: str | None = None,
        retryable: bool = False,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.body = body
        self.error_code = error_code
        self.retryable = retryable
        self.raw = raw


class InvalidRequestError(HttpStatusError):
    """The request was malformed or invalid."""


class AuthenticationError(HttpStatusError):
    """Authentication failed (e.g. invalid API key)."""


class AccessDeniedError(HttpStatusError):
    """Access denied (e.g. insufficient permissions)."""


class NotFoundError(HttpStatusError):
    """Resource not found."""


class ContextLengthError(HttpStatusError):
    """Input exceeded the model's context window."""


class RateLimitError(HttpStatusError):
    """Rate limit exceeded."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


class ServerError(HttpStatusError):
    """Server-side error from the API."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


def error_from_status_code(
    status_code: int,
    body: str,
    *,
    raw: dict[str, Any] | None = None,
) -> HttpStatusError:
    """Map an HTTP status code to the appropriate error type.

    The message always carries the status and the response body so callers
    can diagnose failures without re-reading the response.
    """
    error_code: str | None = None
    if isinstance(raw, dict):
        err = raw.get("error")
        if isinstance(err, dict) and err.get("code") is not None:
            error_code = str(err["code"])
        elif isinstance(raw.get("code"), str):
            error_code = raw["code"]

    message = f"HTTP {status_code}: {body}"
    common = dict(status_code=status_code, body=body, error_code=error_code, raw=raw)

    if status_code in (400, 422):
        return InvalidRequestError(message, **common)
    if status_code == 401:
        return AuthenticationError(message, **common)
    if status_code == 403:
        return AccessDeniedError(message, **common)
    if status_code == 404:
        return NotFoundError(message, **common)
    if status_code == 413:
        return ContextLengthError(message, **common)
    if status_code == 429:
        return RateLimitError(message, **common)
    if 500 <= status_code <= 599:
        return ServerError(message, **common)
    return HttpStatusError(message, **common)
