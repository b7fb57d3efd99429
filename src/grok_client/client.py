"""Grok API client: a chainable session over the pure builder/dispatch core."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from grok_client._http import HttpClient, encode_json
from grok_client.builder import (
    CHAT_ENDPOINT,
    DEFAULT_CHAT_MODEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    build_analyze,
    build_chat,
    build_image,
    build_prompt,
)
from grok_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from grok_client.costs import estimate_cost
from grok_client.errors import ConfigurationError
from grok_client.extract import extract_id, extract_text
from grok_client.middleware import Middleware
from grok_client.types.enums import Capability, SystemPlacement
from grok_client.types.inputs import AnalyzeOptions, ImageOptions
from grok_client.types.request import Call
from grok_client.types.result import CallResult
from grok_client.validation import validate_call

log = logging.getLogger(__name__)


class GrokClient:
    """Client for the xAI chat-completion and image-generation API.

    There are two ways to use it:

    * Stateless: build a :class:`Call` with :mod:`grok_client.builder` and
      pass it to :meth:`execute`, which returns a fresh :class:`CallResult`.
      This path touches no client state and is safe to share across threads.
    * Chained: :meth:`chat`, :meth:`image`, :meth:`analyze` and :meth:`prompt`
      update the session (endpoint, capability, active model) and store the
      result as the last response, so ``client.chat("hi").result()`` works.

    The chained session is **not thread-safe**; use one client per
    conversation and never share it between concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        middleware: list[Middleware] | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("An API key is required")
        self._api_key = api_key
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = timeout
        self._http = http_client or HttpClient(timeout=timeout)
        self._middleware = list(middleware) if middleware else []

        # Session state
        self._endpoint: str = CHAT_ENDPOINT
        self._capability: Capability | str = Capability.TEXT
        self._selected_model: str | None = None
        self._active_model: str = DEFAULT_CHAT_MODEL
        self._system: str | None = None
        self._placement: SystemPlacement = SystemPlacement.APPEND
        self._last: CallResult | None = None

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> GrokClient:
        return cls(config.api_key, config.base_url, timeout=config.timeout, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> GrokClient:
        """Create a client from ``XAI_API_KEY`` / ``XAI_BASE_URL`` / ``XAI_TIMEOUT``."""
        return cls.from_config(ClientConfig.from_env(), **kwargs)

    # ------------------------------------------------------------------
    # Session selection (chainable)
    # ------------------------------------------------------------------

    def with_system(
        self, text: str, placement: SystemPlacement | str | None = None
    ) -> GrokClient:
        """Set a standing system message added to chats that lack one."""
        self._system = text
        if placement is not None:
            self._placement = SystemPlacement(placement)
        return self

    def model(self, name: str) -> GrokClient:
        """Select the model used by chats that do not name one."""
        self._selected_model = name
        self._active_model = name
        return self

    def capability(self, tag: Capability | str) -> GrokClient:
        self._capability = tag
        return self

    def endpoint(self, path: str) -> GrokClient:
        self._endpoint = path
        return self

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def current_endpoint(self) -> str:
        return self._endpoint

    @property
    def current_capability(self) -> Capability | str:
        return self._capability

    @property
    def active_model(self) -> str:
        return self._active_model

    @property
    def system_message(self) -> str | None:
        return self._system

    @property
    def system_placement(self) -> SystemPlacement:
        return self._placement

    @property
    def last_result(self) -> CallResult | None:
        return self._last

    # ------------------------------------------------------------------
    # Stateless dispatch
    # ------------------------------------------------------------------

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def url_for(self, endpoint: str) -> str:
        return self._base_url + endpoint

    def execute(self, call: Call) -> CallResult:
        """Validate and send *call* through the middleware chain.

        Raises :class:`InvalidModelError` or :class:`UnsupportedCapabilityError`
        before any network I/O, and transport / HTTP status errors from the
        exchange itself.
        """
        validate_call(call)

        chain = self._send
        for mw in reversed(self._middleware):
            prev_chain = chain
            chain = lambda c, _prev=prev_chain, _mw=mw: _mw(c, _prev)

        return chain(call)

    def _send(self, call: Call) -> CallResult:
        url = self.url_for(call.endpoint)
        log.debug("POST %s model=%s", url, call.model)
        resp = self._http.post(
            url,
            content=encode_json(call.body()),
            headers=self.headers(),
            timeout=self._timeout,
        )
        log.debug("POST %s -> %d (%.2fs)", url, resp.status_code, resp.elapsed)
        return CallResult(
            call=call,
            status_code=resp.status_code,
            raw_text=resp.raw_text,
            headers=resp.headers,
            elapsed=resp.elapsed,
        )

    # ------------------------------------------------------------------
    # Chained calls
    # ------------------------------------------------------------------

    def _dispatch(self, call: Call) -> GrokClient:
        self._last = None
        validate_call(call)
        self._active_model = call.model
        self._last = self.execute(call)
        return self

    def chat(self, value: Any) -> GrokClient:
        """Send a chat completion.

        *value* may be a prompt string, one message, a list of messages, or an
        options mapping / :class:`ChatOptions`.
        """
        call = build_chat(
            value,
            system=self._system,
            placement=self._placement,
            default_model=self._selected_model or DEFAULT_CHAT_MODEL,
        )
        self.endpoint(call.endpoint).capability(call.capability)
        return self._dispatch(call)

    def image(self, options: ImageOptions | Mapping[str, Any] | str | None = None) -> GrokClient:
        """Generate images; switches the session to the image endpoint."""
        call = build_image(options)
        self.endpoint(call.endpoint).capability(call.capability)
        return self._dispatch(call)

    def analyze(self, options: AnalyzeOptions | Mapping[str, Any]) -> GrokClient:
        """Ask a vision model about one image (``prompt``, ``image``, ``detail``)."""
        call = build_analyze(
            options,
            system=self._system,
            placement=self._placement,
            default_model=self._selected_model or DEFAULT_CHAT_MODEL,
        )
        self.endpoint(call.endpoint).capability(call.capability)
        return self._dispatch(call)

    def prompt(self, payload: Mapping[str, Any]) -> GrokClient:
        """Send a caller-assembled body to the current endpoint and capability."""
        call = build_prompt(payload, endpoint=self._endpoint, capability=self._capability)
        return self._dispatch(call)

    def raw(
        self,
        messages: Any,
        model: str = DEFAULT_CHAT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        stream: bool = False,
    ) -> str | None:
        """Chat and return the raw response body."""
        self.chat({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "stream": stream,
            "max_tokens": DEFAULT_MAX_TOKENS,
        })
        return self.response()

    # ------------------------------------------------------------------
    # Last-response conveniences
    # ------------------------------------------------------------------

    def result(self, choice_index: int = 0, fallback: str = "") -> str:
        """Return the text of a choice in the last response, or *fallback*."""
        return extract_text(self.response(), choice_index, fallback)

    def text(self, choice_index: int = 0, fallback: str = "") -> str:
        return self.result(choice_index, fallback)

    def response(self) -> str | None:
        """Return the last raw response body, or ``None`` before any call."""
        return self._last.raw_text if self._last is not None else None

    def id(self) -> str | None:
        return extract_id(self.response())

    def cost_estimate(
        self,
        in_tokens: int | None = None,
        out_tokens: int | None = None,
        images: int = 0,
    ) -> float:
        """Estimate the cost of usage against the active model's pricing."""
        return estimate_cost(self._active_model, in_tokens, out_tokens, images)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> GrokClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
