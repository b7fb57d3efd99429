"""Canonical request payloads and the call description."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from grok_client.types.enums import Capability
from grok_client.types.messages import Message


@dataclass(frozen=True)
class ChatPayload:
    """Body of a ``/chat/completions`` request."""

    messages: tuple[Message, ...]
    model: str
    temperature: float = 0.7
    stream: bool = False
    max_tokens: int | None = 4096

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "messages": [m.to_dict() for m in self.messages],
            "model": self.model,
            "temperature": self.temperature,
            "stream": self.stream,
        }
        if self.max_tokens is not None and self.max_tokens > 0:
            body["max_tokens"] = self.max_tokens
        return body


@dataclass(frozen=True)
class ImagePayload:
    """Body of an ``/images/generations`` request."""

    prompt: str
    model: str
    response_format: str | None = None
    n: int | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"prompt": self.prompt, "model": self.model}
        if self.response_format is not None:
            body["response_format"] = self.response_format
        if self.n is not None:
            body["n"] = self.n
        return body


@dataclass(frozen=True)
class RawPayload:
    """A caller-assembled body sent as-is; only ``model`` is interpreted."""

    model: str
    body: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.body)


Payload = Union[ChatPayload, ImagePayload, RawPayload]


@dataclass(frozen=True)
class Call:
    """Self-contained description of one request to the API."""

    endpoint: str
    capability: Capability | str
    payload: Payload

    @property
    def model(self) -> str:
        return self.payload.model

    def body(self) -> dict[str, Any]:
        return self.payload.to_dict()
