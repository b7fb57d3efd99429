"""Caller input variants.

Loosely-shaped caller input (a bare string, one message, a list of messages,
or an options mapping) is classified exactly once by :func:`coerce_chat_input`
into one of the variants below. The request builder only ever sees these
types.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, Union

from grok_client.errors import InvalidOptionsError
from grok_client.types.messages import Message

_MESSAGE_KEYS = frozenset({"role", "content"})


@dataclass(frozen=True)
class PlainText:
    """A bare prompt string, sent as one user message."""

    text: str


@dataclass(frozen=True)
class SingleMessage:
    """One message record not wrapped in a sequence."""

    message: Message


@dataclass(frozen=True)
class MessageSequence:
    """An ordered conversation."""

    messages: tuple[Message, ...]


MessagesInput = Union[PlainText, SingleMessage, MessageSequence]


@dataclass(frozen=True)
class ChatOptions:
    """Recognized chat options. ``None`` means "use the default".

    - ``messages``: the conversation, in any of the accepted message shapes;
      raw values are classified on construction
    - ``model``: catalog model name (default ``grok-4`` or the client's selection)
    - ``temperature``: sampling temperature (default ``0.7``)
    - ``stream``: ask the API for a streamed body (default ``False``)
    - ``max_tokens``: completion cap (default ``4096``; ``0`` omits the key)
    """

    messages: MessagesInput | str | Message | Mapping[str, Any] | Sequence[Any] | None = None
    model: str | None = None
    temperature: float | None = None
    stream: bool | None = None
    max_tokens: int | None = None

    def __post_init__(self) -> None:
        if self.messages is not None:
            object.__setattr__(self, "messages", coerce_messages(self.messages))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ChatOptions:
        _check_keys(cls, data)
        return cls(
            messages=data.get("messages"),
            model=data.get("model"),
            temperature=data.get("temperature"),
            stream=data.get("stream"),
            max_tokens=data.get("max_tokens"),
        )


ChatInput = Union[PlainText, SingleMessage, MessageSequence, ChatOptions]


@dataclass(frozen=True)
class ImageOptions:
    """Recognized image-generation options.

    - ``prompt``: image description (default ``"A cat in a tree"``)
    - ``model``: catalog model name (default ``grok-2-image``)
    - ``response_format``: ``"url"`` or ``"b64_json"``; omitted when unset
    - ``n``: number of images; omitted when unset
    """

    prompt: str | None = None
    model: str | None = None
    response_format: str | None = None
    n: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ImageOptions:
        _check_keys(cls, data)
        return cls(**dict(data))


@dataclass(frozen=True)
class AnalyzeOptions:
    """Options for asking a vision model about one image.

    ``image`` is either raw bytes or an already base64-encoded string.
    """

    prompt: str
    image: bytes | str
    detail: str = "high"
    media_type: str = "image/jpeg"
    model: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AnalyzeOptions:
        _check_keys(cls, data)
        missing = [k for k in ("prompt", "image") if not data.get(k)]
        if missing:
            raise InvalidOptionsError(f"Missing analyze option(s): {', '.join(missing)}")
        return cls(**dict(data))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def _check_keys(cls: type, data: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidOptionsError(
            f"Unrecognized {cls.__name__} key(s): {', '.join(unknown)}"
        )


def _to_message(value: Any) -> Message:
    if isinstance(value, Message):
        return value
    if isinstance(value, Mapping):
        return Message.from_dict(value)
    raise InvalidOptionsError(f"Not a message: {value!r}")


def _is_message_record(value: Mapping[str, Any]) -> bool:
    return "content" in value and set(value) <= _MESSAGE_KEYS


def coerce_messages(value: Any) -> MessagesInput:
    """Classify the ``messages`` field of chat input."""
    if isinstance(value, (PlainText, SingleMessage, MessageSequence)):
        return value
    if isinstance(value, str):
        return PlainText(value)
    if isinstance(value, Message):
        return SingleMessage(value)
    if isinstance(value, Mapping):
        if "content" not in value:
            raise InvalidOptionsError(f"Message has no content: {dict(value)!r}")
        return SingleMessage(Message.from_dict(value))
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return MessageSequence(tuple(_to_message(v) for v in value))
    raise InvalidOptionsError(f"Unsupported messages value: {value!r}")


def coerce_chat_input(value: Any) -> ChatInput:
    """Classify caller chat input into a :data:`ChatInput` variant."""
    if isinstance(value, ChatOptions):
        return value
    if isinstance(value, Mapping) and not _is_message_record(value):
        return ChatOptions.from_mapping(value)
    return coerce_messages(value)
