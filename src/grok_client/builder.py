"""Turn caller input into canonical, immutable :class:`Call` descriptions.

All functions here are pure: they read no session state and return a fresh
``Call`` that can be dispatched from any thread.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from grok_client._base64 import make_data_uri
from grok_client.errors import InvalidOptionsError
from grok_client.types.content import ContentPart
from grok_client.types.enums import Capability, Role, SystemPlacement
from grok_client.types.inputs import (
    AnalyzeOptions,
    ChatOptions,
    ImageOptions,
    MessageSequence,
    MessagesInput,
    PlainText,
    SingleMessage,
    coerce_chat_input,
)
from grok_client.types.messages import Message
from grok_client.types.request import Call, ChatPayload, ImagePayload, RawPayload

CHAT_ENDPOINT = "/chat/completions"
IMAGE_ENDPOINT = "/images/generations"

DEFAULT_CHAT_MODEL = "grok-4"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_STREAM = False
DEFAULT_MAX_TOKENS = 4096

DEFAULT_IMAGE_MODEL = "grok-2-image"
DEFAULT_IMAGE_PROMPT = "A cat in a tree"


def _messages_tuple(value: MessagesInput | None) -> tuple[Message, ...]:
    if value is None:
        return ()
    if isinstance(value, PlainText):
        return (Message.user(value.text),)
    if isinstance(value, SingleMessage):
        return (value.message,)
    return value.messages


def inject_system(
    messages: tuple[Message, ...],
    system: str | None,
    placement: SystemPlacement = SystemPlacement.APPEND,
) -> tuple[Message, ...]:
    """Add the standing system message unless one is already present."""
    if not system or any(m.role == Role.SYSTEM for m in messages):
        return messages
    if placement == SystemPlacement.PREPEND:
        return (Message.system(system), *messages)
    return (*messages, Message.system(system))


def _chat_call(
    options: ChatOptions,
    *,
    system: str | None,
    placement: SystemPlacement,
    default_model: str,
) -> Call:
    messages = inject_system(_messages_tuple(options.messages), system, placement)
    payload = ChatPayload(
        messages=messages,
        model=default_model if options.model is None else options.model,
        temperature=DEFAULT_TEMPERATURE if options.temperature is None else options.temperature,
        stream=DEFAULT_STREAM if options.stream is None else bool(options.stream),
        max_tokens=DEFAULT_MAX_TOKENS if options.max_tokens is None else options.max_tokens,
    )
    return Call(endpoint=CHAT_ENDPOINT, capability=Capability.TEXT, payload=payload)


def build_chat(
    value: Any,
    *,
    system: str | None = None,
    placement: SystemPlacement = SystemPlacement.APPEND,
    default_model: str = DEFAULT_CHAT_MODEL,
) -> Call:
    """Build a chat completion call.

    *value* may be a prompt string, one message (``Message`` or mapping with a
    ``content`` key), a list of messages, a :class:`ChatOptions` or an options
    mapping. Options left unset take the defaults ``model=default_model``,
    ``temperature=0.7``, ``stream=False`` and ``max_tokens=4096``.
    """
    chat_input = coerce_chat_input(value)
    if not isinstance(chat_input, ChatOptions):
        chat_input = ChatOptions(messages=chat_input)
    return _chat_call(chat_input, system=system, placement=placement, default_model=default_model)


def build_image(value: ImageOptions | Mapping[str, Any] | str | None = None) -> Call:
    """Build an image generation call.

    A bare string is taken as the prompt. Unset options default to
    ``prompt="A cat in a tree"`` and ``model="grok-2-image"``.
    """
    if value is None:
        options = ImageOptions()
    elif isinstance(value, ImageOptions):
        options = value
    elif isinstance(value, str):
        options = ImageOptions(prompt=value)
    elif isinstance(value, Mapping):
        options = ImageOptions.from_mapping(value)
    else:
        raise InvalidOptionsError(f"Unsupported image options: {value!r}")

    payload = ImagePayload(
        prompt=DEFAULT_IMAGE_PROMPT if options.prompt is None else options.prompt,
        model=DEFAULT_IMAGE_MODEL if options.model is None else options.model,
        response_format=options.response_format,
        n=options.n,
    )
    return Call(endpoint=IMAGE_ENDPOINT, capability=Capability.IMAGE, payload=payload)


def build_analyze(
    value: AnalyzeOptions | Mapping[str, Any],
    *,
    system: str | None = None,
    placement: SystemPlacement = SystemPlacement.APPEND,
    default_model: str = DEFAULT_CHAT_MODEL,
) -> Call:
    """Build a chat call asking a vision model about one inline image."""
    options = value if isinstance(value, AnalyzeOptions) else AnalyzeOptions.from_mapping(value)
    message = Message.user((
        ContentPart.of_image_url(make_data_uri(options.image, options.media_type), options.detail),
        ContentPart.of_text(options.prompt),
    ))
    chat_options = ChatOptions(
        messages=MessageSequence((message,)),
        model=options.model,
        temperature=options.temperature,
        max_tokens=options.max_tokens,
    )
    return _chat_call(chat_options, system=system, placement=placement, default_model=default_model)


def build_prompt(
    payload: Mapping[str, Any],
    *,
    endpoint: str,
    capability: Capability | str,
) -> Call:
    """Wrap a caller-assembled body for *endpoint*; it must name a ``model``."""
    model = payload.get("model")
    if not isinstance(model, str) or not model:
        raise InvalidOptionsError("Payload must include a 'model' name")
    return Call(endpoint=endpoint, capability=capability, payload=RawPayload(model=model, body=dict(payload)))
