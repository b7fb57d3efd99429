"""Grok client type definitions."""
from __future__ import annotations

from grok_client.types.enums import Capability, ContentKind, Role, SystemPlacement
from grok_client.types.content import ContentPart, ImageUrl
from grok_client.types.messages import Message
from grok_client.types.inputs import (
    AnalyzeOptions,
    ChatInput,
    ChatOptions,
    ImageOptions,
    MessageSequence,
    MessagesInput,
    PlainText,
    SingleMessage,
    coerce_chat_input,
    coerce_messages,
)
from grok_client.types.request import Call, ChatPayload, ImagePayload, Payload, RawPayload
from grok_client.types.response import Usage
from grok_client.types.result import CallResult

__all__ = [
    "Capability",
    "ContentKind",
    "Role",
    "SystemPlacement",
    "ContentPart",
    "ImageUrl",
    "Message",
    "AnalyzeOptions",
    "ChatInput",
    "ChatOptions",
    "ImageOptions",
    "MessageSequence",
    "MessagesInput",
    "PlainText",
    "SingleMessage",
    "coerce_chat_input",
    "coerce_messages",
    "Call",
    "ChatPayload",
    "ImagePayload",
    "Payload",
    "RawPayload",
    "Usage",
    "CallResult",
]
