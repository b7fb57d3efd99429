"""Enumeration types for the Grok client."""
from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Role of a message participant."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Capability(StrEnum):
    """Functional mode a request runs in; must be one of the model's modalities."""

    TEXT = "text"
    IMAGE = "image"


class ContentKind(StrEnum):
    """Discriminator for content part types."""

    TEXT = "text"
    IMAGE_URL = "image_url"


class SystemPlacement(StrEnum):
    """Where a standing system message is inserted into the conversation."""

    APPEND = "append"
    PREPEND = "prepend"
