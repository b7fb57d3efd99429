"""Chat message type."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from grok_client.errors import InvalidOptionsError
from grok_client.types.content import ContentPart
from grok_client.types.enums import ContentKind, Role


@dataclass(frozen=True)
class Message:
    """A single message in a conversation.

    ``role`` may be ``None`` when the caller supplied a bare ``{"content": ...}``
    record; such messages are sent without a ``role`` key.
    """

    role: Role | None
    content: str | tuple[ContentPart, ...] = ""

    # --- Factory classmethods ---

    @classmethod
    def system(cls, text: str) -> Message:
        """Create a system message."""
        return cls(role=Role.SYSTEM, content=text)

    @classmethod
    def user(cls, content: str | tuple[ContentPart, ...]) -> Message:
        """Create a user message."""
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, text: str) -> Message:
        """Create an assistant message."""
        return cls(role=Role.ASSISTANT, content=text)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        """Parse a wire-shaped message record.

        Raises :class:`InvalidOptionsError` on an unknown role or a record
        without ``content``.
        """
        if "content" not in data:
            raise InvalidOptionsError(f"Message has no content: {dict(data)!r}")
        raw_role = data.get("role")
        role: Role | None = None
        if raw_role is not None:
            try:
                role = Role(raw_role)
            except ValueError as exc:
                raise InvalidOptionsError(f"Unknown message role: {raw_role!r}", cause=exc) from exc

        raw_content = data["content"]
        content: str | tuple[ContentPart, ...]
        if isinstance(raw_content, str):
            content = raw_content
        elif isinstance(raw_content, (list, tuple)):
            content = tuple(
                p if isinstance(p, ContentPart) else ContentPart.from_dict(p)
                for p in raw_content
            )
        else:
            content = "" if raw_content is None else str(raw_content)
        return cls(role=role, content=content)

    # --- Properties ---

    @property
    def text(self) -> str:
        """Plain content, or the concatenated text parts. Returns '' if none."""
        if isinstance(self.content, str):
            return self.content
        return "".join(
            p.text for p in self.content
            if p.kind == ContentKind.TEXT and p.text is not None
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.role is not None:
            out["role"] = str(self.role)
        if isinstance(self.content, str):
            out["content"] = self.content
        else:
            out["content"] = [p.to_dict() for p in self.content]
        return out
