"""Per-call result record."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from grok_client.costs import estimate_cost
from grok_client.extract import extract_id, extract_images, extract_text, extract_usage, parse_body
from grok_client.types.request import Call, ImagePayload
from grok_client.types.response import Usage


@dataclass(frozen=True)
class CallResult:
    """The outcome of one dispatched :class:`Call`.

    ``raw_text`` is the response body exactly as received. It is only parsed
    on demand because chat, image and streamed bodies differ in shape.
    """

    call: Call
    status_code: int
    raw_text: str
    headers: dict[str, str] = field(default_factory=dict)
    elapsed: float = 0.0

    def text(self, choice_index: int = 0, fallback: str = "") -> str:
        return extract_text(self.raw_text, choice_index, fallback)

    def json(self) -> dict[str, Any] | None:
        return parse_body(self.raw_text)

    @property
    def id(self) -> str | None:
        return extract_id(self.raw_text)

    @property
    def usage(self) -> Usage:
        return extract_usage(self.raw_text)

    @property
    def images(self) -> list[str]:
        return extract_images(self.raw_text)

    @property
    def image_count(self) -> int:
        if not isinstance(self.call.payload, ImagePayload):
            return 0
        return len(self.images)

    def cost(self) -> float:
        """Estimate this call's cost from reported usage and image count."""
        usage = self.usage
        return estimate_cost(
            self.call.model,
            input_tokens=usage.prompt_tokens,
            output_tokens=usage.completion_tokens,
            image_count=self.image_count,
        )
