"""Content part types for multimodal messages."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from grok_client.errors import InvalidOptionsError
from grok_client.types.enums import ContentKind


@dataclass(frozen=True)
class ImageUrl:
    """Image reference: https://... or data:image/<type>;base64,..."""

    url: str
    detail: str | None = None


@dataclass(frozen=True)
class ContentPart:
    """A single piece of content within a message (tagged union)."""

    kind: ContentKind
    text: str | None = None
    image_url: ImageUrl | None = None

    # --- Factory classmethods ---

    @classmethod
    def of_text(cls, text: str) -> ContentPart:
        """Create a text content part."""
        return cls(kind=ContentKind.TEXT, text=text)

    @classmethod
    def of_image_url(cls, url: str, detail: str | None = None) -> ContentPart:
        """Create an image content part from a URL or data URI."""
        return cls(kind=ContentKind.IMAGE_URL, image_url=ImageUrl(url=url, detail=detail))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContentPart:
        """Parse a wire-shaped content part."""
        kind = data.get("type")
        if kind == ContentKind.TEXT:
            return cls.of_text(str(data.get("text", "")))
        if kind == ContentKind.IMAGE_URL:
            image = data.get("image_url")
            if isinstance(image, str):
                return cls.of_image_url(image)
            if isinstance(image, Mapping) and "url" in image:
                return cls.of_image_url(str(image["url"]), image.get("detail"))
        raise InvalidOptionsError(f"Unrecognized content part: {dict(data)!r}")

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        if self.kind == ContentKind.IMAGE_URL and self.image_url is not None:
            image: dict[str, Any] = {"url": self.image_url.url}
            if self.image_url.detail is not None:
                image["detail"] = self.image_url.detail
            return {"type": "image_url", "image_url": image}
        return {"type": "text", "text": self.text or ""}
