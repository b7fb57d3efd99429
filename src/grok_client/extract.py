"""Pull simple values out of raw API response bodies.

Every function here is total: when the expected structure is missing the
caller's fallback (or ``None``) is returned instead of raising.

Choice text is looked up along an ordered path so the same call works on
chat-completion, legacy text-completion and streaming-delta shaped bodies:

1. ``choices[i].message.content``
2. ``choices[i].text``
3. ``choices[i].delta.content``
"""
from __future__ import annotations

import json
from typing import Any

from grok_client.types.response import Usage

_CHOICE_TEXT_PATHS: tuple[tuple[str, ...], ...] = (
    ("message", "content"),
    ("text",),
    ("delta", "content"),
)


def parse_body(raw: str | bytes | None) -> dict[str, Any] | None:
    """Decode a JSON object body. Returns ``None`` if absent or not an object."""
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except ValueError:
        return None
    return data if isinstance(data, dict) and data else None


def _dig(obj: Any, path: tuple[str, ...]) -> Any:
    for key in path:
        if not isinstance(obj, dict) or key not in obj:
            return None
        obj = obj[key]
    return obj


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def extract_text(
    raw: str | bytes | None,
    choice_index: int = 0,
    fallback: str = "",
) -> str:
    """Return the text of ``choices[choice_index]`` or *fallback*."""
    body = parse_body(raw)
    if body is None:
        return fallback

    choices = body.get("choices")
    if not isinstance(choices, list) or not 0 <= choice_index < len(choices):
        return fallback
    choice = choices[choice_index]
    if not isinstance(choice, dict) or not choice:
        return fallback

    for path in _CHOICE_TEXT_PATHS:
        value = _dig(choice, path)
        if value is not None:
            return _as_text(value)
    return fallback


def extract_id(raw: str | bytes | None) -> str | None:
    """Return the response ``id`` if present."""
    body = parse_body(raw)
    if body is None or body.get("id") is None:
        return None
    return str(body["id"])


def extract_usage(raw: str | bytes | None) -> Usage:
    """Return token usage; counts the body does not report are ``None``."""
    body = parse_body(raw)
    usage = body.get("usage") if body else None
    if not isinstance(usage, dict):
        return Usage()

    def _int(key: str) -> int | None:
        val = usage.get(key)
        if val is None:
            return None
        try:
            return int(val)
        except (ValueError, TypeError):
            return None

    return Usage(
        prompt_tokens=_int("prompt_tokens"),
        completion_tokens=_int("completion_tokens"),
        total_tokens=_int("total_tokens"),
    )


def extract_images(raw: str | bytes | None) -> list[str]:
    """Return the ``url`` or ``b64_json`` of each generated image."""
    body = parse_body(raw)
    data = body.get("data") if body else None
    if not isinstance(data, list):
        return []
    images: list[str] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        value = item.get("url") or item.get("b64_json")
        if value:
            images.append(str(value))
    return images
