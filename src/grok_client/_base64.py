"""Base64 helpers for inline image content."""
from __future__ import annotations

import base64
import mimetypes


def encode_to_base64(data: bytes) -> str:
    """Base64-encode raw bytes and return as a string."""
    return base64.b64encode(data).decode("ascii")


def make_data_uri(data: bytes | str, media_type: str) -> str:
    """Build a ``data:`` URI from raw bytes or an already-encoded string.

    A string that is already a ``data:`` URI is returned unchanged.
    """
    if isinstance(data, str):
        if data.startswith("data:"):
            return data
        encoded = data
    else:
        encoded = encode_to_base64(data)
    return f"data:{media_type};base64,{encoded}"


def infer_media_type(file_path: str) -> str:
    """Guess the MIME type for a file path, defaulting to ``image/jpeg``."""
    mime, _ = mimetypes.guess_type(file_path)
    return mime or "image/jpeg"
