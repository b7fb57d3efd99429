"""Model catalog for looking up model modalities, capabilities and pricing."""
from __future__ import annotations

from grok_client.catalog.types import ModelInfo, Pricing, RateLimits
from grok_client.catalog._data import MODELS
from grok_client.errors import InvalidModelError
from grok_client.types.enums import Capability


def get_model_info(model_id: str) -> ModelInfo | None:
    """Look up a model by exact ID. Returns ``None`` if no match is found."""
    for model in MODELS:
        if model.id == model_id:
            return model
    return None


def lookup(model_id: str) -> ModelInfo:
    """Like :func:`get_model_info` but raises :class:`InvalidModelError`."""
    info = get_model_info(model_id)
    if info is None:
        raise InvalidModelError(model_id)
    return info


def list_models(capability: Capability | str | None = None) -> list[ModelInfo]:
    """Return models in definition order, optionally filtered by modality."""
    if capability is None:
        return list(MODELS)
    return [m for m in MODELS if m.supports(capability)]


def models_with_tag(tag: str) -> list[ModelInfo]:
    """Return models carrying a capability tag such as ``"reasoning"``."""
    return [m for m in MODELS if m.has_tag(tag)]


__all__ = [
    "ModelInfo",
    "Pricing",
    "RateLimits",
    "MODELS",
    "get_model_info",
    "lookup",
    "list_models",
    "models_with_tag",
]
