"""Built-in model table."""
from __future__ import annotations

from grok_client.catalog.types import ModelInfo, Pricing, RateLimits
from grok_client.types.enums import Capability

_TEXT = Capability.TEXT
_IMAGE = Capability.IMAGE

MODELS: tuple[ModelInfo, ...] = (
    ModelInfo(
        id="grok-4",
        modalities=frozenset({_TEXT, _IMAGE}),
        capabilities=frozenset({"text", "vision", "tool_calling", "structured_outputs"}),
        context_window=256_000,
        rate_limits=RateLimits(requests_per_minute=480, tokens_per_minute=2_000_000),
        pricing=Pricing(input_per_million=3.0, output=15.0),
    ),
    ModelInfo(
        id="grok-3",
        modalities=frozenset({_TEXT}),
        capabilities=frozenset({"text", "reasoning"}),
        context_window=131_072,
        rate_limits=RateLimits(requests_per_minute=600),
        pricing=Pricing(input_per_million=3.0, output=15.0),
    ),
    ModelInfo(
        id="grok-3-mini",
        modalities=frozenset({_TEXT}),
        capabilities=frozenset({"text", "reasoning"}),
        context_window=131_072,
        rate_limits=RateLimits(requests_per_minute=480),
        pricing=Pricing(input_per_million=0.3, output=0.5),
    ),
    ModelInfo(
        id="grok-2-image",
        modalities=frozenset({_TEXT, _IMAGE}),
        capabilities=frozenset({"image_generation"}),
        context_window=131_072,
        rate_limits=RateLimits(requests_per_minute=300),
        pricing=Pricing(output=0.07),
    ),
)
