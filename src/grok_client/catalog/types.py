"""Model catalog types."""
from __future__ import annotations

from dataclasses import dataclass, field

from grok_client.types.enums import Capability


@dataclass(frozen=True)
class RateLimits:
    """Published rate-limit hints. Informational only, never enforced."""

    requests_per_minute: int | None = None
    tokens_per_minute: int | None = None


@dataclass(frozen=True)
class Pricing:
    """USD pricing for a model.

    Token-priced models set ``input_per_million`` and ``output``, with
    ``output`` per million output tokens. Unit-priced models set only
    ``output``, which is then a flat price per generated image.
    """

    input_per_million: float | None = None
    output: float | None = None

    @property
    def per_image(self) -> bool:
        return self.output is not None and self.input_per_million is None


@dataclass(frozen=True)
class ModelInfo:
    """Static metadata about a model."""

    id: str
    """API identifier (e.g., "grok-4")."""

    modalities: frozenset[Capability]
    """Capabilities the model can be called with."""

    context_window: int
    """Max total tokens."""

    capabilities: frozenset[str] = frozenset()
    """Feature tags such as "vision" or "tool_calling"."""

    rate_limits: RateLimits = field(default_factory=RateLimits)

    pricing: Pricing = field(default_factory=Pricing)

    def supports(self, capability: Capability | str) -> bool:
        """Whether *capability* is one of the model's modalities."""
        return capability in self.modalities

    def has_tag(self, tag: str) -> bool:
        return tag in self.capabilities
