"""Response value types."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Usage:
    """Token usage reported by the API. Missing counts are ``None``."""

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None

    def __add__(self, other: Usage) -> Usage:
        if not isinstance(other, Usage):
            return NotImplemented

        def _sum_optional(a: int | None, b: int | None) -> int | None:
            if a is None and b is None:
                return None
            return (a or 0) + (b or 0)

        return Usage(
            prompt_tokens=_sum_optional(self.prompt_tokens, other.prompt_tokens),
            completion_tokens=_sum_optional(self.completion_tokens, other.completion_tokens),
            total_tokens=_sum_optional(self.total_tokens, other.total_tokens),
        )
