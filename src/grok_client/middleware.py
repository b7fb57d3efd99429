"""Built-in middleware."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from grok_client.types.request import Call
from grok_client.types.result import CallResult

Middleware = Callable[[Call, Callable[[Call], CallResult]], CallResult]


def logging_middleware(logger: logging.Logger | None = None) -> Middleware:
    """Create middleware that logs request/response details."""
    log = logger or logging.getLogger("grok_client")

    def middleware(call: Call, next_fn: Callable[[Call], CallResult]) -> CallResult:
        log.info("Grok request: endpoint=%s model=%s", call.endpoint, call.model)
        start = time.monotonic()
        result = next_fn(call)
        elapsed = time.monotonic() - start
        log.info(
            "Grok response: status=%d tokens=%s latency=%.2fs",
            result.status_code,
            result.usage.total_tokens,
            elapsed,
        )
        return result

    return middleware


@dataclass
class CostTracker:
    """Tracks cumulative usage and estimated cost."""

    total_input_tokens: int = 0
    total_output_tokens: int = 0
    total_images: int = 0
    total_cost: float = 0.0
    requests: int = 0


def cost_tracking_middleware(tracker: CostTracker) -> Middleware:
    """Create middleware that accumulates usage and cost on a CostTracker."""

    def middleware(call: Call, next_fn: Callable[[Call], CallResult]) -> CallResult:
        result = next_fn(call)
        usage = result.usage
        tracker.total_input_tokens += usage.prompt_tokens or 0
        tracker.total_output_tokens += usage.completion_tokens or 0
        tracker.total_images += result.image_count
        tracker.total_cost = round(tracker.total_cost + result.cost(), 6)
        tracker.requests += 1
        return result

    return middleware
