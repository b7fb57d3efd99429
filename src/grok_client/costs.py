"""Rough USD cost estimates from the catalog's pricing table."""
from __future__ import annotations

from grok_client.catalog import lookup

TOKENS_PER_UNIT = 1_000_000


def estimate_cost(
    model: str,
    input_tokens: int | None = None,
    output_tokens: int | None = None,
    image_count: int = 0,
) -> float:
    """Estimate the cost of a call to *model*, rounded to 6 decimals.

    Token prices are per million tokens. For unit-priced models (an output
    price and no input price) a positive *image_count* is billed at the
    output price per image in place of the per-token output term.

    Raises :class:`InvalidModelError` for unknown models and
    :class:`ValueError` for negative counts.
    """
    pricing = lookup(model).pricing

    for label, value in (
        ("input_tokens", input_tokens),
        ("output_tokens", output_tokens),
        ("image_count", image_count),
    ):
        if value is not None and value < 0:
            raise ValueError(f"{label} must be non-negative, got {value}")

    cost = 0.0

    if input_tokens and pricing.input_per_million is not None:
        cost += input_tokens / TOKENS_PER_UNIT * pricing.input_per_million

    if image_count and pricing.per_image:
        cost += image_count * pricing.output
    elif output_tokens and pricing.output is not None:
        cost += output_tokens / TOKENS_PER_UNIT * pricing.output

    return round(cost, 6)
