"""CLI commands: grok models / grok cost -- inspect the model catalog."""

from __future__ import annotations

import sys

import click

from grok_client.catalog import list_models
from grok_client.costs import estimate_cost
from grok_client.errors import InvalidModelError


@click.command()
@click.option("--capability", type=click.Choice(["text", "image"]), default=None)
def models(capability: str | None) -> None:
    """List known models with their modalities, context size and pricing."""
    for info in list_models(capability):
        modalities = ",".join(sorted(info.modalities))
        tags = ",".join(sorted(info.capabilities))
        pricing = info.pricing
        if pricing.per_image:
            price = f"${pricing.output}/image"
        else:
            price = f"${pricing.input_per_million}/${pricing.output} per 1M tokens"
        click.echo(
            f"{info.id:<14} modalities={modalities:<11} context={info.context_window:<7} "
            f"{price}  [{tags}]"
        )


@click.command()
@click.argument("model")
@click.option("-i", "--input-tokens", type=click.IntRange(min=0), default=None)
@click.option("-o", "--output-tokens", type=click.IntRange(min=0), default=None)
@click.option("--images", type=click.IntRange(min=0), default=0)
def cost(model: str, input_tokens: int | None, output_tokens: int | None, images: int) -> None:
    """Estimate the USD cost of a call to MODEL."""
    try:
        amount = estimate_cost(model, input_tokens, output_tokens, images)
    except InvalidModelError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"{amount:.6f}")
