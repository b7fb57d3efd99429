"""CLI command: grok image -- generate images from a prompt."""

from __future__ import annotations

import click

from grok_client.cli._common import client_session


@click.command()
@click.argument("prompt")
@click.option("-m", "--model", default=None, help="Image model (default grok-2-image).")
@click.option(
    "--format", "response_format",
    type=click.Choice(["url", "b64_json"]), default=None,
    help="How images are returned.",
)
@click.option("-n", "count", type=click.IntRange(min=1), default=None, help="Number of images.")
@click.pass_context
def image(
    ctx: click.Context,
    prompt: str,
    model: str | None,
    response_format: str | None,
    count: int | None,
) -> None:
    """Generate images for PROMPT and print one URL (or base64 blob) per line."""
    options = {"prompt": prompt, "model": model, "response_format": response_format, "n": count}
    with client_session(ctx) as client:
        client.image(options)
        result = client.last_result
        images = result.images if result is not None else []
        for item in images:
            click.echo(item)
        click.echo(
            f"{len(images)} image(s), estimated cost: ${client.cost_estimate(images=len(images)):.6f}",
            err=True,
        )
