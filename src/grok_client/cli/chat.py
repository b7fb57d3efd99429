"""CLI commands: grok chat / grok analyze -- text and vision completions."""

from __future__ import annotations

from pathlib import Path

import click

from grok_client._base64 import infer_media_type
from grok_client.cli._common import client_session
from grok_client.client import GrokClient


@click.command()
@click.argument("prompt")
@click.option("-m", "--model", default=None, help="Catalog model name (default grok-4).")
@click.option("-s", "--system", default=None, help="Standing system message.")
@click.option("--prepend-system", is_flag=True, help="Put the system message first.")
@click.option("-t", "--temperature", type=float, default=None)
@click.option("--max-tokens", type=int, default=None)
@click.option("--raw", "show_raw", is_flag=True, help="Print the raw response body.")
@click.option("--cost", "show_cost", is_flag=True, help="Print an estimated cost.")
@click.pass_context
def chat(
    ctx: click.Context,
    prompt: str,
    model: str | None,
    system: str | None,
    prepend_system: bool,
    temperature: float | None,
    max_tokens: int | None,
    show_raw: bool,
    show_cost: bool,
) -> None:
    """Send PROMPT as a user message and print the answer."""
    options = {
        "messages": prompt,
        "model": model,
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    with client_session(ctx) as client:
        if system:
            client.with_system(system, "prepend" if prepend_system else "append")
        client.chat(options)
        _print_result(client, show_raw, show_cost)


@click.command()
@click.argument("image_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("prompt")
@click.option("-m", "--model", default=None, help="Vision model (default grok-4).")
@click.option("--detail", type=click.Choice(["low", "high", "auto"]), default="high")
@click.option("--raw", "show_raw", is_flag=True, help="Print the raw response body.")
@click.option("--cost", "show_cost", is_flag=True, help="Print an estimated cost.")
@click.pass_context
def analyze(
    ctx: click.Context,
    image_path: str,
    prompt: str,
    model: str | None,
    detail: str,
    show_raw: bool,
    show_cost: bool,
) -> None:
    """Ask a vision model PROMPT about the image at IMAGE_PATH."""
    path = Path(image_path)
    options = {
        "prompt": prompt,
        "image": path.read_bytes(),
        "detail": detail,
        "media_type": infer_media_type(str(path)),
        "model": model,
    }
    with client_session(ctx) as client:
        client.analyze(options)
        _print_result(client, show_raw, show_cost)


def _print_result(client: GrokClient, show_raw: bool, show_cost: bool) -> None:
    result = client.last_result
    if show_raw:
        click.echo(client.response())
    else:
        click.echo(client.result())
    if show_cost and result is not None:
        usage = result.usage
        cost = client.cost_estimate(usage.prompt_tokens, usage.completion_tokens)
        click.echo(f"Estimated cost: ${cost:.6f}", err=True)
