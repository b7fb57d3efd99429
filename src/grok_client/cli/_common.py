"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click

from grok_client.client import GrokClient
from grok_client.errors import GrokError


@contextmanager
def client_session(ctx: click.Context) -> Iterator[GrokClient]:
    """Yield a client from the context's factory; report errors and exit 1."""
    try:
        client = ctx.obj["client_factory"]()
    except GrokError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    try:
        yield client
    except GrokError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        client.close()
