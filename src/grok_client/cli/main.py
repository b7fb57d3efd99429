"""Grok CLI entry point: Click group with subcommands."""

import logging

import click

from grok_client import __version__
from grok_client.client import GrokClient


@click.group()
@click.version_option(version=__version__, prog_name="grok")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """grok - talk to the xAI Grok API from the shell.

    The API key is read from XAI_API_KEY (or GROK_API_KEY).
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj.setdefault("client_factory", GrokClient.from_env)


# Import and register subcommands
from grok_client.cli.chat import analyze, chat  # noqa: E402
from grok_client.cli.image import image  # noqa: E402
from grok_client.cli.models import cost, models  # noqa: E402

cli.add_command(chat)
cli.add_command(analyze)
cli.add_command(image)
cli.add_command(models)
cli.add_command(cost)
