"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
from dataclasses import replace

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, indent: int | None) -> None:
    """selectorkit - build CSS selector strings from the command line."""
    config = SelectorkitConfig(json_indent=indent)
    if verbose:
        config = replace(config, log_level="DEBUG")
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.render import render  # noqa: E402
from selectorkit.cli.area import area  # noqa: E402

cli.add_command(build)
cli.add_command(render)
cli.add_command(area)
