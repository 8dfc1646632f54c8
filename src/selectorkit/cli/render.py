"""CLI command: selectorkit render -- print the CSS text of a JSON selector."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from selectorkit.codec import from_json
from selectorkit.errors import SelectorError
from selectorkit.model.selector import Selector, SimpleSelector


@click.command()
@click.argument("jsonfile", type=click.Path(exists=True))
def render(jsonfile: str) -> None:
    """Read a JSON selector document and print the rendered selector."""
    try:
        source = Path(jsonfile).read_text(encoding="utf-8")
        selector = from_json(Selector, source)
    except (SelectorError, UnicodeDecodeError) as exc:
        click.echo(f"Decode error: {exc}", err=True)
        sys.exit(1)

    if isinstance(selector, SimpleSelector) and selector.is_empty:
        click.echo("Error: selector document has no fragments", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
