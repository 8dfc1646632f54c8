"""CLI command: selectorkit area -- print the area of a rectangle."""

from __future__ import annotations

import click

from selectorkit.model.rectangle import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width=width, height=height)
    click.echo(f"{rect.area:g}")
