"""CLI command: selectorkit build -- assemble a simple selector from options."""

from __future__ import annotations

import sys

import click

from selectorkit.codec import to_json
from selectorkit.config import SelectorkitConfig
from selectorkit.model.selector import SimpleSelector


@click.command()
@click.option("--element", "tag", default=None, help="Element type name")
@click.option("--id", "element_id", default=None, help="Element id (without #)")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attribute", default=None, help="Attribute expression (without brackets)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element (without ::)")
@click.option("--json", "as_json", is_flag=True, help="Print the selector as JSON")
@click.pass_obj
def build(
    config: SelectorkitConfig | None,
    tag: str | None,
    element_id: str | None,
    classes: tuple[str, ...],
    attribute: str | None,
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
    as_json: bool,
) -> None:
    """Build a simple selector and print it.

    Fragments are always rendered in canonical order, whatever order the
    options were given in.
    """
    config = config or SelectorkitConfig()
    selector = SimpleSelector()
    if tag is not None:
        selector = selector.element(tag)
    if attribute is not None:
        selector = selector.attr(attribute)
    if element_id is not None:
        selector = selector.id(element_id)
    for name in classes:
        selector = selector.class_(name)
    for name in pseudo_classes:
        selector = selector.pseudo_class(name)
    if pseudo_element is not None:
        selector = selector.pseudo_element(pseudo_element)

    if selector.is_empty:
        click.echo("Error: at least one selector fragment is required", err=True)
        sys.exit(1)

    if as_json:
        click.echo(to_json(selector, indent=config.json_indent))
    else:
        click.echo(selector.stringify())
