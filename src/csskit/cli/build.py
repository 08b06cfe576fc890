"""CLI command: csskit build -- render one compound selector."""

from __future__ import annotations

import sys

import click

from csskit.config import BuilderConfig
from csskit.errors import SelectorError
from csskit.selector import SelectorBuilder


@click.command()
@click.option("--element", default=None, help="Type selector, e.g. div")
@click.option("--id", "id_", default=None, help="Id selector without '#'")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help='Attribute body, e.g. href$=".png" (repeatable)')
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class without ':' (repeatable)")
@click.option("--pseudo-element", "pseudo_elements", multiple=True, help="Pseudo-element without '::'")
@click.option(
    "--allow-multiple-pseudo-elements/--single-pseudo-element",
    default=False,
    help="Permit more than one pseudo-element",
)
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_elements: tuple[str, ...],
    allow_multiple_pseudo_elements: bool,
) -> None:
    """Build a compound selector and print it.

    Fragments are always printed in canonical order: element, id, classes,
    attributes, pseudo-classes, pseudo-elements.
    """
    config = BuilderConfig(allow_multiple_pseudo_elements=allow_multiple_pseudo_elements)
    builder = SelectorBuilder(config)

    try:
        if element is not None:
            builder.element(element)
        if id_ is not None:
            builder.id(id_)
        for name in classes:
            builder.class_(name)
        for body in attrs:
            builder.attr(body)
        for name in pseudo_classes:
            builder.pseudo_class(name)
        for name in pseudo_elements:
            builder.pseudo_element(name)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())
