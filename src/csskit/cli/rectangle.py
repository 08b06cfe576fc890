"""CLI command: csskit rectangle -- print a rectangle as JSON with its area."""

from __future__ import annotations

import click

from csskit.objects import Rectangle, get_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rectangle(width: float, height: float) -> None:
    """Print the JSON form of a WIDTH x HEIGHT rectangle and its area."""
    rect = Rectangle(width, height)
    click.echo(get_json(rect))
    click.echo(f"Area: {rect.area():g}")
