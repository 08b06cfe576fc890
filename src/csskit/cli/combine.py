"""CLI command: csskit combine -- join two selectors with a combinator."""

from __future__ import annotations

import sys

import click

from csskit.errors import SelectorError
from csskit.selector import Selector, combine as combine_selectors


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two rendered selectors LEFT and RIGHT with COMBINATOR.

    COMBINATOR is one of ' ', '+', '~', '>' (quote it in the shell).
    """
    try:
        result = combine_selectors(
            Selector(resolved=left), combinator, Selector(resolved=right)
        )
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.render())
