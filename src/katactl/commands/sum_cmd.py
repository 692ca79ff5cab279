"""Command: sum an array of numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from katactl.commands._base import NUMBER, NUMERIC_ARGS, KataCommand

if TYPE_CHECKING:
    from katactl.commands._context import AppContext


@click.command(
    "sum",
    cls=KataCommand,
    context_settings=NUMERIC_ARGS,
    examples="""\
  katactl sum 1 2 3 4 5
  katactl -q sum 0.5 0.25
  katactl sum""",
)
@click.argument("numbers", nargs=-1, type=NUMBER)
@click.pass_obj
def sum_cmd(app: AppContext, numbers: tuple[int | float, ...]) -> None:
    """Sum NUMBERS (no numbers sums to 0)."""
    from katactl.services.arrays import ArrayService

    app.emit(ArrayService(app.settings).sum(list(numbers)))
