"""Command: how old is a car."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from katactl.commands._base import KataCommand

if TYPE_CHECKING:
    from katactl.commands._context import AppContext


@click.command(
    cls=KataCommand,
    examples="""\
  katactl car Honda Civic 2018
  katactl car Honda Civic 2018 --current-year 2024
  katactl -q car Toyota Corolla 2020""",
)
@click.argument("make")
@click.argument("model")
@click.argument("year", type=int)
@click.option(
    "--current-year",
    type=int,
    default=None,
    help="Reference year (default: [car] reference_year, else this year).",
)
@click.pass_obj
def car(app: AppContext, make: str, model: str, year: int, current_year: int | None) -> None:
    """Age in years of a MAKE MODEL built in YEAR."""
    from katactl.services.car import CarService

    app.emit(CarService(app.settings).age(make, model, year, current_year=current_year))
