"""Command: validate that a JSON object carries required keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from katactl.commands._base import KataCommand
from katactl.commands._context import load_json_argument

if TYPE_CHECKING:
    from katactl.commands._context import AppContext


@click.command(
    cls=KataCommand,
    examples="""\
  katactl keys '{"name": "Alice", "age": 25}' name age
  katactl -q keys '{"name": "Alice"}' name address""",
)
@click.argument("record")
@click.argument("required", nargs=-1)
@click.pass_obj
def keys(app: AppContext, record: str, required: tuple[str, ...]) -> None:
    """Check that the JSON object RECORD has every REQUIRED key."""
    from katactl.services.records import RecordService

    data = load_json_argument(record, param_hint="RECORD")
    if not isinstance(data, dict):
        raise click.BadParameter("must be a JSON object", param_hint="RECORD")
    app.emit(RecordService(app.settings).validate_keys(data, list(required)))
