"""Command: count whole-word occurrences."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from katactl.commands._base import KataCommand

if TYPE_CHECKING:
    from katactl.commands._context import AppContext


@click.command(
    cls=KataCommand,
    examples="""\
  katactl count "TypeScript is great. I love TypeScript!" typescript
  katactl -q count "$(cat notes.txt)" todo""",
)
@click.argument("text")
@click.argument("word")
@click.pass_obj
def count(app: AppContext, text: str, word: str) -> None:
    """Count case-insensitive whole-word matches of WORD in TEXT."""
    from katactl.services.text import TextService

    app.emit(TextService(app.settings).count(text, word))
