"""Subcommand modules for katactl.

Provides register_commands() which uses deferred imports to keep
``katactl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``area`` group and the standalone exercise commands."""
    # --- Groups ---
    from katactl.commands.area import area

    cli.add_command(area)

    # --- Standalone commands ---
    from katactl.commands.car import car
    from katactl.commands.count import count
    from katactl.commands.keys import keys
    from katactl.commands.sum_cmd import sum_cmd

    cli.add_command(sum_cmd)
    cli.add_command(count)
    cli.add_command(keys)
    cli.add_command(car)
