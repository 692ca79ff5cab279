"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and telemetry from the global
flags and centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from katactl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from katactl.config.settings import KataSettings
    from katactl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj`` and hand
    ``self.settings`` to the services they construct.
    """

    def __init__(self, settings: KataSettings) -> None:
        self.settings = settings

        from katactl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from katactl.services.telemetry import enable_telemetry

            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)


def load_json_argument(raw: str, *, param_hint: str) -> Any:
    """Decode a JSON command-line argument, or fail as a Click usage error."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint=param_hint) from exc
