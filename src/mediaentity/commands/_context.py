"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Configures logging and owns result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mediaentity.config.logging import configure_logging
from mediaentity.output.formatters import format_result
from mediaentity.services.hydrate import HydrationService

if TYPE_CHECKING:
    from mediaentity.config.settings import MediaSettings
    from mediaentity.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: MediaSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> HydrationService:
        """A hydration service using the configured default languages."""
        return HydrationService(languages=self.settings.hydration.languages)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            indent=self.settings.output.indent,
        )
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
