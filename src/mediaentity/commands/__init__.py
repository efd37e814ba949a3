"""Subcommand modules for mediaentity.

Provides register_commands() which uses deferred imports so module
loading happens only when the CLI is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from mediaentity.commands.hydrate import hydrate
    from mediaentity.commands.inspect import inspect_cmd

    cli.add_command(hydrate)
    cli.add_command(inspect_cmd)
