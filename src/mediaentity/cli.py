"""Root CLI group for mediaentity with global flags and command registration."""

from __future__ import annotations

import click

from mediaentity import __version__
from mediaentity.commands import register_commands
from mediaentity.commands._context import AppContext
from mediaentity.config.settings import MediaSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mediaentity")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """mediaentity: hydrate image gallery API payloads."""
    # Only explicit flags override env/TOML; unset flags fall through.
    flags = {
        name: value
        for name, value in (
            ("json_output", json_output),
            ("verbose", verbose),
            ("log_json", log_json),
        )
        if value
    }
    settings = MediaSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
