"""Command: summarize the stacks of a gallery payload file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mediaentity.commands._base import MediaCommand

if TYPE_CHECKING:
    from mediaentity.commands._context import AppContext


@click.command(
    "inspect",
    cls=MediaCommand,
    examples="""\
  mediaentity inspect response.json
  mediaentity --json inspect response.json""",
)
@click.argument("payload", type=click.Path(path_type=Path))
@click.pass_obj
def inspect_cmd(app: AppContext, payload: Path) -> None:
    """Show variants, original, processed flag, and tags per stack."""
    app.emit(app.service.inspect_gallery(payload))
