"""Command: hydrate an image, stack, or gallery payload file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mediaentity.commands._base import MediaCommand

if TYPE_CHECKING:
    from mediaentity.commands._context import AppContext


@click.command(
    cls=MediaCommand,
    examples="""\
  mediaentity hydrate gallery response.json
  mediaentity hydrate image image.json -l en -l de
  mediaentity --json hydrate stack stack.json""",
)
@click.argument("kind", type=click.Choice(["image", "stack", "gallery"]))
@click.argument("payload", type=click.Path(path_type=Path))
@click.option(
    "-l",
    "--language",
    "languages",
    multiple=True,
    help="Language to keep in names/descriptions (repeatable).",
)
@click.pass_obj
def hydrate(app: AppContext, kind: str, payload: Path, languages: tuple[str, ...]) -> None:
    """Hydrate a JSON response PAYLOAD of the given KIND."""
    app.emit(app.service.hydrate_file(kind, payload, languages=languages or None))  # type: ignore[arg-type]
