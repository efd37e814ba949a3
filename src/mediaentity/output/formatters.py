"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich text and tables) or
machines (--json).  Hydrated entities are always printed as JSON, since
their wire form is the interesting part.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from mediaentity.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from mediaentity.services.result import ServiceResult


def _render_stacks(console: Console, stacks: list[dict[str, Any]]) -> None:
    table = Table(show_header=True, header_style="media.key", box=None)
    table.add_column("stack", style="media.id")
    table.add_column("variants", justify="right")
    table.add_column("original")
    table.add_column("processed")
    table.add_column("tags", style="media.tag")
    for stack in stacks:
        table.add_row(
            stack["id"],
            str(stack["variants"]),
            stack["original"] or "-",
            "yes" if stack["processed"] else "no",
            ", ".join(stack["tags"]),
        )
    console.print(table)


def _render_data(console: Console, data: dict[str, Any], indent: int) -> None:
    for key, value in data.items():
        if key == "stacks" and isinstance(value, list):
            _render_stacks(console, value)
        elif isinstance(value, (dict, list)):
            console.print(Text(f"{key}:", style="media.key"))
            console.print(
                _json.dumps(value, indent=indent, ensure_ascii=False), markup=False, soft_wrap=True
            )
        else:
            console.print(Text.assemble((f"{key}: ", "media.key"), str(value)))


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    indent: int = 2,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        indent: JSON indentation width.
        no_color: Disable ANSI escape codes in human output.
    """
    if json_output:
        return result.model_dump_json(indent=indent)

    console = create_console(no_color=no_color)
    if result.ok:
        console.print(Text.assemble(("OK", "media.ok"), ": ", (result.op, "media.op")))
        if result.data:
            _render_data(console, result.data, indent)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            Text.assemble(("ERROR", "media.error"), ": ", (result.op, "media.op"), f" - {message}")
        )
    return get_output(console).rstrip("\n")
