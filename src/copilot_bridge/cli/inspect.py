import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from copilot_bridge.client.stdio import StdioLanguageClient
from copilot_bridge.core.document import get_doc_params
from copilot_bridge.host.memory import InMemoryEditorHost

inspect_app = typer.Typer(help="Inspect request parameters built for a file.")
console = Console()


@inspect_app.command("doc")
def doc(
    path: Annotated[Path, typer.Argument(help="File to load into the buffer.", exists=True, dir_okay=False)],
    line: Annotated[int, typer.Option(help="Cursor line (1-based).")] = 1,
    col: Annotated[int, typer.Option(help="Cursor column as a byte offset (0-based).")] = 0,
    filetype: Annotated[str, typer.Option(help="Buffer filetype.")] = "",
    unsaved: Annotated[
        bool, typer.Option(help="Treat the buffer as unnamed; the didOpen frame is written to stderr.")
    ] = False,
) -> None:
    """Build the doc params Copilot requests would carry for PATH."""
    host = InMemoryEditorHost.from_file(path, filetype=filetype)
    buf = host.buffers[host.current_buffer()]
    buf.cursor = (line, col)
    if unsaved:
        buf.name = ""

    client = StdioLanguageClient(sys.stderr.buffer) if unsaved else None
    params = get_doc_params(host, client)
    if params is None:
        console.print("[red]Could not build document parameters.[/red]")
        raise typer.Exit(1)
    console.print_json(json.dumps(params))
