import json
import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from copilot_bridge.cli.inspect import inspect_app
from copilot_bridge.config import BridgeSettings, load_settings
from copilot_bridge.core.info import get_editor_info, get_plugin_version
from copilot_bridge.core.text import strutf16len
from copilot_bridge.host.memory import InMemoryEditorHost

app = typer.Typer(
    name="copilot-bridge",
    help="Copilot bridge CLI — editor identity and document parameters.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

app.add_typer(inspect_app, name="inspect")


@app.callback()
def configure(
    log_level: Annotated[str | None, typer.Option(help="Log level (defaults to COPILOT_BRIDGE_LOG_LEVEL).")] = None,
) -> None:
    if log_level:
        try:
            level = BridgeSettings(log_level=log_level).log_level
        except ValidationError:
            raise typer.BadParameter(f"Unknown log level '{log_level}'", param_hint="--log-level") from None
    else:
        level = load_settings().log_level
    logging.basicConfig(level=level, format="%(message)s", handlers=[RichHandler(console=Console(stderr=True))])


@app.command("info")
def info(
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
) -> None:
    """Show the editor and plugin identity sent to the language server."""
    settings = load_settings()
    # No editor is attached here, so there is no version banner to report.
    bundle = get_editor_info(InMemoryEditorHost(".", version_output=""), settings)
    plugin_build = get_plugin_version()

    if as_json:
        payload = bundle.model_dump(by_alias=True)
        payload["pluginBuild"] = plugin_build
        console.print_json(json.dumps(payload))
        return

    table = Table(show_lines=False)
    table.add_column("field")
    table.add_column("value")
    table.add_row("editor", bundle.editor_info.name)
    table.add_row("plugin", f"{bundle.editor_plugin_info.name} {bundle.editor_plugin_info.version}")
    table.add_row("build", plugin_build)
    console.print(table)


@app.command("utf16len")
def utf16len(
    text: Annotated[str, typer.Argument(help="Text to measure.")],
) -> None:
    """Print the number of UTF-16 code units TEXT occupies."""
    console.print(strutf16len(text))


def main() -> None:
    app()
