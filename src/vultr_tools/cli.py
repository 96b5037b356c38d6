"""Command-line interface for vultr-tools.

Command groups:
    - object-storage: Manage object storage subscriptions and browse the
      available clusters and tiers

The API key is read from --api-key or the VULTR_API_KEY environment variable.
Results are printed as text tables or, with --output json, as JSON.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import ApiKeyOption, OutputOption
from .cli_state import CLIState
from .core.config import settings
from .objectstorage import object_storage_app

app = typer.Typer(
    name="vultr-tools",
    help="Command line tools for the Vultr API.",
    no_args_is_help=True,
)
app.add_typer(object_storage_app, name="object-storage")


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"vultr-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
    api_key: ApiKeyOption = None,
    output: OutputOption = "text",
) -> None:
    """
    vultr-tools: manage Vultr resources from the command line.
    """
    state = ctx.ensure_object(CLIState)
    if api_key:
        state.api_key = api_key
    elif state.api_key is None:
        state.api_key = settings.api_key
    state.output = output
    ctx.call_on_close(state.close)


if __name__ == "__main__":
    app()
