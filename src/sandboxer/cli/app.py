"""Main CLI application using Typer."""

from pathlib import Path

import typer
from rich.console import Console

from sandboxer import __version__
from sandboxer.cli.commands.defaults import defaults_app
from sandboxer.defaults.paths import DefaultsPaths

app = typer.Typer(
    name="sandboxer",
    help="Sandboxer - Provision isolated sandboxes with dedicated ports and prefixes",
    add_completion=False,
)
console = Console()

# Register subcommands
app.add_typer(defaults_app, name="defaults")


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        console.print(f"Sandboxer version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        envvar="SANDBOXER_CONFIG",
        help="Configuration file to use instead of ~/.sandboxer/config.json",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Sandboxer CLI - Manage sandbox defaults."""
    ctx.obj = DefaultsPaths.from_home(custom_configuration_file=config)


if __name__ == "__main__":
    app()
