"""Defaults management commands."""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sandboxer.defaults.errors import DefaultsError
from sandboxer.defaults.fields import DefaultsField
from sandboxer.defaults.manager import DefaultsManager
from sandboxer.defaults.paths import DefaultsPaths

defaults_app = typer.Typer(
    name="defaults",
    help="Manage default values for new sandboxes",
)
console = Console(soft_wrap=True)


def _fail(exc: DefaultsError) -> NoReturn:
    console.print(f"[red]{escape(str(exc))}[/red]")
    raise typer.Exit(code=1) from exc


def _manager(ctx: typer.Context) -> DefaultsManager:
    manager: DefaultsManager = ctx.obj
    return manager


@defaults_app.callback()
def load_defaults(ctx: typer.Context) -> None:
    """Load the configuration file before running a defaults command."""
    paths = ctx.obj if isinstance(ctx.obj, DefaultsPaths) else DefaultsPaths.from_home()
    manager = DefaultsManager(paths)
    try:
        manager.load_configuration()
    except DefaultsError as e:
        _fail(e)
    ctx.obj = manager


@defaults_app.command("show")
def defaults_show(ctx: typer.Context) -> None:
    """Display current defaults and where they come from."""
    try:
        _manager(ctx).show()
    except DefaultsError as e:
        _fail(e)


@defaults_app.command("update")
def defaults_update(
    ctx: typer.Context,
    label: str = typer.Argument(..., help="Defaults label to change (see 'defaults labels')"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Change a single default and save it if the result is valid.

    Examples:
        sandboxer defaults update sandbox-home /opt/sandboxes
        sandboxer defaults update master-slave-base-port 21000
    """
    try:
        _manager(ctx).update(label, value)
    except DefaultsError as e:
        _fail(e)


@defaults_app.command("store")
def defaults_store(ctx: typer.Context) -> None:
    """Save current defaults to the configuration file."""
    manager = _manager(ctx)
    try:
        manager.store()
    except DefaultsError as e:
        _fail(e)
    console.print(f"[green]✓[/green] Defaults stored in [dim]{escape(str(manager.config_file))}[/dim]")


@defaults_app.command("remove")
def defaults_remove(ctx: typer.Context) -> None:
    """Remove the configuration file, restoring internal defaults."""
    try:
        _manager(ctx).remove()
    except DefaultsError as e:
        _fail(e)


@defaults_app.command("export")
def defaults_export(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File to write; must not exist"),
) -> None:
    """Export current defaults to a file."""
    try:
        _manager(ctx).export(file)
    except DefaultsError as e:
        _fail(e)


@defaults_app.command("load")
def defaults_load(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File holding defaults to import"),
) -> None:
    """Validate defaults from a file and make them the configuration."""
    try:
        loaded = _manager(ctx).import_file(file)
    except DefaultsError as e:
        _fail(e)
    if not loaded:
        console.print(f"[red]Defaults in {escape(str(file))} not loaded.[/red]")
        raise typer.Exit(code=1)


@defaults_app.command("labels")
def defaults_labels() -> None:
    """List the labels accepted by 'defaults update'."""
    table = Table(title="Defaults Labels", show_header=True, header_style="bold magenta")
    table.add_column("Label", style="cyan", no_wrap=True)
    table.add_column("Type", style="green")

    for field in DefaultsField:
        table.add_row(field.value, "integer" if field.numeric else "string")

    console.print(table)
