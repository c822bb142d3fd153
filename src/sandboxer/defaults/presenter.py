"""Render defaults for humans."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from sandboxer.common import console as default_console
from sandboxer.common import file_exists
from sandboxer.defaults.models import SandboxDefaults


def show_defaults(
    defaults: SandboxDefaults,
    config_file: Path | None = None,
    console: Console | None = None,
) -> None:
    """Print defaults as JSON, preceded by where they come from.

    Args:
        defaults: The record to show
        config_file: Configuration file; named as the source when it exists
        console: Console to print to (default: the shared plain console)
    """
    out = console or default_console
    if config_file is not None and file_exists(config_file):
        out.print(f"# Configuration file: {config_file}")
    else:
        out.print("# Internal values:")
    out.print(defaults.to_json())
