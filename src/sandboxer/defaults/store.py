"""Read and write defaults files."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from sandboxer.common import console as default_console
from sandboxer.common import dir_exists, file_exists, mkdir, slurp_as_bytes, write_string
from sandboxer.defaults.errors import (
    DefaultsFileError,
    DefaultsFileExistsError,
    DefaultsFileNotFoundError,
)
from sandboxer.defaults.models import SandboxDefaults

logger = logging.getLogger(__name__)


def write_defaults_file(path: Path, defaults: SandboxDefaults) -> None:
    """Write defaults as indented JSON, creating the parent directory if needed.

    Args:
        path: Destination file
        defaults: Record to write
    """
    defaults_dir = path.parent
    if not dir_exists(defaults_dir):
        mkdir(defaults_dir)
    write_string(defaults.to_json() + "\n", path)
    logger.info("Wrote defaults to %s", path)


def read_defaults_file(path: Path) -> SandboxDefaults:
    """Read defaults from a JSON file.

    Args:
        path: File to read

    Returns:
        The decoded record

    Raises:
        DefaultsFileNotFoundError: If the file does not exist
        DefaultsFileError: If the file cannot be read or decoded
    """
    if not file_exists(path):
        raise DefaultsFileNotFoundError(path)
    try:
        blob = slurp_as_bytes(path)
    except OSError as e:
        raise DefaultsFileError(path, f"error reading defaults: {e}") from e
    try:
        return SandboxDefaults.model_validate_json(blob)
    except ValidationError as e:
        raise DefaultsFileError(path, f"error decoding defaults: {e}") from e


def remove_defaults_file(path: Path, console: Console | None = None) -> None:
    """Delete a defaults file.

    Raises:
        DefaultsFileNotFoundError: If the file does not exist
        DefaultsFileError: If the file cannot be removed
    """
    if not file_exists(path):
        raise DefaultsFileNotFoundError(path)
    try:
        path.unlink()
    except OSError as e:
        raise DefaultsFileError(path, str(e)) from e
    logger.info("Removed defaults file %s", path)
    (console or default_console).print(f"# File {path} removed")


def export_defaults_file(path: Path, defaults: SandboxDefaults) -> None:
    """Write defaults to a new file, refusing to overwrite an existing one.

    Raises:
        DefaultsFileExistsError: If ``path`` already exists
    """
    if path.exists():
        raise DefaultsFileExistsError(path)
    write_defaults_file(path, defaults)
