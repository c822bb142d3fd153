"""Defaults handle: lazy loading, updates and file operations."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from sandboxer.common import STAR_LINE, file_exists
from sandboxer.common import console as default_console
from sandboxer.defaults.fields import resolve_label
from sandboxer.defaults.models import SandboxDefaults, factory_defaults
from sandboxer.defaults.paths import DefaultsPaths
from sandboxer.defaults.presenter import show_defaults
from sandboxer.defaults.store import (
    export_defaults_file,
    read_defaults_file,
    remove_defaults_file,
    write_defaults_file,
)
from sandboxer.defaults.validation import validate_defaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a single-field update."""

    label: str
    value: str
    committed: bool


class DefaultsManager:
    """Owns the current defaults for one run of the tool.

    The record is loaded on first use and kept in memory afterwards; only
    validated updates replace it, and each replacement is written back to
    the configuration file. Not safe for concurrent use.
    """

    def __init__(
        self,
        paths: DefaultsPaths | None = None,
        console: Console | None = None,
        warning_pause: float = 1.0,
    ):
        """Initialize the defaults manager.

        Args:
            paths: Configuration locations (default: rooted at the user's home)
            console: Console for user-facing output (default: the shared plain console)
            warning_pause: Seconds to wait after warning about an invalid file (default: 1.0)
        """
        self.paths = paths or DefaultsPaths.from_home()
        self.console = console or default_console
        self.warning_pause = warning_pause
        self._current: SandboxDefaults | None = None

    @property
    def config_file(self) -> Path:
        return self.paths.configuration_file

    @property
    def factory(self) -> SandboxDefaults:
        return factory_defaults(self.paths.home)

    def current(self) -> SandboxDefaults:
        """Return the current defaults, loading them on first use.

        Returns:
            The configuration file's record if the file exists, else the factory defaults

        Raises:
            DefaultsFileError: If the configuration file exists but cannot be decoded
        """
        if self._current is None:
            if file_exists(self.config_file):
                self._current = read_defaults_file(self.config_file)
                logger.debug("Loaded defaults from %s", self.config_file)
            else:
                self._current = self.factory
        return self._current

    def load_configuration(self) -> bool:
        """Load and validate the configuration file at startup.

        An invalid file is ignored in favor of the factory defaults, with a
        warning and a short pause so the user can read it.

        Returns:
            True if the configuration file was loaded, False otherwise

        Raises:
            DefaultsFileError: If the configuration file exists but cannot be decoded
        """
        if not file_exists(self.config_file):
            return False

        new_defaults = read_defaults_file(self.config_file)
        if validate_defaults(new_defaults, config_file=self.config_file, console=self.console):
            self._current = new_defaults
            return True

        logger.warning("Defaults file %s not validated, using internal defaults", self.config_file)
        self._current = self.factory
        self.console.print(STAR_LINE)
        self.console.print(f"Defaults file {self.config_file} not validated.")
        self.console.print("Loading internal defaults")
        self.console.print(STAR_LINE)
        self.console.print("")
        time.sleep(self.warning_pause)
        return False

    def update(self, label: str, value: str) -> UpdateResult:
        """Change one field and commit it if the whole record stays valid.

        The confirmation line is printed even when validation rejects the
        change; check ``UpdateResult.committed`` for the outcome.

        Args:
            label: Field label, e.g. ``sandbox-home``
            value: New value as typed by the user

        Returns:
            The update outcome

        Raises:
            UnknownLabelError: If ``label`` names no field
            InvalidNumberError: If a numeric field gets a non-integer value
            DefaultsFileError: If the current defaults cannot be loaded
        """
        field = resolve_label(label)
        parsed = field.parse(value)
        candidate = self.current().model_copy(update={field.attribute: parsed})

        committed = validate_defaults(candidate, config_file=self.config_file, console=self.console)
        if committed:
            self._current = candidate
            write_defaults_file(self.config_file, candidate)
            logger.info("Updated %s to %r", field.value, parsed)
        self.console.print(f'# Updated {label} -> "{value}"')
        return UpdateResult(label=label, value=value, committed=committed)

    def show(self) -> None:
        """Print the current defaults and where they come from."""
        show_defaults(self.current(), self.config_file, self.console)

    def store(self) -> None:
        """Write the current defaults to the configuration file."""
        write_defaults_file(self.config_file, self.current())

    def remove(self) -> None:
        """Delete the configuration file.

        Raises:
            DefaultsFileNotFoundError: If there is no configuration file
        """
        remove_defaults_file(self.config_file, self.console)

    def export(self, path: Path) -> None:
        """Write the current defaults to a new file.

        Raises:
            DefaultsFileExistsError: If ``path`` already exists
        """
        export_defaults_file(path, self.current())
        self.console.print(f"# Defaults exported to {path}")

    def import_file(self, path: Path) -> bool:
        """Adopt defaults from another file if they validate.

        Args:
            path: File holding a defaults record

        Returns:
            True if the record was committed, False if it failed validation

        Raises:
            DefaultsFileError: If ``path`` is missing or cannot be decoded
        """
        new_defaults = read_defaults_file(path)
        if not validate_defaults(new_defaults, config_file=self.config_file, console=self.console):
            return False
        self._current = new_defaults
        write_defaults_file(self.config_file, new_defaults)
        self.console.print(f"# Defaults imported from {path} into {self.config_file}")
        return True
