"""Locations of the sandboxer configuration files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CONFIGURATION_DIR_NAME = ".sandboxer"
CONFIGURATION_FILE_NAME = "config.json"


@dataclass(frozen=True)
class DefaultsPaths:
    """Configuration paths rooted at a home directory.

    A custom configuration file, when given, replaces the default one for
    every read and write.
    """

    home: Path
    custom_configuration_file: Path | None = None

    @classmethod
    def from_home(
        cls, home: Path | None = None, custom_configuration_file: Path | None = None
    ) -> DefaultsPaths:
        """Build paths for ``home`` (default: the current user's home)."""
        return cls(
            home=home if home is not None else Path.home(),
            custom_configuration_file=custom_configuration_file,
        )

    @property
    def configuration_dir(self) -> Path:
        return self.home / CONFIGURATION_DIR_NAME

    @property
    def default_configuration_file(self) -> Path:
        return self.configuration_dir / CONFIGURATION_FILE_NAME

    @property
    def configuration_file(self) -> Path:
        """The file defaults are read from and written to."""
        if self.custom_configuration_file is not None:
            return self.custom_configuration_file.expanduser()
        return self.default_configuration_file

    @property
    def sandbox_registry(self) -> Path:
        return self.configuration_dir / "sandboxes.json"

    @property
    def sandbox_registry_lock(self) -> Path:
        return self.configuration_dir / "sandboxes.lock"
