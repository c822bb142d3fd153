"""Exceptions raised by the defaults subsystem.

Validation failures are not exceptions: they are reported and the caller
keeps its previous defaults. The errors below mean the requested operation
cannot go on at all.
"""

from __future__ import annotations

from pathlib import Path


class DefaultsError(Exception):
    """Base class for unrecoverable defaults errors."""


class DefaultsFileError(DefaultsError):
    """Raised when a defaults file cannot be read or decoded."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class DefaultsFileNotFoundError(DefaultsFileError):
    """Raised when a defaults file that must exist is missing."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Configuration file {path} not found")


class DefaultsFileExistsError(DefaultsFileError):
    """Raised when an export would overwrite an existing file."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"File {path} already exists")


class UnknownLabelError(DefaultsError):
    """Raised when an update names a field that does not exist."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Unrecognized label {label}")
        self.label = label


class InvalidNumberError(DefaultsError):
    """Raised when a numeric field receives a non-integer value."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Not a valid number: {value}")
        self.value = value
