"""Sandbox defaults: ports, prefixes and paths used when provisioning.

This package provides:
- The defaults record and its factory baseline
- JSON persistence of the record
- Validation of port ranges, conflicts and version compatibility
- A handle that loads defaults lazily and applies single-field updates
"""

from sandboxer.defaults.errors import (
    DefaultsError,
    DefaultsFileError,
    DefaultsFileExistsError,
    DefaultsFileNotFoundError,
    InvalidNumberError,
    UnknownLabelError,
)
from sandboxer.defaults.fields import DefaultsField, resolve_label
from sandboxer.defaults.manager import DefaultsManager, UpdateResult
from sandboxer.defaults.models import SandboxDefaults, factory_defaults
from sandboxer.defaults.paths import DefaultsPaths
from sandboxer.defaults.presenter import show_defaults
from sandboxer.defaults.store import read_defaults_file, write_defaults_file
from sandboxer.defaults.validation import validate_defaults

__all__ = [
    "DefaultsError",
    "DefaultsField",
    "DefaultsFileError",
    "DefaultsFileExistsError",
    "DefaultsFileNotFoundError",
    "DefaultsManager",
    "DefaultsPaths",
    "InvalidNumberError",
    "SandboxDefaults",
    "UnknownLabelError",
    "UpdateResult",
    "factory_defaults",
    "read_defaults_file",
    "resolve_label",
    "show_defaults",
    "validate_defaults",
    "write_defaults_file",
]
