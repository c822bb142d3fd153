"""Updatable defaults fields and how their values are parsed."""

from __future__ import annotations

import re
from enum import Enum

from sandboxer.defaults.errors import InvalidNumberError, UnknownLabelError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class DefaultsField(str, Enum):
    """Labels accepted by ``defaults update``, one per defaults field."""

    VERSION = "version"
    SANDBOX_HOME = "sandbox-home"
    SANDBOX_BINARY = "sandbox-binary"
    MASTER_SLAVE_BASE_PORT = "master-slave-base-port"
    GROUP_REPLICATION_BASE_PORT = "group-replication-base-port"
    GROUP_REPLICATION_SP_BASE_PORT = "group-replication-sp-base-port"
    MULTIPLE_BASE_PORT = "multiple-base-port"
    FAN_IN_BASE_PORT = "fan-in-base-port"
    ALL_MASTERS_BASE_PORT = "all-masters-base-port"
    GROUP_PORT_DELTA = "group-port-delta"
    SANDBOX_PREFIX = "sandbox-prefix"
    MASTER_SLAVE_PREFIX = "master-slave-prefix"
    GROUP_PREFIX = "group-prefix"
    GROUP_SP_PREFIX = "group-sp-prefix"
    MULTIPLE_PREFIX = "multiple-prefix"
    FAN_IN_PREFIX = "fan-in-prefix"
    ALL_MASTERS_PREFIX = "all-masters-prefix"

    @property
    def attribute(self) -> str:
        """Name of the ``SandboxDefaults`` attribute this label sets."""
        return _ATTRIBUTES[self]

    @property
    def numeric(self) -> bool:
        return self in _NUMERIC_FIELDS

    def parse(self, value: str) -> int | str:
        """Convert a command line value to the field's type.

        Raises:
            InvalidNumberError: If the field is numeric and ``value`` is not an integer
        """
        if not self.numeric:
            return value
        if _INTEGER_RE.fullmatch(value) is None:
            raise InvalidNumberError(value)
        return int(value)


_ATTRIBUTES: dict[DefaultsField, str] = {
    DefaultsField.VERSION: "version",
    DefaultsField.SANDBOX_HOME: "sandbox_home",
    DefaultsField.SANDBOX_BINARY: "sandbox_binary",
    DefaultsField.MASTER_SLAVE_BASE_PORT: "master_slave_base_port",
    DefaultsField.GROUP_REPLICATION_BASE_PORT: "group_replication_base_port",
    DefaultsField.GROUP_REPLICATION_SP_BASE_PORT: "group_replication_sp_base_port",
    DefaultsField.MULTIPLE_BASE_PORT: "multiple_base_port",
    DefaultsField.FAN_IN_BASE_PORT: "fan_in_replication_base_port",
    DefaultsField.ALL_MASTERS_BASE_PORT: "all_masters_replication_base_port",
    DefaultsField.GROUP_PORT_DELTA: "group_port_delta",
    DefaultsField.SANDBOX_PREFIX: "sandbox_prefix",
    DefaultsField.MASTER_SLAVE_PREFIX: "master_slave_prefix",
    DefaultsField.GROUP_PREFIX: "group_prefix",
    DefaultsField.GROUP_SP_PREFIX: "group_sp_prefix",
    DefaultsField.MULTIPLE_PREFIX: "multiple_prefix",
    DefaultsField.FAN_IN_PREFIX: "fan_in_prefix",
    DefaultsField.ALL_MASTERS_PREFIX: "all_masters_prefix",
}

_NUMERIC_FIELDS = frozenset(
    {
        DefaultsField.MASTER_SLAVE_BASE_PORT,
        DefaultsField.GROUP_REPLICATION_BASE_PORT,
        DefaultsField.GROUP_REPLICATION_SP_BASE_PORT,
        DefaultsField.MULTIPLE_BASE_PORT,
        DefaultsField.FAN_IN_BASE_PORT,
        DefaultsField.ALL_MASTERS_BASE_PORT,
        DefaultsField.GROUP_PORT_DELTA,
    }
)

# File keys accepted in place of the shorter update labels.
_LABEL_ALIASES: dict[str, DefaultsField] = {
    "fan-in-replication-base-port": DefaultsField.FAN_IN_BASE_PORT,
    "all-masters-replication-base-port": DefaultsField.ALL_MASTERS_BASE_PORT,
}


def resolve_label(label: str) -> DefaultsField:
    """Map an update label to its field.

    Raises:
        UnknownLabelError: If ``label`` names no field
    """
    if label in _LABEL_ALIASES:
        return _LABEL_ALIASES[label]
    try:
        return DefaultsField(label)
    except ValueError as e:
        raise UnknownLabelError(label) from e
