"""Validation rules for defaults records."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from sandboxer.common import (
    COMPATIBLE_VERSION,
    greater_or_equal_version,
    version_to_list,
)
from sandboxer.common import console as default_console
from sandboxer.defaults.models import (
    MAX_PORT_DELTA,
    MAX_PORT_VALUE,
    MIN_PORT_DELTA,
    MIN_PORT_VALUE,
    SandboxDefaults,
)
from sandboxer.defaults.presenter import show_defaults

logger = logging.getLogger(__name__)


def check_int(name: str, value: int, min_value: int, max_value: int, out: Console) -> bool:
    """Check that ``value`` lies in ``[min_value, max_value]``, reporting it if not."""
    if min_value <= value <= max_value:
        return True
    message = f"Value {name} ({value}) must be between {min_value} and {max_value}"
    logger.warning(message)
    out.print(message)
    return False


def _ports_in_range(nd: SandboxDefaults, out: Console) -> bool:
    checks = (
        ("master-slave-base-port", nd.master_slave_base_port, MIN_PORT_VALUE, MAX_PORT_VALUE),
        ("group-replication-base-port", nd.group_replication_base_port, MIN_PORT_VALUE, MAX_PORT_VALUE),
        (
            "group-replication-sp-base-port",
            nd.group_replication_sp_base_port,
            MIN_PORT_VALUE,
            MAX_PORT_VALUE,
        ),
        ("multiple-base-port", nd.multiple_base_port, MIN_PORT_VALUE, MAX_PORT_VALUE),
        ("fan-in-base-port", nd.fan_in_replication_base_port, MIN_PORT_VALUE, MAX_PORT_VALUE),
        ("all-masters-base-port", nd.all_masters_replication_base_port, MIN_PORT_VALUE, MAX_PORT_VALUE),
        ("group-port-delta", nd.group_port_delta, MIN_PORT_DELTA, MAX_PORT_DELTA),
    )
    # Stops at the first field out of range.
    return all(check_int(name, value, low, high, out) for name, value, low, high in checks)


def _has_conflicts(nd: SandboxDefaults) -> bool:
    other_ports = (
        nd.group_replication_sp_base_port,
        nd.group_replication_base_port,
        nd.master_slave_base_port,
        nd.fan_in_replication_base_port,
        nd.all_masters_replication_base_port,
    )
    other_prefixes = (
        nd.group_sp_prefix,
        nd.group_prefix,
        nd.master_slave_prefix,
        nd.sandbox_prefix,
        nd.fan_in_prefix,
        nd.all_masters_prefix,
    )
    return (
        nd.multiple_base_port in other_ports
        or nd.multiple_prefix in other_prefixes
        or nd.sandbox_home == nd.sandbox_binary
    )


def _has_empty_values(nd: SandboxDefaults) -> bool:
    # fan-in and all-masters prefixes are not part of this check.
    required = (
        nd.sandbox_prefix,
        nd.master_slave_prefix,
        nd.group_prefix,
        nd.group_sp_prefix,
        nd.multiple_prefix,
        nd.sandbox_home,
        nd.sandbox_binary,
    )
    return any(value == "" for value in required)


def validate_defaults(
    nd: SandboxDefaults,
    *,
    config_file: Path | None = None,
    console: Console | None = None,
) -> bool:
    """Check a defaults record before it is accepted.

    Stages run in order and the first failing stage ends the check:
    port ranges, port and prefix conflicts, empty values, then version
    compatibility. Each failure is printed so the user can fix it.

    Args:
        nd: Candidate record
        config_file: Configuration file named in record dumps
        console: Console to print diagnostics to (default: the shared plain console)

    Returns:
        True if the record passed every stage, False otherwise
    """
    out = console or default_console

    if not _ports_in_range(nd, out):
        return False

    if _has_conflicts(nd):
        logger.warning("Conflicts found in defaults values")
        out.print("Conflicts found in defaults values:")
        show_defaults(nd, config_file, out)
        return False

    if _has_empty_values(nd):
        logger.warning("Empty values found in defaults")
        out.print("One or more empty values found in defaults")
        show_defaults(nd, config_file, out)
        return False

    if not greater_or_equal_version(nd.version, version_to_list(COMPATIBLE_VERSION)):
        message = (
            f"Provided defaults are for version {nd.version}. "
            f"Current version is {COMPATIBLE_VERSION}"
        )
        logger.warning(message)
        out.print(message)
        return False

    return True
