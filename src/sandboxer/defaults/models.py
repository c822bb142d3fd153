"""Defaults record and its factory baseline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from sandboxer.common import COMPATIBLE_VERSION

MIN_PORT_VALUE = 11000
MAX_PORT_VALUE = 30000
MIN_PORT_DELTA = 101
MAX_PORT_DELTA = 299


class SandboxDefaults(BaseModel):
    """Ports, prefixes and paths used when provisioning sandboxes.

    Serialized with kebab-case keys. Missing keys and null values fall back
    to the zero value of their type and unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    version: str = Field("", alias="version", description="Defaults schema version")
    sandbox_home: str = Field("", alias="sandbox-home", description="Where sandboxes are created")
    sandbox_binary: str = Field(
        "", alias="sandbox-binary", description="Where server binaries are expanded"
    )
    master_slave_base_port: int = Field(0, alias="master-slave-base-port")
    group_replication_base_port: int = Field(0, alias="group-replication-base-port")
    group_replication_sp_base_port: int = Field(0, alias="group-replication-sp-base-port")
    fan_in_replication_base_port: int = Field(0, alias="fan-in-replication-base-port")
    all_masters_replication_base_port: int = Field(0, alias="all-masters-replication-base-port")
    multiple_base_port: int = Field(0, alias="multiple-base-port")
    group_port_delta: int = Field(0, alias="group-port-delta")
    sandbox_prefix: str = Field("", alias="sandbox-prefix")
    master_slave_prefix: str = Field("", alias="master-slave-prefix")
    group_prefix: str = Field("", alias="group-prefix")
    group_sp_prefix: str = Field("", alias="group-sp-prefix")
    multiple_prefix: str = Field("", alias="multiple-prefix")
    fan_in_prefix: str = Field("", alias="fan-in-prefix")
    all_masters_prefix: str = Field("", alias="all-masters-prefix")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null leaves the zero value in place, like a missing key.
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].default
        return value

    def to_json(self) -> str:
        """Render as indented JSON with kebab-case keys."""
        return self.model_dump_json(by_alias=True, indent=2)


def factory_defaults(home: Path | None = None) -> SandboxDefaults:
    """Build the built-in defaults for a user home directory.

    Args:
        home: Home directory to derive paths from (default: current user's home)

    Returns:
        The factory defaults record
    """
    home = home if home is not None else Path.home()
    return SandboxDefaults(
        version=COMPATIBLE_VERSION,
        sandbox_home=str(home / "sandboxes"),
        sandbox_binary=str(home / "opt" / "mysql"),
        master_slave_base_port=11000,
        group_replication_base_port=12000,
        group_replication_sp_base_port=13000,
        fan_in_replication_base_port=14000,
        all_masters_replication_base_port=15000,
        multiple_base_port=16000,
        group_port_delta=125,
        sandbox_prefix="msb_",
        master_slave_prefix="rsandbox_",
        group_prefix="group_msb_",
        group_sp_prefix="group_sp_msb_",
        multiple_prefix="multi_msb_",
        fan_in_prefix="fan_in_msb_",
        all_masters_prefix="all_masters_msb_",
    )
