"""Tests for update labels."""

import pytest

from sandboxer.defaults.errors import InvalidNumberError, UnknownLabelError
from sandboxer.defaults.fields import DefaultsField, resolve_label
from sandboxer.defaults.models import SandboxDefaults


def test_every_field_has_a_label() -> None:
    attributes = {field.attribute for field in DefaultsField}
    assert attributes == set(SandboxDefaults.model_fields)


def test_resolve_label() -> None:
    assert resolve_label("sandbox-home") is DefaultsField.SANDBOX_HOME
    assert resolve_label("fan-in-base-port") is DefaultsField.FAN_IN_BASE_PORT


def test_resolve_label_accepts_file_keys() -> None:
    assert resolve_label("fan-in-replication-base-port") is DefaultsField.FAN_IN_BASE_PORT
    assert (
        resolve_label("all-masters-replication-base-port") is DefaultsField.ALL_MASTERS_BASE_PORT
    )


@pytest.mark.parametrize("label", ["", "sandbox_home", "galera-base-port", "SANDBOX-HOME"])
def test_resolve_unknown_label(label: str) -> None:
    with pytest.raises(UnknownLabelError) as exc_info:
        resolve_label(label)
    assert exc_info.value.label == label


def test_numeric_fields() -> None:
    assert DefaultsField.GROUP_PORT_DELTA.numeric
    assert DefaultsField.MULTIPLE_BASE_PORT.numeric
    assert not DefaultsField.VERSION.numeric
    assert not DefaultsField.MULTIPLE_PREFIX.numeric


@pytest.mark.parametrize(("value", "expected"), [("12000", 12000), ("+150", 150), ("-1", -1)])
def test_parse_integer(value: str, expected: int) -> None:
    assert DefaultsField.MASTER_SLAVE_BASE_PORT.parse(value) == expected


@pytest.mark.parametrize("value", ["", "12k", "1.5", " 12000", "1_000", "١٥٠"])
def test_parse_invalid_integer(value: str) -> None:
    with pytest.raises(InvalidNumberError, match="Not a valid number"):
        DefaultsField.GROUP_PORT_DELTA.parse(value)


def test_parse_string_field_keeps_value() -> None:
    assert DefaultsField.SANDBOX_PREFIX.parse("42") == "42"
