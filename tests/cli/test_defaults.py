"""Tests for defaults CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from sandboxer.cli import app
from sandboxer.defaults.models import factory_defaults
from sandboxer.defaults.store import read_defaults_file, write_defaults_file

runner = CliRunner()


@pytest.fixture
def config_file() -> Path:
    return Path.home() / ".sandboxer" / "config.json"


@pytest.fixture
def stored(config_file: Path) -> Path:
    write_defaults_file(config_file, factory_defaults(Path.home()))
    return config_file


class TestVersionCommand:
    """Test version command."""

    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "Sandboxer version 1.0.0" in result.stdout

    def test_version_short_flag(self) -> None:
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "Sandboxer version" in result.stdout


class TestHelpCommand:
    """Test help command."""

    def test_defaults_help(self) -> None:
        result = runner.invoke(app, ["defaults", "--help"])
        assert result.exit_code == 0
        for command in ("show", "update", "store", "remove", "export", "load", "labels"):
            assert command in result.stdout


class TestDefaultsShowCommand:
    """Test defaults show command."""

    def test_show_internal_values(self) -> None:
        result = runner.invoke(app, ["defaults", "show"])
        assert result.exit_code == 0
        assert "# Internal values:" in result.stdout
        assert '"sandbox-prefix": "msb_"' in result.stdout

    def test_show_configuration_file(self, stored: Path) -> None:
        result = runner.invoke(app, ["defaults", "show"])
        assert result.exit_code == 0
        assert f"# Configuration file: {stored}" in result.stdout

    def test_show_custom_configuration_file(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.json"
        defaults = factory_defaults(Path.home()).model_copy(update={"group_prefix": "gr_"})
        write_defaults_file(custom, defaults)

        result = runner.invoke(app, ["--config", str(custom), "defaults", "show"])

        assert result.exit_code == 0
        assert f"# Configuration file: {custom}" in result.stdout
        assert '"group-prefix": "gr_"' in result.stdout

    def test_show_configuration_from_environment(self, tmp_path: Path) -> None:
        custom = tmp_path / "env.json"
        write_defaults_file(custom, factory_defaults(Path.home()))

        result = runner.invoke(
            app, ["defaults", "show"], env={"SANDBOXER_CONFIG": str(custom)}
        )

        assert result.exit_code == 0
        assert f"# Configuration file: {custom}" in result.stdout

    def test_show_invalid_file_uses_internal_values(self, config_file: Path) -> None:
        write_defaults_file(
            config_file,
            factory_defaults(Path.home()).model_copy(
                update={"version": "0.0.1", "sandbox_prefix": "stale_"}
            ),
        )

        with patch("sandboxer.defaults.manager.time.sleep"):
            result = runner.invoke(app, ["defaults", "show"])

        assert result.exit_code == 0
        assert "not validated" in result.stdout
        assert "stale_" not in result.stdout
        assert '"sandbox-prefix": "msb_"' in result.stdout

    def test_show_undecodable_file_fails(self, config_file: Path) -> None:
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{broken")

        result = runner.invoke(app, ["defaults", "show"])

        assert result.exit_code == 1
        assert "error decoding defaults" in result.stdout


class TestDefaultsUpdateCommand:
    """Test defaults update command."""

    def test_update_value(self, config_file: Path) -> None:
        result = runner.invoke(app, ["defaults", "update", "sandbox-home", "/tmp/x"])

        assert result.exit_code == 0
        assert '# Updated sandbox-home -> "/tmp/x"' in result.stdout
        assert json.loads(config_file.read_text())["sandbox-home"] == "/tmp/x"

    def test_update_rejected_value_exits_cleanly(self, stored: Path) -> None:
        before = stored.read_text()

        result = runner.invoke(app, ["defaults", "update", "multiple-base-port", "12000"])

        assert result.exit_code == 0
        assert "Conflicts found" in result.stdout
        assert '# Updated multiple-base-port -> "12000"' in result.stdout
        assert stored.read_text() == before

    def test_update_unknown_label(self, stored: Path) -> None:
        before = stored.read_text()

        result = runner.invoke(app, ["defaults", "update", "bogus", "1"])

        assert result.exit_code == 1
        assert "Unrecognized label bogus" in result.stdout
        assert stored.read_text() == before

    def test_update_invalid_number(self) -> None:
        result = runner.invoke(app, ["defaults", "update", "group-port-delta", "abc"])

        assert result.exit_code == 1
        assert "Not a valid number: abc" in result.stdout


class TestDefaultsFileCommands:
    """Test store, remove, export and load commands."""

    def test_store(self, config_file: Path) -> None:
        result = runner.invoke(app, ["defaults", "store"])

        assert result.exit_code == 0
        assert "Defaults stored" in result.stdout
        assert read_defaults_file(config_file) == factory_defaults(Path.home())

    def test_remove(self, stored: Path) -> None:
        result = runner.invoke(app, ["defaults", "remove"])

        assert result.exit_code == 0
        assert "removed" in result.stdout
        assert not stored.exists()

    def test_remove_missing(self, config_file: Path) -> None:
        result = runner.invoke(app, ["defaults", "remove"])

        assert result.exit_code == 1
        assert "not found" in result.stdout
        assert not config_file.exists()

    def test_export(self, tmp_path: Path) -> None:
        target = tmp_path / "exported.json"

        result = runner.invoke(app, ["defaults", "export", str(target)])

        assert result.exit_code == 0
        assert read_defaults_file(target) == factory_defaults(Path.home())

    def test_export_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "exported.json"
        target.write_text("{}")

        result = runner.invoke(app, ["defaults", "export", str(target)])

        assert result.exit_code == 1
        assert "already exists" in result.stdout
        assert target.read_text() == "{}"

    def test_load(self, tmp_path: Path, config_file: Path) -> None:
        source = tmp_path / "incoming.json"
        incoming = factory_defaults(Path.home()).model_copy(update={"group_port_delta": 111})
        write_defaults_file(source, incoming)

        result = runner.invoke(app, ["defaults", "load", str(source)])

        assert result.exit_code == 0
        assert read_defaults_file(config_file) == incoming

    def test_load_invalid(self, tmp_path: Path, config_file: Path) -> None:
        source = tmp_path / "incoming.json"
        write_defaults_file(
            source,
            factory_defaults(Path.home()).model_copy(update={"master_slave_base_port": 80}),
        )

        result = runner.invoke(app, ["defaults", "load", str(source)])

        assert result.exit_code == 1
        assert "Value master-slave-base-port (80) must be between 11000 and 30000" in result.stdout
        assert not config_file.exists()

    def test_labels(self) -> None:
        result = runner.invoke(app, ["defaults", "labels"])

        assert result.exit_code == 0
        assert "fan-in-base-port" in result.stdout
        assert "group-port-delta" in result.stdout
