"""Tests for the init command."""

from pathlib import Path

from typer.testing import CliRunner

from spendlog.cli import app
from spendlog.config import load_config

runner = CliRunner()


class TestInitCommand:
    """Tests for spendlog init."""

    def test_creates_config(self, tmp_path: Path) -> None:
        """Should write the default config file."""
        config_path = tmp_path / "spendlog" / "config.toml"

        result = runner.invoke(app, ["init", "--config", str(config_path)])

        assert result.exit_code == 0
        assert load_config(config_path)["currency_symbol"] == "Rs."

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """Should fail when the config exists and --force is not given."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('currency_symbol = "$"\n')

        result = runner.invoke(app, ["init", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert load_config(config_path)["currency_symbol"] == "$"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """Should replace an existing config with --force."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('currency_symbol = "$"\n')

        result = runner.invoke(app, ["init", "--force", "--config", str(config_path)])

        assert result.exit_code == 0
        assert load_config(config_path)["currency_symbol"] == "Rs."
