"""Tests for configuration loader."""

import pytest

from core.config.exceptions import ConfigNotFoundError, ConfigParseError
from core.config.loader import DEFAULTS, ConfigLoader, backend_config
from core.config.merger import deep_merge


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Keep a real ~/.config/ssh-keys/config.yaml out of the tests."""
    monkeypatch.setattr(
        "core.config.loader.DEFAULT_CONFIG_PATH", tmp_path / "absent" / "config.yaml"
    )


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_override_wins_and_preserves_siblings(self):
        base = {"aws": {"profile": "default", "region": "us-east-1"}}
        override = {"aws": {"profile": "work"}}

        result = deep_merge(base, override)

        assert result == {"aws": {"profile": "work", "region": "us-east-1"}}

    def test_none_values_skipped(self):
        """Unset options should not clear lower layers."""
        base = {"secret": {"id": "ssh-keys"}}

        result = deep_merge(base, {"secret": {"id": None}})

        assert result["secret"]["id"] == "ssh-keys"


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_defaults_without_file(self):
        """Should return the built-in defaults when no file exists."""
        config = ConfigLoader().load()

        assert config == DEFAULTS
        assert config is not DEFAULTS

    def test_file_overrides_defaults(self, tmp_path):
        """YAML settings should win over defaults."""
        # Arrange
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            """
secret:
  id: team-keys
aws:
  profile: work
"""
        )

        # Act
        config = ConfigLoader(config_file).load()

        # Assert
        assert config["secret"]["id"] == "team-keys"
        assert config["secret"]["backend"] == "aws"  # preserved default
        assert config["aws"]["profile"] == "work"
        assert config["aws"]["region"] == "us-east-1"

    def test_overrides_win_over_file(self, tmp_path):
        """Command-line overrides should beat the file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("aws:\n  region: eu-west-1\n")

        config = ConfigLoader(config_file).load(
            {"aws": {"region": "ap-south-1", "profile": None}}
        )

        assert config["aws"]["region"] == "ap-south-1"
        assert config["aws"]["profile"] is None

    def test_default_path_used_when_present(self, tmp_path, monkeypatch):
        """Should pick up the default config file if it exists."""
        default_file = tmp_path / "config.yaml"
        default_file.write_text("secret:\n  backend: file\n")
        monkeypatch.setattr("core.config.loader.DEFAULT_CONFIG_PATH", default_file)

        config = ConfigLoader().load()

        assert config["secret"]["backend"] == "file"

    def test_explicit_missing_file(self, tmp_path):
        """Should raise ConfigNotFoundError for a missing explicit path."""
        with pytest.raises(ConfigNotFoundError) as exc_info:
            ConfigLoader(tmp_path / "missing.yaml").load()

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        """Should raise ConfigParseError for invalid YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("secret: [unclosed")

        with pytest.raises(ConfigParseError) as exc_info:
            ConfigLoader(config_file).load()

        assert "Invalid YAML" in str(exc_info.value)

    def test_non_mapping_yaml(self, tmp_path):
        """A YAML list is not a valid config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigParseError):
            ConfigLoader(config_file).load()


class TestBackendConfig:
    """Tests for backend_config."""

    def test_aws(self):
        config = ConfigLoader().load({"aws": {"profile": "work"}})

        assert backend_config(config) == {"profile": "work", "region": "us-east-1"}

    def test_file(self):
        config = ConfigLoader().load({"secret": {"backend": "file"}})

        assert backend_config(config) == {"path": "~/.ssh-keys/secrets.json"}
