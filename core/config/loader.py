"""Configuration loader - layers defaults, a YAML file and overrides."""

import copy
import logging
from pathlib import Path
from typing import Optional

import yaml

from core.config.exceptions import ConfigNotFoundError, ConfigParseError
from core.config.merger import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/ssh-keys/config.yaml")

DEFAULTS = {
    "secret": {"id": "ssh-keys", "backend": "aws"},
    "aws": {"profile": None, "region": "us-east-1"},
    "file": {"path": "~/.ssh-keys/secrets.json"},
    "logging": {"level": "WARNING", "format": "standard", "file": None},
}


class ConfigLoader:
    """
    Loads settings for the ssh-keys command.

    Load order (later wins):
        1. Built-in DEFAULTS
        2. YAML file (explicit path, else ~/.config/ssh-keys/config.yaml if present)
        3. Overrides from command-line options and environment variables

    Example file:
        secret:
          id: ssh-keys
          backend: aws
        aws:
          profile: work
          region: eu-west-1

    Usage:
        loader = ConfigLoader(config_path="ssh-keys.yaml")
        config = loader.load({"secret": {"id": "team-keys"}})
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.explicit = config_path is not None
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()

    def _load_yaml(self, path: Path) -> dict:
        """Load and parse a YAML file."""
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(content, dict):
            raise ConfigParseError(f"Config in {path} must be a mapping")

        logger.debug(f"Loaded config: {path}")
        return content

    def load(self, overrides: Optional[dict] = None) -> dict:
        """
        Build the effective configuration.

        Args:
            overrides: Nested dict of values that win over file and defaults;
                None leaves a setting unchanged

        Returns:
            Merged configuration dict
        """
        config = copy.deepcopy(DEFAULTS)

        if self.explicit or self.config_path.exists():
            config = deep_merge(config, self._load_yaml(self.config_path))
            logger.info(f"Merged config file: {self.config_path}")

        return deep_merge(config, overrides)


def backend_config(config: dict) -> dict:
    """Keyword arguments for the configured secret store backend."""
    backend = config["secret"]["backend"]
    if backend == "aws":
        return {"profile": config["aws"]["profile"], "region": config["aws"]["region"]}
    if backend == "file":
        return {"path": config["file"]["path"]}
    return dict(config.get(backend) or {})
