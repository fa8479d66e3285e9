"""Configuration management for campaign-scenes using YAML files."""

from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".campaign-scenes"

DEFAULTS: dict[str, str] = {
    "backend": "yaml",
    "campaign.path": "campaign.yaml",
}


class Config:
    """Configuration stored in a YAML file.

    Local config lives in .campaign-scenes/config.yaml under the current
    directory, global config in ~/.campaign-scenes/config.yaml. Lookups try
    local, then global, then the built-in defaults.
    """

    def __init__(self, use_global: bool = False, config_dir: Path | None = None, home: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            use_global: If True, read and write the global config only.
            config_dir: Directory holding config.yaml (overrides the default location)
            home: Home directory used to find the global config
        """
        home = Path(home) if home is not None else Path.home()
        self.global_dir = home / CONFIG_DIR_NAME
        self.is_global = use_global

        if config_dir is not None:
            self.config_dir = Path(config_dir)
        elif use_global:
            self.config_dir = self.global_dir
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
        self.config_file = self.config_dir / "config.yaml"

        self._config: dict[str, Any] = self._read(self.config_file)

        self._global_config: dict[str, Any] = {}
        global_file = self.global_dir / "config.yaml"
        if not self.is_global and global_file != self.config_file and global_file.exists():
            try:
                self._global_config = self._read(global_file)
            except ValueError as e:
                logger.warning("Failed to load global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        if not path.exists():
            logger.debug("Config file does not exist", config_file=str(path))
            return {}

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config", config_file=str(path), error=str(e))
            raise ValueError(f"Failed to load config from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    def _save(self) -> None:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)
            logger.debug("Config saved", config_file=str(self.config_file))
        except OSError as e:
            logger.error("Failed to save config", error=str(e))
            raise ValueError(f"Failed to save config to {self.config_file}: {e}") from e

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a configuration value.

        Args:
            key: Configuration key
            default: Returned when the key is set nowhere, not even in the defaults

        Returns:
            Configuration value or default
        """
        if key in self._config:
            return self._config[key]
        if not self.is_global and key in self._global_config:
            return self._global_config[key]
        if default is not None:
            return default
        return DEFAULTS.get(key)

    def set(self, key: str, value: str) -> None:
        logger.debug("Setting config value", key=key)
        self._config[key] = value
        self._save()

    def unset(self, key: str) -> None:
        logger.debug("Unsetting config value", key=key)
        if key in self._config:
            del self._config[key]
            self._save()

    def list(self) -> dict[str, str]:
        """List explicitly set values; local values override global ones."""
        if self.is_global:
            return self._config.copy()
        merged = self._global_config.copy()
        merged.update(self._config)
        return merged

    @property
    def campaign_path(self) -> Path:
        """Campaign file location. Relative paths resolve against the current directory."""
        return Path(str(self.get("campaign.path") or DEFAULTS["campaign.path"])).expanduser()


def get_config(use_global: bool = False) -> Config:
    """Get a configuration instance."""
    return Config(use_global=use_global)
