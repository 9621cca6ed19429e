"""Configuration management for orcid-works.

Loads settings from YAML configuration file with sensible defaults.
Supports environment variable overrides for deployment-specific settings.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

# Module logger
logger = logging.getLogger("orcid_works.config")


# Default configuration values
DEFAULT_CONFIG = {
    "api": {
        "base_url": "https://pub.orcid.org/v3.0",
        "timeout": 10,  # seconds
        "user_agent": "orcid-works/0.1.0",
    },
    "logging": {
        "level": "INFO",
    },
}


class Config:
    """Configuration manager for orcid-works."""

    def __init__(self, config_file: Path | None = None):
        """Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if config_file and config_file.exists():
            self._load_from_file(config_file)

        self._apply_env_overrides()

    def _load_from_file(self, config_file: Path) -> None:
        """Load configuration from YAML file."""
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                user_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_file}: {e}")
            return

        if isinstance(user_config, dict):
            self._merge_config(user_config)
        elif user_config is not None:
            logger.warning(f"Ignoring config file {config_file}: top level is not a mapping")

    def _merge_config(self, user_config: dict) -> None:
        """Merge user configuration with defaults, section by section."""
        for section, values in user_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

        self._validate_config()

    def _validate_config(self) -> None:
        """Reset values from a config file that cannot be used safely."""
        api = self._config.get("api", {})

        base_url = api.get("base_url", "")
        if base_url and not str(base_url).startswith("https://"):
            logger.warning(f"Rejecting non-HTTPS api.base_url: {base_url}")
            api["base_url"] = DEFAULT_CONFIG["api"]["base_url"]

        timeout = api.get("timeout")
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            logger.warning(f"Rejecting invalid api.timeout: {timeout!r}")
            api["timeout"] = DEFAULT_CONFIG["api"]["timeout"]

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides.

        Supports:
        - ORCID_API_BASE_URL
        - ORCID_API_TIMEOUT
        - ORCID_USER_AGENT
        """
        if base_url := os.getenv("ORCID_API_BASE_URL"):
            self._config["api"]["base_url"] = base_url.rstrip("/")

        if timeout := os.getenv("ORCID_API_TIMEOUT"):
            try:
                value = float(timeout)
            except ValueError:
                logger.warning(f"Ignoring non-numeric ORCID_API_TIMEOUT: {timeout}")
            else:
                if value > 0:
                    self._config["api"]["timeout"] = value

        if user_agent := os.getenv("ORCID_USER_AGENT"):
            self._config["api"]["user_agent"] = user_agent

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            section: Configuration section (e.g., 'api', 'logging')
            key: Configuration key within section
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        return self._config.get(section, {}).get(key, default)

    @property
    def api_base_url(self) -> str:
        """Get ORCID API base URL."""
        return self.get("api", "base_url")

    @property
    def api_timeout(self) -> float:
        """Get API request timeout in seconds."""
        return self.get("api", "timeout")

    @property
    def user_agent(self) -> str:
        """Get the User-Agent header sent with every request."""
        return self.get("api", "user_agent")

    @property
    def log_level(self) -> str:
        """Get the default log level name."""
        return self.get("logging", "level")


# Global default config instance
_default_config = None


def get_config(config_file: Path | None = None) -> Config:
    """Get configuration instance.

    Args:
        config_file: Optional path to config file

    Returns:
        Config instance
    """
    global _default_config

    if config_file:
        _default_config = Config(config_file)
        return _default_config

    if _default_config is None:
        default_paths = [
            Path.cwd() / ".orcid-works.yaml",
            Path.home() / ".orcid-works.yaml",
            Path("/etc/orcid-works/config.yaml"),
        ]

        for path in default_paths:
            if path.exists():
                _default_config = Config(path)
                break

        if _default_config is None:
            _default_config = Config()

    return _default_config


def reset_config() -> None:
    """Forget the process-wide configuration so the next get_config() reloads it."""
    global _default_config
    _default_config = None
