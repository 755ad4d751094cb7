"""Configuration management for doclingo."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import yaml

from .errors import ConfigError

# Default paths
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "doclingo"

# Environment variables
API_KEY_ENV = "GEMINI_API_KEY"
MODEL_ENV = "GEMINI_MODEL"
CONFIG_PATH_ENV = "DOCLINGO_CONFIG"
LOG_LEVEL_ENV = "DOCLINGO_LOG_LEVEL"

# Remote generation API
DEFAULT_MODEL = "gemini-2.0-flash"
ENDPOINT_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_TIMEOUT = 120.0

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def get_default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the config file path, honouring ``DOCLINGO_CONFIG``."""
    env = os.environ if environ is None else environ
    override = env.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_DIR / "config.yaml"


def get_default_config_data() -> dict:
    """Return the default configuration as a dictionary."""
    return {
        "model": {
            "default": DEFAULT_MODEL,
        },
        "request": {
            "timeout": DEFAULT_TIMEOUT,
        },
        "logging": {
            "level": DEFAULT_LOG_LEVEL,
        },
    }


class Config:
    """
    Configuration for a doclingo run.

    Values come from two places: the optional YAML file (model default,
    request timeout, log level) and the process environment (credential,
    model override, log level override). The environment is captured once
    at construction, so a Config can be built from any mapping in tests.
    """

    def __init__(
        self,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self._environ = dict(os.environ if environ is None else environ)
        self.config_path = config_path or get_default_config_path(self._environ)
        self._data = self._load_config()
        self._validate()

    def _load_config(self) -> dict:
        """Load configuration from file or return defaults."""
        if not self.config_path.exists():
            return get_default_config_data()
        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(str(self.config_path), f"malformed YAML ({e})") from e
        except OSError as e:
            raise ConfigError(str(self.config_path), e.strerror or str(e)) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(str(self.config_path), "top-level value must be a mapping")
        return data

    def _section(self, name: str) -> dict:
        section = self._data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(str(self.config_path), f"'{name}' must be a mapping")
        return section

    def _validate(self) -> None:
        # Invalid file values fail at construction.
        self.default_model
        self.timeout
        self.log_level

    @property
    def api_key(self) -> str | None:
        """Gemini API key from the environment, unvalidated."""
        return self._environ.get(API_KEY_ENV)

    @property
    def model_override(self) -> str | None:
        """Model identifier from ``GEMINI_MODEL``; None when unset."""
        return self._environ.get(MODEL_ENV)

    @property
    def default_model(self) -> str:
        """Model identifier used when no override is given."""
        value = self._section("model").get("default", DEFAULT_MODEL)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(str(self.config_path), "model.default must be a non-empty string")
        return value.strip()

    @property
    def timeout(self) -> float:
        """Seconds to wait for the remote service."""
        value = self._section("request").get("timeout", DEFAULT_TIMEOUT)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(str(self.config_path), "request.timeout must be a positive number")
        return float(value)

    @property
    def log_level(self) -> str:
        """Log level name; ``DOCLINGO_LOG_LEVEL`` wins over the file."""
        env_level = self._environ.get(LOG_LEVEL_ENV, "").strip()
        if env_level:
            source, value = LOG_LEVEL_ENV, env_level
        else:
            source = str(self.config_path)
            value = self._section("logging").get("level", DEFAULT_LOG_LEVEL)
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigError(source, f"unknown log level '{value}'. Must be one of {', '.join(LOG_LEVELS)}")
        return level


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
