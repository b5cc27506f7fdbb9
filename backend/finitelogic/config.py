"""
Engine configuration.

Settings are read from a YAML file. JSON is valid YAML, so a
`config.json` such as `{"debugLoggingEnabled": true}` loads as well.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ("finitelogic.yaml", "finitelogic.yml", "config.json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration file holds invalid settings."""


class EngineConfig(BaseModel):
    """Settings for the engine's console front-end and logging."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    debug_logging_enabled: bool = Field(
        default=False,
        alias="debugLoggingEnabled",
        description="Enable DEBUG output from the parser and session",
    )
    log_level: str = Field(
        default="INFO",
        description="Base log level when debug logging is disabled",
    )
    prompt: str = Field(
        default="logic> ",
        description="Prompt shown by the interactive console",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner when the console starts",
    )

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def effective_log_level(self) -> int:
        if self.debug_logging_enabled:
            return logging.DEBUG
        return getattr(logging, self.log_level)


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Config file. When omitted, the default file names are
            looked up in the current directory.

    Returns:
        The loaded config, or defaults when no file exists or the file
        cannot be parsed.

    Raises:
        ConfigError: If the file parses but holds invalid settings.
    """
    config_path = _resolve_path(path)
    if config_path is None:
        logger.debug("No config file found, using defaults")
        return EngineConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.warning("Could not parse %s, using defaults: %s", config_path, e)
        return EngineConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a mapping of settings")

    return config_from_dict(data, source=str(config_path))


def config_from_dict(data: Dict[str, Any], source: str = "<dict>") -> EngineConfig:
    """Build a config from already-parsed settings."""
    try:
        return EngineConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{source}: {e}") from e


def _resolve_path(path: Optional[Union[str, Path]]) -> Optional[Path]:
    if path is not None:
        path = Path(path)
        if not path.exists():
            logger.warning("Config file %s not found, using defaults", path)
            return None
        return path

    for name in DEFAULT_CONFIG_FILES:
        candidate = Path(name)
        if candidate.exists():
            return candidate
    return None
