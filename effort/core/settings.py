"""Effort scoring configuration management.

Configuration is loaded from multiple sources with the following priority
(highest to lowest):
1. Explicit overrides passed to ``get_settings``
2. Environment variables (with EFFORT_ prefix)
3. Configuration files (effort.config.yaml, effort.config.yml)
4. Default values

Environment variable support:
    EFFORT_LOGGING__LEVEL=DEBUG
    EFFORT_SCORING__PROVIDERS='["classification"]'
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ["effort.config.yaml", "effort.config.yml"]

DEFAULT_PROVIDERS = ["classification", "hint"]
DEFAULT_METHOD_NAME = "getMigrationEffortPointsForFile"

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the start directory or its parents.

    Args:
        start_dir: Directory to start search from. Defaults to cwd.

    Returns:
        Path to config file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()

    for _ in range(10):
        for filename in CONFIG_FILE_NAMES:
            config_path = search_dir / filename
            if config_path.exists():
                return config_path

        parent = search_dir.parent
        if parent == search_dir:
            break
        search_dir = parent

    return None


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Unreadable or malformed files are logged and treated as empty.
    """
    try:
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
            return config if isinstance(config, dict) else {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse config file %s: %s", config_path, e)
        return {}
    except OSError as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return {}


def _validate_level(v: str) -> str:
    upper_v = v.upper()
    if upper_v not in _VALID_LEVELS:
        raise ValueError(f"Invalid log level: {v}. Must be one of {_VALID_LEVELS}")
    return upper_v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_output: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )
    file: str | None = Field(
        default=None,
        description="Log file path (optional)",
    )
    module_levels: dict[str, str] = Field(
        default_factory=dict,
        description="Per-module log level overrides",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        return _validate_level(v)

    @field_validator("module_levels")
    @classmethod
    def validate_module_levels(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate every per-module level."""
        return {module: _validate_level(level) for module, level in v.items()}


class ScoringSettings(BaseSettings):
    """Effort scoring settings."""

    providers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROVIDERS),
        description="Names of score providers summed into a file's effort",
    )
    method_name: str = Field(
        default=DEFAULT_METHOD_NAME,
        min_length=1,
        description="Template method name exposing per-file effort",
    )

    @field_validator("providers")
    @classmethod
    def validate_providers(cls, v: list[str]) -> list[str]:
        """Require at least one provider and no duplicates."""
        if not v:
            raise ValueError("At least one score provider must be configured")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate score providers: {v}")
        return v


class EffortSettings(BaseSettings):
    """Main effort scoring configuration.

    Example:
        settings = EffortSettings()
        print(settings.scoring.providers)

        settings = EffortSettings(scoring={"providers": ["hint"]})
    """

    model_config = SettingsConfigDict(
        env_prefix="EFFORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)

    @model_validator(mode="before")
    @classmethod
    def load_from_config_file(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Merge values from a discovered YAML config file.

        Explicitly provided values win over file values, section by section.
        """
        if data.get("_skip_file_loading"):
            data.pop("_skip_file_loading", None)
            return data

        config_path = _find_config_file()
        if not config_path:
            return data

        file_config = _load_yaml_config(config_path)
        if not file_config:
            return data

        logger.debug("Loaded configuration from %s", config_path)
        merged = {**file_config, **data}
        for section in ["logging", "scoring"]:
            file_section = file_config.get(section)
            data_section = data.get(section)
            if isinstance(file_section, dict):
                merged[section] = {
                    **file_section,
                    **(data_section if isinstance(data_section, dict) else {}),
                }
        return merged

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dictionary."""
        return self.model_dump()


def get_settings(
    config_file: Path | None = None,
    **overrides: Any,
) -> EffortSettings:
    """Get an EffortSettings instance.

    Args:
        config_file: Optional explicit path to a configuration file. When
            given, automatic discovery is skipped.
        **overrides: Explicit configuration overrides.

    Returns:
        Configured EffortSettings instance.
    """
    if config_file and config_file.exists():
        file_config = _load_yaml_config(config_file)
        merged = {**file_config, **overrides, "_skip_file_loading": True}
        return EffortSettings(**merged)

    return EffortSettings(**overrides)


@lru_cache
def get_cached_settings() -> EffortSettings:
    """Get cached settings instance.

    The cache can be cleared with ``get_cached_settings.cache_clear()``.
    """
    return get_settings()
