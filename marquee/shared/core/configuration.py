"""
Configuration Management for Marquee

Centralized configuration with a layered precedence hierarchy:
environment → project → user → defaults file → pydantic defaults.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class DataConfig(BaseModel):
    """Catalog loading configuration"""
    model_config = ConfigDict(extra='forbid')

    load_delay: float = Field(default=2.0, ge=0.0, le=60.0, description="Simulated round-trip delay (seconds)")
    dataset_path: Optional[str] = Field(default=None, description="Override for the bundled movies.json")


class LoggingConfig(BaseModel):
    """Logging configuration"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="INFO", description="Root / file log level")
    console_level: str = Field(default="WARNING", description="Console handler level")
    log_file: Optional[str] = Field(default=None, description="Rotating log file path; no file logging when unset")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    data: DataConfig = Field(default_factory=DataConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    schema_version: int = Field(default=1, description="Configuration schema version")


# env var -> (section, key, converter)
_ENV_MAP = {
    'MARQUEE_LOAD_DELAY': ('data', 'load_delay', float),
    'MARQUEE_DATASET_PATH': ('data', 'dataset_path', str),
    'LOG_LEVEL': ('logging', 'level', str),
    'MARQUEE_CONSOLE_LOG_LEVEL': ('logging', 'console_level', str),
    'MARQUEE_LOG_FILE': ('logging', 'log_file', str),
}


class ConfigManager:
    """Centralized configuration manager with layered precedence"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or (Path.cwd() / "config")
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None
        self._project_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load a YAML mapping; missing or malformed files count as empty."""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level is not a mapping")
            return {}
        return data

    def _load_system_defaults(self) -> SystemConfig:
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")
            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

    def _load_project_config(self) -> Dict[str, Any]:
        if self._project_config is None:
            self._project_config = self._load_yaml_file(self.config_dir / "project.yaml")
        return self._project_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → project → user → system"""
        merged = self._load_system_defaults().model_dump()
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._load_project_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key, convert) in _ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            try:
                converted = convert(value)
            except ValueError:
                logger.warning(f"Ignoring {env_key}={value!r}: not a valid {convert.__name__}")
                continue
            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ConfigurationError(f"Configuration validation failed: {e}") from e
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()

    def reload_config(self) -> None:
        """Clear cached configurations and reload from files"""
        self._system_config = None
        self._user_config = None
        self._project_config = None


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
    """Get current system configuration"""
    return get_config_manager().get_config(validation_level)
