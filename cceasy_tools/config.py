"""
Configuration file parsing and management.

Supports YAML and JSON configuration files (chosen by extension).
Merges configurations from multiple sources (custom → project → user → defaults).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from typing import Any

import yaml

from .common import vlog
from .platform_paths import LOCAL_ROOT_ENV


# Configuration file locations (in priority order)
CONFIG_LOCATIONS = [
    ".cceasy.yml",                                   # Project root (highest priority)
    ".cceasy.yaml",
    os.path.expanduser("~/.cceasy/config.yml"),      # User global
    os.path.expanduser("~/.cceasy/config.yaml"),
]

VALID_PLATFORMS = {"auto", "posix", "windows"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Config:
    """
    Configuration for tool detection and installation.

    Attributes:
        version: Config schema version
        local_root: Local installation root (empty means ~/.cceasy/node)
        platform: Path layout to use ('auto', 'posix', 'windows')
        log_level: Console log level
        log_file: Optional log file path
        source: Path to the configuration file that was loaded
    """
    version: int = 1
    local_root: str = ""
    platform: str = "auto"
    log_level: str = "INFO"
    log_file: str = ""
    source: str = ""

    def __post_init__(self):
        if self.version != 1:
            raise ValueError(f"Unsupported config version: {self.version}. Expected version 1")

        if self.platform not in VALID_PLATFORMS:
            raise ValueError(
                f"Invalid platform: {self.platform}. "
                f"Must be one of: {', '.join(sorted(VALID_PLATFORMS))}"
            )

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )

    @staticmethod
    def from_dict(data: dict[str, Any], source: str = "") -> Config:
        """Create Config from dictionary."""
        logging_data = data.get("logging", {}) or {}
        local_root = data.get("local_root") or ""

        return Config(
            version=data.get("version", 1),
            local_root=os.path.expanduser(local_root) if local_root else "",
            platform=data.get("platform", "auto"),
            log_level=logging_data.get("level", "INFO"),
            log_file=logging_data.get("file") or "",
            source=source,
        )

    def merge_with(self, other: Config) -> Config:
        """
        Merge this config with another, preferring values from this config.

        Args:
            other: Other config to merge (lower priority)

        Returns:
            New merged Config object
        """
        return Config(
            version=self.version,
            local_root=self.local_root or other.local_root,
            platform=self.platform if self.platform != "auto" else other.platform,
            log_level=self.log_level if self.log_level != "INFO" else other.log_level,
            log_file=self.log_file or other.log_file,
            source=self.source or other.source,
        )


def _load_yaml(file_path: str) -> dict[str, Any] | None:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return None
    return data if isinstance(data, dict) else {}


def _load_json(file_path: str) -> dict[str, Any] | None:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else {}


def load_config_file(file_path: str, verbose: bool = False) -> Config | None:
    """
    Load configuration from a single file.

    Args:
        file_path: Path to a .yml/.yaml or .json file
        verbose: Enable verbose logging

    Returns:
        Config object, or None if file cannot be loaded
    """
    if not os.path.exists(file_path):
        return None

    vlog(f"Loading config from: {file_path}", verbose)

    if file_path.endswith(".json"):
        data = _load_json(file_path)
    else:
        data = _load_yaml(file_path)

    if data is None:
        vlog(f"Invalid config file: {file_path}", verbose)
        return None

    try:
        return Config.from_dict(data, source=file_path)
    except (ValueError, TypeError, AttributeError) as e:
        vlog(f"Config validation failed for {file_path}: {e}", verbose)
        return None


def load_config(custom_path: str | None = None, verbose: bool = False) -> Config:
    """
    Load and merge configuration from all sources.

    Configuration precedence (highest to lowest):
    1. CCEASY_LOCAL_ROOT environment variable (local_root only)
    2. Custom path (if provided)
    3. Project .cceasy.yml
    4. User ~/.cceasy/config.yml
    5. Default configuration

    Args:
        custom_path: Optional path to custom configuration file
        verbose: Enable verbose logging

    Returns:
        Merged Config object (never None, returns defaults if no config found)

    Raises:
        ValueError: If custom_path is provided but file cannot be loaded
    """
    configs: list[Config] = []

    if custom_path:
        config = load_config_file(custom_path, verbose)
        if config is None:
            raise ValueError(f"Could not load config from specified path: {custom_path}")
        configs.append(config)

    for location in CONFIG_LOCATIONS:
        config = load_config_file(location, verbose)
        if config is not None:
            configs.append(config)

    merged = Config()
    if configs:
        merged = configs[0]
        for config in configs[1:]:
            merged = merged.merge_with(config)
        vlog(f"Merged {len(configs)} config files", verbose)
    else:
        vlog("No config files found, using defaults", verbose)

    env_root = os.environ.get(LOCAL_ROOT_ENV)
    if env_root:
        merged = replace(merged, local_root=os.path.expanduser(env_root))

    return merged
