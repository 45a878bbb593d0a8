# SPDX-License-Identifier: MIT
"""
Scanner configuration loader for credscan.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from credscan.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_NAMES = [".credscan.yml", ".credscan.yaml"]

DEFAULT_EXCLUDE_GLOBS = [
    "**/.git/**",
    "**/.svn/**",
    "**/.hg/**",
    "**/.venv/**",
    "**/venv/**",
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.pytest_cache/**",
    "**/__pycache__/**",
]


class ScanConfig(BaseModel):
    """Validated scanner settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    include_globs: List[str] = Field(default_factory=lambda: ["**/*"])
    exclude_globs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_GLOBS))
    max_file_size: int = Field(default=1_000_000, gt=0)
    disabled_detectors: List[str] = Field(default_factory=list)
    allowlist: List[str] = Field(default_factory=list)

    @field_validator("include_globs", "exclude_globs", "disabled_detectors", "allowlist", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


def load_scanner_config(config_path: Optional[str] = None, repo_root: str = ".") -> ScanConfig:
    """
    Load scanner configuration following the search order.

    Args:
        config_path: Explicit config path from --config CLI flag
        repo_root: Root path searched for .credscan.yml/.credscan.yaml

    Returns:
        Validated ScanConfig

    Raises:
        ConfigError: If config file is malformed or explicitly provided config is missing
    """
    # 1. If CLI --config provided, it must exist
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.exists():
            raise ConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        config = _load_yaml_config(config_abs_path)
        logger.info("Loaded config: %s", config_abs_path)
        return config

    # 2. Look for .credscan.yml or .credscan.yaml at the scan root
    root = Path(repo_root).resolve()
    if root.is_file():
        root = root.parent
    for config_name in CONFIG_NAMES:
        config_file = root / config_name
        if config_file.exists():
            config = _load_yaml_config(config_file)
            logger.info("Loaded config: %s", config_file)
            return config

    # 3. Use built-in defaults
    logger.info("Using default scanner config")
    return get_default_scanner_config()


def _load_yaml_config(config_path: Path) -> ScanConfig:
    """Load and validate a YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse config file: {e}", config_path=str(config_path)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a mapping", config_path=str(config_path))

    return parse_scanner_config(raw, config_path=str(config_path))


def parse_scanner_config(raw: Dict[str, Any], config_path: Optional[str] = None) -> ScanConfig:
    """Validate a raw config mapping."""
    try:
        return ScanConfig.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        section = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigError(
            f"Invalid config: {first['msg']}",
            config_path=config_path,
            section=section,
        ) from e


def get_default_scanner_config() -> ScanConfig:
    """
    Get the default scanner configuration.

    Returns:
        ScanConfig with default scanner settings
    """
    return ScanConfig()


def create_default_config_template() -> str:
    """
    Create a minimal .credscan.yml template with commented examples.

    Returns:
        YAML string with default configuration template
    """
    excludes = "\n".join(f'  - "{g}"' for g in DEFAULT_EXCLUDE_GLOBS)
    return f"""# credscan configuration

# File patterns to include (default: scan everything)
include_globs:
  - "**/*"

# File patterns to exclude
exclude_globs:
{excludes}
  # Add project-specific paths to exclude:
  # - "docs/**"

# Files larger than this many bytes are skipped
max_file_size: 1000000

# Secret types to disable by name
disabled_detectors: []
  # Examples:
  # - "Basic Auth Credentials"
  # - "Slack Token"

# Regular expressions; a finding whose value fully matches one is ignored
allowlist: []
  # - "sk_live_0{{24}}"
"""
