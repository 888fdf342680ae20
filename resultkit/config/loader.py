# resultkit/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Library works without YAML
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Dict, Any, List

import yaml

from .format import FormatConfig
from .validator import validate_config, has_errors, ConfigIssue

logger = logging.getLogger(__name__)


class ResultKitConfig:
    """
    Unified resultkit configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(self, format: Optional[FormatConfig] = None):
        self.format = format or FormatConfig.default()

    @classmethod
    def default(cls) -> "ResultKitConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ResultKitConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries
                ~/.resultkit/config.yml

        Returns:
            ResultKitConfig (code defaults when no usable YAML is found)

        Example YAML:
            format:
              indent_unit: "  "
              newline: "\\n"
              escape_mode: all
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()

        section = yaml_data.get("format") or {}
        if not isinstance(section, dict):
            logger.warning(f"Ignoring 'format' section: expected a mapping, got {type(section).__name__}")
            return cls.default()

        fmt = _merge_config(FormatConfig.default(), section, FormatConfig)

        issues = validate_config(fmt)
        for issue in issues:
            logger.warning(f"Config issue: {issue}")
        if has_errors(issues):
            logger.warning("Invalid format configuration, using code defaults")
            fmt = FormatConfig.default()

        return cls(format=fmt)

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self.format)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "format": self.format.to_dict(),
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if config_path:
        paths = [Path(config_path)]
    else:
        paths = [
            Path.home() / ".resultkit" / "config.yml",
        ]

    for path in paths:
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config {path}: {e}; using code defaults")
                return None
            if data is not None and not isinstance(data, dict):
                logger.warning(f"Config {path} is not a mapping; using code defaults")
                return None
            return data

    logger.debug("No config file found, using code defaults")
    return None


def _merge_config(default_instance, yaml_data: Dict[str, Any], config_class):
    """Merge YAML data into default config instance"""
    default_dict = default_instance.to_dict()

    merged = {**default_dict, **yaml_data}

    unknown = sorted(set(yaml_data) - set(config_class.__dataclass_fields__))
    if unknown:
        logger.warning(f"Ignoring unknown {config_class.__name__} keys: {', '.join(unknown)}")

    return config_class(**{k: v for k, v in merged.items() if k in config_class.__dataclass_fields__})


def load_config(config_path: Optional[Path] = None) -> ResultKitConfig:
    """
    Load resultkit configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        ResultKitConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Library works without YAML (code is truth)
    """
    return ResultKitConfig.from_yaml(config_path)


__all__ = [
    "ResultKitConfig",
    "load_config",
]
