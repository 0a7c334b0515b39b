"""
Configuration management for object serialization.

Handles loading and merging configuration from JSON files,
providing per-dialect defaults and validation for serializer settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class SerializerConfig:
    """Settings for one serializer."""

    # Target dialect
    dialect: str = "java"

    # Traversal settings
    max_depth: int = 0  # 0 means unlimited
    only_properties_with_matching_field: bool = False

    # Output settings
    line_ending: str = "\n"
    encoding: str = "utf-8"

    # Fixture rendering
    fixture_name: str = "createFixture"

    # Custom settings (dialect-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported dialects."""
        self._configs["java"] = {
            "dialect": "java",
            "fixture_name": "createFixture",
            "custom": {
                "fixture_class": "Fixtures",
            },
        }

        self._configs["python"] = {
            "dialect": "python",
            "fixture_name": "create_fixture",
            "custom": {},
        }

    def get_config(
        self,
        dialect: str = "java",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> SerializerConfig:
        """
        Get complete configuration for a dialect.

        Args:
            dialect: Target dialect name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the dialect
        """
        base_config = json.loads(json.dumps(self._configs.get(dialect, {})))
        base_config.setdefault("dialect", dialect)

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> SerializerConfig:
        """Convert dictionary to SerializerConfig instance."""
        known_fields = {f.name for f in fields(SerializerConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return SerializerConfig(**config_args)

    def save_config(self, config: SerializerConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            "dialect": config.dialect,
            "max_depth": config.max_depth,
            "only_properties_with_matching_field": config.only_properties_with_matching_field,
            "line_ending": config.line_ending,
            "encoding": config.encoding,
            "fixture_name": config.fixture_name,
        }
        config_dict.update(config.custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_dialects(self) -> List[str]:
        """Get list of dialects with defaults."""
        return list(self._configs.keys())

    def validate_config(self, config: SerializerConfig) -> List[str]:
        """
        Validate a configuration.

        Returns:
            List of validation warnings/errors
        """
        warnings = []

        if not isinstance(config.max_depth, int) or isinstance(config.max_depth, bool):
            warnings.append(f"max_depth must be an integer: {config.max_depth!r}")
        elif config.max_depth < 0:
            warnings.append(f"max_depth must not be negative: {config.max_depth}")

        if config.line_ending not in ("\n", "\r\n"):
            warnings.append(f"Unusual line_ending: {config.line_ending!r}")

        try:
            "".encode(config.encoding)
        except LookupError:
            warnings.append(f"Unknown encoding: {config.encoding}")

        if not config.fixture_name.isidentifier():
            warnings.append(f"Invalid fixture_name: {config.fixture_name}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    dialect: str = "java",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> SerializerConfig:
    """
    Convenience function to load configuration.

    Args:
        dialect: Target dialect name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the dialect

    Raises:
        ConfigError: If the file cannot be loaded or the result is invalid
    """
    manager = get_config_manager()
    config = manager.get_config(dialect, custom_config, config_file)
    problems = manager.validate_config(config)
    if any(p.startswith("max_depth") for p in problems):
        raise ConfigError("; ".join(problems))
    for problem in problems:
        logger.warning("Configuration: %s", problem)
    return config


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "dialect": "java",
    "max_depth": 3,
    "only_properties_with_matching_field": True,
    "fixture_name": "createFixture",
    "fixture_class": "OrderFixtures",
}
