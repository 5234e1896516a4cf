"""
Configuration management for env-to-json.

This module loads an optional YAML configuration file holding default
conversion options for the command line, for example::

    options:
      format: yaml
      redact:
        - PASSWORD
        - TOKEN
      exclude: DEBUG,LOG_LEVEL

Command-line flags always override these defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

LIST_OPTIONS = ("whitelist", "exclude", "redact")
STRING_OPTIONS = ("format", "output", "prefix", "file")


def split_list(value: Any) -> list[str]:
    """Normalize a comma-separated string or a list into trimmed items."""
    if value is None:
        return []

    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)

    return [str(item).strip() for item in items if str(item).strip()]


@dataclass
class EnvToJsonConfig:
    """Main configuration for env-to-json."""

    defaults: dict[str, Any] = field(default_factory=dict)
    source: Path | None = None

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "EnvToJsonConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the configuration file. If None, searches
                        for config in standard locations.

        Returns:
            An EnvToJsonConfig instance with the loaded configuration.
        """
        if config_path is None:
            config_path = cls._find_config_file()

        if config_path is None or not Path(config_path).exists():
            return cls()

        return cls._parse_config_file(config_path)

    @classmethod
    def _find_config_file(cls) -> str | None:
        """Search for config file in standard locations."""
        search_paths = [
            Path.cwd() / ".env-to-json.yaml",
            Path.cwd() / ".env-to-json.yml",
            Path.cwd() / "env-to-json.yaml",
            Path.cwd() / "env-to-json.yml",
            Path.home() / ".config" / "env-to-json.yaml",
            Path.home() / ".env-to-json.yaml",
        ]

        for path in search_paths:
            if path.exists():
                return str(path)

        return None

    @classmethod
    def _parse_config_file(cls, config_path: str | Path) -> "EnvToJsonConfig":
        """Parse a YAML configuration file."""
        path = Path(config_path)

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in config file: {exc}", exc) from exc
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {path}: {exc}", exc) from exc

        if data is None:
            return cls(source=path)

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        options = data.get("options") or {}
        if not isinstance(options, dict):
            raise ConfigurationError(f"'options' in {path} must be a mapping")

        defaults: dict[str, Any] = {}
        for name, value in options.items():
            if name in LIST_OPTIONS:
                defaults[name] = split_list(value)
            elif name in STRING_OPTIONS:
                defaults[name] = None if value is None else str(value)
            elif name == "generate_example":
                defaults[name] = bool(value)
            else:
                raise ConfigurationError(f"Unknown option '{name}' in config file {path}")

        return cls(defaults=defaults, source=path)

    def get(self, name: str, default: Any = None) -> Any:
        """Get a default option value."""
        value = self.defaults.get(name)
        return default if value is None else value


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, from_exception: Exception | None = None) -> None:
        self.message = message
        self.from_exception = from_exception
        super().__init__(message)
        if from_exception:
            self.__cause__ = from_exception
