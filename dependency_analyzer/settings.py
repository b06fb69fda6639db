"""Settings management for dependency-analyzer.

Scope-aware YAML settings. The project file wins over the global file:

1. project (.dependency-analyzer/settings.yaml in the current directory)
2. global (~/.dependency-analyzer/settings.yaml)

Example settings.yaml:

    resolvers:
      enabled: [NPM, PIP]
    output:
      format: json
    discovery:
      exclude: [vendor, third_party]
    logging:
      level: DEBUG
      path: ./logs/analyzer.log.jsonl
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigurationError

SETTINGS_DIR_NAME = ".dependency-analyzer"


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        """Create default paths for the standard layout."""
        return cls(
            global_settings=Path.home() / SETTINGS_DIR_NAME / "settings.yaml",
            project_settings=Path.cwd() / SETTINGS_DIR_NAME / "settings.yaml",
        )


class AnalyzerSettings:
    """Settings reader with scope-aware merging.

    Usage:
        settings = AnalyzerSettings()
        enabled = settings.get_enabled_resolvers()  # Returns list or None
    """

    def __init__(self, paths: SettingsPaths | None = None) -> None:
        self.paths = paths or SettingsPaths.default()

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and merge settings from all scopes.

        Raises:
            ConfigurationError: If a settings file is malformed
        """
        result: dict[str, Any] = {}
        for path in [self.paths.global_settings, self.paths.project_settings]:
            if path.exists():
                result = deep_merge(result, self._read(path))
        return result

    # ----- Resolver settings -----

    def get_enabled_resolvers(self) -> list[str] | None:
        """Get identifiers of resolvers to run, or None for all."""
        return self._string_list("resolvers", "enabled")

    # ----- Output settings -----

    def get_output_format(self) -> str | None:
        """Get configured output format (yaml or json)."""
        return self._section("output").get("format")

    # ----- Discovery settings -----

    def get_exclude_dirs(self) -> list[str]:
        """Get extra directory names to skip during discovery."""
        return self._string_list("discovery", "exclude") or []

    # ----- Logging settings -----

    def get_log_settings(self) -> dict[str, Any]:
        """Get logging section (level, path)."""
        return self._section("logging")

    # ----- Internals -----

    def _string_list(self, section: str, key: str) -> list[str] | None:
        """Read a list of names, accepting a single string as a one-item list."""
        value = self._section(section).get(key)
        if value is None:
            return None
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            raise ConfigurationError(f"Setting '{section}.{key}' must be a name or a list of names")
        return [str(item) for item in value]

    def _section(self, name: str) -> dict[str, Any]:
        section = self.get_merged_settings().get(name) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"Settings section '{name}' must be a mapping")
        return section

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed settings file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e

        if not isinstance(content, dict):
            raise ConfigurationError(f"Settings file {path} must contain a mapping")
        return content


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, overlay taking precedence."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
